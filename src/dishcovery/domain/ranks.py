"""Chef rank tiers derived from the successful cooks counter."""

from dataclasses import dataclass
from enum import StrEnum

AMATEUR_THRESHOLD = 1
ROOKIE_THRESHOLD = 5
# Expert is awarded strictly above 15 cooks; progress math uses the same bound.
EXPERT_THRESHOLD = 16


class ChefRank(StrEnum):
    """Named chef tiers."""

    AMATEUR = "Amateur"
    ROOKIE_CHEF = "Rookie Chef"
    EXPERT_CHEF = "Expert Chef"


_TIERS: tuple[tuple[int, ChefRank], ...] = (
    (AMATEUR_THRESHOLD, ChefRank.AMATEUR),
    (ROOKIE_THRESHOLD, ChefRank.ROOKIE_CHEF),
    (EXPERT_THRESHOLD, ChefRank.EXPERT_CHEF),
)


@dataclass(frozen=True)
class RankProgress:
    """Current tier plus the distance to the next one."""

    rank: ChefRank
    successful_cooks: int
    next_rank: ChefRank | None
    remaining: int
    progress_percent: float


def rank_for(successful_cooks: int) -> ChefRank:
    """Return the tier for a cook count; zero cooks shows as Amateur."""
    rank = ChefRank.AMATEUR
    for threshold, tier in _TIERS:
        if successful_cooks >= threshold:
            rank = tier
    return rank


def rank_progress(successful_cooks: int) -> RankProgress:
    """Return the tier and the remaining cooks to the next tier boundary."""
    cooks = max(successful_cooks, 0)
    lower = 0
    # Amateur is shown from zero cooks, so the first milestone is Rookie Chef.
    for threshold, tier in _TIERS[1:]:
        if cooks < threshold:
            span = threshold - lower
            percent = (cooks - lower) / span
            return RankProgress(
                rank=rank_for(cooks),
                successful_cooks=cooks,
                next_rank=tier,
                remaining=threshold - cooks,
                progress_percent=round(percent * 100, 1),
            )
        lower = threshold
    return RankProgress(
        rank=ChefRank.EXPERT_CHEF,
        successful_cooks=cooks,
        next_rank=None,
        remaining=0,
        progress_percent=100.0,
    )
