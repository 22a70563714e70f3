"""Cook confirmation: consume ingredients and advance the chef rank."""

import logging
from dataclasses import dataclass
from uuid import UUID

from dishcovery.domain.items import InventoryItem
from dishcovery.domain.ranks import ChefRank, rank_for
from dishcovery.errors import CookConfirmationError, PartialCookError
from dishcovery.services.inventory import InventoryRepository
from dishcovery.services.profiles import ProfileRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CookResult:
    """Outcome of a successful cook confirmation."""

    deleted_item_ids: list[str]
    successful_cooks: int
    rank: ChefRank
    rank_changed: bool


@dataclass
class CookService:
    """Remove used ingredients, then bump the cook counter and rank.

    The writes are sequential with no rollback. Deletions happen first; if a
    later write fails the error says which rows are already gone, and
    confirming again is safe because deleting a missing row is a no-op.
    """

    inventory_repository: InventoryRepository
    profile_repository: ProfileRepository

    def confirm_cooked(
        self,
        user_id: UUID,
        ingredient_names: list[str] | None = None,
        item_ids: list[UUID] | None = None,
    ) -> CookResult:
        """Record that the user cooked a recipe using these inventory items."""
        deleted: list[str] = []
        try:
            targets = (
                list(dict.fromkeys(item_ids))
                if item_ids
                else self._resolve_names(user_id, ingredient_names or [])
            )
            for item_id in targets:
                if self.inventory_repository.delete_item(user_id, item_id):
                    deleted.append(str(item_id))

            profile = self.profile_repository.get_profile(user_id)
            previous_cooks = profile.successful_cooks if profile else 0
            previous_rank = profile.rank if profile else None
            successful_cooks = previous_cooks + 1
            rank = rank_for(successful_cooks)
            self.profile_repository.save_cook_stats(
                user_id, successful_cooks, rank.value
            )
        except Exception as exc:
            logger.exception(
                "Cook confirmation failed for user %s after %d deletions",
                user_id,
                len(deleted),
            )
            if deleted:
                raise PartialCookError(deleted_item_ids=deleted) from exc
            raise CookConfirmationError() from exc

        logger.info(
            "User %s cooked; removed %d items, cooks=%d rank=%s",
            user_id,
            len(deleted),
            successful_cooks,
            rank,
        )
        return CookResult(
            deleted_item_ids=deleted,
            successful_cooks=successful_cooks,
            rank=rank,
            rank_changed=previous_rank != rank.value,
        )

    def _resolve_names(self, user_id: UUID, names: list[str]) -> list[UUID]:
        """Match names to item ids by exact name, one row per listed name."""
        remaining: list[InventoryItem] = list(
            self.inventory_repository.list_items(user_id)
        )
        resolved: list[UUID] = []
        for name in names:
            matches = [item for item in remaining if item.name == name]
            if not matches:
                continue
            if len(matches) > 1:
                logger.warning(
                    "Ingredient %r matches %d items; removing the first",
                    name,
                    len(matches),
                )
            chosen = matches[0]
            remaining.remove(chosen)
            resolved.append(chosen.id)
        return resolved
