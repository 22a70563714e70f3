"""Community forum endpoints."""

from fastapi import APIRouter, Depends, Query, status

from dishcovery.api.auth import get_container, require_user
from dishcovery.api.schemas import ForumPostRequest, serialize_post
from dishcovery.containers import AppContainer
from dishcovery.domain.auth import AuthenticatedUser

router = APIRouter(prefix="/api/forum", tags=["forum"])


@router.get("", dependencies=[Depends(require_user)])
async def list_posts(
    limit: int = Query(default=50, ge=1, le=200),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return forum posts, newest first."""
    posts = container.forum_service.list_posts(limit)
    return {"posts": [serialize_post(post) for post in posts]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(
    body: ForumPostRequest,
    user: AuthenticatedUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Append a post to the forum."""
    post = container.forum_service.create_post(user.id, body.content)
    return {"post": serialize_post(post)}
