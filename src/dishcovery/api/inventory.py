"""Inventory endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from dishcovery.api.auth import get_container, require_user
from dishcovery.api.schemas import ItemCreateRequest, ItemUpdateRequest, serialize_item
from dishcovery.containers import AppContainer
from dishcovery.domain.auth import AuthenticatedUser
from dishcovery.services.expiry import InventoryFilter

router = APIRouter(prefix="/api/items", tags=["inventory"])


@router.get("")
async def list_items(
    filter: InventoryFilter = InventoryFilter.ALL,  # noqa: A002
    user: AuthenticatedUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the user's items with their expiry status."""
    annotated = container.inventory_service.list_items(user.id, filter)
    return {
        "items": [serialize_item(item, expiry) for item, expiry in annotated]
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_item(
    body: ItemCreateRequest,
    user: AuthenticatedUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Add an item to the user's inventory."""
    item = container.inventory_service.add_item(
        user.id, name=body.name, expiry_date=body.expiry_date, about=body.about
    )
    return {"item": serialize_item(item)}


@router.patch("/{item_id}")
async def update_item(
    item_id: UUID,
    body: ItemUpdateRequest,
    user: AuthenticatedUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Apply an inline edit to an owned item."""
    item = container.inventory_service.update_item(
        user.id,
        item_id,
        name=body.name,
        expiry_date=body.expiry_date,
        about=body.about,
    )
    return {"item": serialize_item(item)}


@router.delete("/{item_id}")
async def delete_item(
    item_id: UUID,
    user: AuthenticatedUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Delete an owned item."""
    return {"deleted": container.inventory_service.delete_item(user.id, item_id)}
