from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Response, status

from lions_team.application.schemas import GalleryItemCreate, GalleryItemOut, entity_dict

from .dependencies import StorageDep
from .errors import not_found

router = APIRouter(prefix="/api/gallery", tags=["gallery"])


@router.get("", response_model=list[GalleryItemOut])
async def list_gallery(storage: StorageDep, album: Optional[str] = None) -> list[GalleryItemOut]:
    if album:
        items = await storage.gallery.list_by_album(album)
    else:
        items = await storage.gallery.list_all()
    return [GalleryItemOut.model_validate(entity_dict(item)) for item in items]


@router.post("", response_model=GalleryItemOut, status_code=status.HTTP_201_CREATED)
async def create_gallery_item(payload: GalleryItemCreate, storage: StorageDep) -> GalleryItemOut:
    item = await storage.gallery.create(payload.to_domain())
    return GalleryItemOut.model_validate(entity_dict(item))


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_gallery_item(item_id: str, storage: StorageDep) -> Response:
    if not await storage.gallery.delete(item_id):
        raise not_found("Gallery item")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
