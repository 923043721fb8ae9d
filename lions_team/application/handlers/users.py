from __future__ import annotations

from fastapi import APIRouter

from lions_team.application.schemas import UserOut, entity_dict

from .dependencies import StorageDep
from .errors import not_found

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: str, storage: StorageDep) -> UserOut:
    user = await storage.users.get(user_id)
    if user is None:
        raise not_found("User")
    return UserOut.model_validate(entity_dict(user))
