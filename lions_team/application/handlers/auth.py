"""Login and self-registration endpoints.

Passwords are compared as stored plaintext; no session or token is issued.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from lions_team.application.schemas import (
    LoginRequest,
    RegisterRequest,
    UserEnvelope,
    UserOut,
    entity_dict,
)
from lions_team.domain.models import NewAthlete, Role

from .dependencies import StorageDep
from .errors import bad_request

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=UserEnvelope)
async def login(payload: LoginRequest, storage: StorageDep) -> UserEnvelope:
    if not payload.username or not payload.password:
        raise bad_request("Username and password are required")

    user = await storage.users.get_by_username(payload.username)
    if user is None or user.password != payload.password:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    return UserEnvelope(user=UserOut.model_validate(entity_dict(user)))


@router.post("/register", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, storage: StorageDep) -> UserEnvelope:
    if await storage.users.get_by_username(payload.username) is not None:
        raise bad_request("Username already exists")
    if await storage.users.get_by_email(payload.email) is not None:
        raise bad_request("Email already exists")

    user = await storage.users.create(payload.to_domain())
    if user.role == Role.ATHLETE:
        await storage.athletes.create(NewAthlete(user_id=user.id))

    return UserEnvelope(user=UserOut.model_validate(entity_dict(user)))
