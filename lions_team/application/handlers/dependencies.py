"""FastAPI dependencies shared by the route modules."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from lions_team.application.ports.storage import Storage


def get_storage(request: Request) -> Storage:
    """Return the storage facade attached to the running application."""

    return request.app.state.storage


StorageDep = Annotated[Storage, Depends(get_storage)]
