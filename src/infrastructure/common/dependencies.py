"""FastAPI dependencies shared by all routers."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends

from src.constants import DEFAULT_USER_ID


def get_current_user_id() -> UUID:
    """
    Identity of the caller.

    There is no authentication yet, so every request runs as DEFAULT_USER_ID.
    """
    return DEFAULT_USER_ID


CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
