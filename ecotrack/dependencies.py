from datetime import datetime

from fastapi import Header

from .services.store import InMemoryStore, store


def get_user_id(x_user_id: str = Header(..., alias="X-User-Id", min_length=1)) -> str:
    """Identifier issued by the upstream identity provider."""
    return x_user_id


def get_store() -> InMemoryStore:
    return store


def get_now() -> datetime:
    return datetime.now()
