# holocron/ports.py
"""Contracts for the collaborators that sit beside the upstream adapter.

Tokens and persistence are owned elsewhere; holocron only declares what it
expects from them. ``Page`` is shared with the persistence path, so a page
served from a local store and a page served from the upstream look the same
to the caller.
"""

from typing import Protocol, TypeVar, runtime_checkable

from .models import Page
from .pagination import PageRequest

T = TypeVar("T")


@runtime_checkable
class TokenService(Protocol):
    """Issues and checks access tokens for callers of the catalog."""

    def issue_token(self, identity: str) -> str: ...

    def validate(self, token: str) -> bool: ...


@runtime_checkable
class EntityRepository(Protocol[T]):
    """Persistence-side access to one entity type."""

    async def find_page(self, request: PageRequest) -> Page[T]: ...

    async def find_by_uid(self, uid: str) -> T | None: ...


__all__ = ["EntityRepository", "TokenService"]
