"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell, dependency arrows point inward only
    - All persistence accessed through the UserRepository protocol
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the pure parsing in core
      never awaits anything
"""

from typing import Protocol, Sequence

from users_api.core.domain_types import UserId


class UserLike(Protocol):
    """Structural contract for User records passed between gateway and service."""
    id: int
    name: str
    email: str
    age: int


class UserRepository(Protocol):
    """Persistence Gateway for users, implemented by infrastructure."""
    async def find_all(self) -> Sequence[UserLike]: ...
    async def find_by_id(self, user_id: UserId) -> UserLike | None: ...
    async def insert(self, name: str, email: str, age: int) -> UserLike: ...
    async def save(self, user: UserLike) -> None: ...
    async def delete(self, user: UserLike) -> None: ...
