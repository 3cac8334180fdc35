"""User Service: the five user operations shared by every router binding.

Invariants:
    - Each operation runs parse -> validate -> persist -> respond, in that order
    - Malformed input is rejected before any persistence call
    - At most one mutating repository call per operation
    - Update: existence check, then full validation, then in-memory merge, then one save
    - Serialization happens after persistence; its failure never undoes a commit

Design Decisions:
    - Operations take raw path/form strings so both bindings stay transport-only
    - Depends on the UserRepository protocol, not on SQLAlchemy
"""

import logging
from typing import Sequence

from pydantic import ValidationError

from users_api.core.domain_types import UserId
from users_api.core.errors import (
    ErrorContext, MalformedInputError, ResourceNotFoundError, SerializationError,
)
from users_api.core.parse_user_input import (
    FormValues, UserPatch, parse_user_draft, parse_user_id, parse_user_patch,
)
from users_api.core.repository_protocols import UserLike, UserRepository
from users_api.schemas.user import UserResponse

logger = logging.getLogger(__name__)


def serialize_user(user: UserLike) -> UserResponse:
    """Build the response model, mapping encode failures to SerializationError."""
    try:
        return UserResponse.model_validate(user)
    except ValidationError as e:
        raise SerializationError(
            str(e), ErrorContext(user_id=getattr(user, "id", None), operation="serialize"),
        ) from e


def serialize_users(users: Sequence[UserLike]) -> list[UserResponse]:
    return [serialize_user(u) for u in users]


def apply_patch(user: UserLike, patch: UserPatch) -> None:
    """Overwrite only the fields the patch carries."""
    if patch.name is not None:
        user.name = patch.name
    if patch.email is not None:
        user.email = patch.email
    if patch.age is not None:
        user.age = patch.age


class UserService:
    """List, get, create, update and delete users through a UserRepository."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def list_users(self) -> list[UserResponse]:
        users = await self.repository.find_all()
        return serialize_users(users)

    async def get_user(self, raw_id: str | None) -> UserResponse:
        user = await self._get_or_404(_parse_id(raw_id, "get"))
        return serialize_user(user)

    async def create_user(self, form: FormValues) -> None:
        try:
            draft = parse_user_draft(form)
        except MalformedInputError as e:
            e.context.operation = "create"
            logger.warning(f"Rejected user creation: {e.message}", extra={"field": e.field})
            raise
        user = await self.repository.insert(draft.name, draft.email, draft.age)
        logger.info("User created", extra={"user_id": user.id})

    async def update_user(self, raw_id: str | None, form: FormValues) -> None:
        user_id = _parse_id(raw_id, "update")
        user = await self._get_or_404(user_id)
        try:
            patch = parse_user_patch(form)
        except MalformedInputError as e:
            e.context.user_id = user_id
            e.context.operation = "update"
            logger.warning(
                f"Rejected update of user {user_id}: {e.message}",
                extra={"user_id": user_id, "field": e.field},
            )
            raise
        apply_patch(user, patch)
        await self.repository.save(user)
        logger.info("User updated", extra={"user_id": user_id})

    async def delete_user(self, raw_id: str | None) -> None:
        user_id = _parse_id(raw_id, "delete")
        user = await self._get_or_404(user_id)
        await self.repository.delete(user)
        logger.info("User deleted", extra={"user_id": user_id})

    async def _get_or_404(self, user_id: UserId) -> UserLike:
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id, ErrorContext(user_id=user_id))
        return user


def _parse_id(raw_id: str | None, operation: str) -> UserId:
    try:
        return parse_user_id(raw_id)
    except MalformedInputError as e:
        e.context.operation = operation
        logger.warning(f"Rejected user id: {e.message}", extra={"field": "id"})
        raise
