"""Parse User Input: pure parsing of path ids and form fields.

Invariants:
    - parse_uint32 accepts only ASCII decimal digits, value <= UINT32_MAX
    - Signs, whitespace, underscores, and empty values are malformed
    - parse_user_patch validates every supplied field before returning;
      a caller never sees a partially validated patch
    - Empty strings in update forms mean "leave unchanged"
    - Creation rejects an empty name or email; an empty string is never stored for either

Design Decisions:
    - Explicit digit check instead of bare int(): int() accepts "+5", " 5 ", "1_000"
      and non-ASCII digits, none of which are valid unsigned integers on the wire
"""

from dataclasses import dataclass
from typing import Mapping

from users_api.core.domain_types import UINT32_MAX, UserId
from users_api.core.errors import MalformedInputError

FormValues = Mapping[str, str | None]


@dataclass(frozen=True)
class UserDraft:
    """Validated creation input, every field present."""
    name: str
    email: str
    age: int


@dataclass(frozen=True)
class UserPatch:
    """Validated update input, None means "leave unchanged"."""
    name: str | None = None
    email: str | None = None
    age: int | None = None


def parse_uint32(raw: str | None, field: str) -> int:
    """Parse an unsigned 32-bit decimal integer or raise MalformedInputError."""
    if not raw or not (raw.isascii() and raw.isdigit()):
        raise MalformedInputError(field, raw)
    value = int(raw)
    if value > UINT32_MAX:
        raise MalformedInputError(field, raw)
    return value


def parse_user_id(raw: str | None) -> UserId:
    return UserId(parse_uint32(raw, "id"))


def parse_user_draft(form: FormValues) -> UserDraft:
    """Validate creation form: name, email required; age must be a uint32."""
    age = parse_uint32(form.get("age"), "age")
    name = form.get("name")
    if not name:
        raise MalformedInputError("name", name)
    email = form.get("email")
    if not email:
        raise MalformedInputError("email", email)
    return UserDraft(name=name, email=email, age=age)


def parse_user_patch(form: FormValues) -> UserPatch:
    """Validate update form. Absent or empty fields are left as None."""
    raw_age = form.get("age")
    age = parse_uint32(raw_age, "age") if raw_age else None
    return UserPatch(
        name=form.get("name") or None,
        email=form.get("email") or None,
        age=age,
    )
