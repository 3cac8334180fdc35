"""User Schemas: Pydantic models for the JSON response boundary.

Invariants:
    - UserResponse carries exactly id, name, email, age (no envelope)
    - id and age are non-negative integers

Design Decisions:
    - from_attributes: built directly from ORM rows
    - Request bodies are form-encoded and parsed in core/parse_user_input.py,
      so there are no request schemas here
"""

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """User response, public-facing user data."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(ge=0)
    name: str
    email: str
    age: int = Field(ge=0)
