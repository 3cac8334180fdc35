"""Users Routes (full binding): FastAPI router exposing all five user operations.

Invariants:
    - GET /users → 200 JSON array; POST /users → 201 empty body
    - GET /users/{id} → 200 JSON user; PUT → 200 empty body; DELETE → 204 empty body
    - Path ids and form values reach UserService as raw strings; parsing happens there
    - One AsyncSession per request, released by get_db on every exit path
"""

from fastapi import APIRouter, Depends, Form, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from users_api.infrastructure.database import get_db
from users_api.infrastructure.user_repository import SqlAlchemyUserRepository
from users_api.schemas.user import UserResponse
from users_api.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(SqlAlchemyUserRepository(db))


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """List every user."""
    return await service.list_users()


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_user(
    name: str | None = Form(None),
    email: str | None = Form(None),
    age: str | None = Form(None),
    service: UserService = Depends(get_user_service),
):
    """Create a user from form fields. The new id is not returned."""
    await service.create_user({"name": name, "email": email, "age": age})
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str, service: UserService = Depends(get_user_service),
):
    """Get a single user."""
    return await service.get_user(user_id)


@router.put("/{user_id}", response_class=Response)
async def update_user(
    user_id: str,
    name: str | None = Form(None),
    email: str | None = Form(None),
    age: str | None = Form(None),
    service: UserService = Depends(get_user_service),
):
    """Merge the supplied, non-empty fields into an existing user."""
    await service.update_user(user_id, {"name": name, "email": email, "age": age})
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
)
async def delete_user(
    user_id: str, service: UserService = Depends(get_user_service),
):
    """Delete a user. A second delete of the same id is a 404."""
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
