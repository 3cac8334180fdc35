"""Users Routes (compact binding): plain Starlette routes for list, create and get.

Invariants:
    - Same paths, status codes and bodies as the full binding for the operations it has
    - No PUT/DELETE: the router answers 405 for them
    - Session acquired from the app's DatabaseSessionManager and released on every exit path
"""

from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from users_api.infrastructure.database import get_db_manager
from users_api.infrastructure.user_repository import SqlAlchemyUserRepository
from users_api.services.user_service import UserService


async def list_users(request: Request) -> Response:
    async with get_db_manager(request).session() as db:
        users = await UserService(SqlAlchemyUserRepository(db)).list_users()
    return JSONResponse([u.model_dump(mode="json") for u in users])


async def create_user(request: Request) -> Response:
    form = await request.form()
    values = {key: _text(form.get(key)) for key in ("name", "email", "age")}
    async with get_db_manager(request).session() as db:
        await UserService(SqlAlchemyUserRepository(db)).create_user(values)
    return Response(status_code=201)


async def get_user(request: Request) -> Response:
    async with get_db_manager(request).session() as db:
        user = await UserService(SqlAlchemyUserRepository(db)).get_user(
            request.path_params["user_id"],
        )
    return JSONResponse(user.model_dump(mode="json"))


def _text(value: object) -> str | None:
    # Uploaded files are not valid field values
    return value if isinstance(value, str) else None


routes = [
    Route("/users", list_users, methods=["GET"]),
    Route("/users", create_user, methods=["POST"]),
    Route("/users/{user_id}", get_user, methods=["GET"]),
]
