"""User helpers: create users over HTTP and look up their assigned ids.

POST /users does not return the new id, so helpers find it through GET /users.
"""


async def create_user(client, name="Ann", email="a@x.com", age="30"):
    res = await client.post(
        "/users", data={"name": name, "email": email, "age": str(age)},
    )
    assert res.status_code == 201, res.text
    return res


async def list_users(client) -> list[dict]:
    res = await client.get("/users")
    assert res.status_code == 200, res.text
    return res.json()


async def create_user_and_get_id(client, **fields) -> int:
    before = {u["id"] for u in await list_users(client)}
    await create_user(client, **fields)
    after = await list_users(client)
    new_ids = [u["id"] for u in after if u["id"] not in before]
    assert len(new_ids) == 1
    return new_ids[0]
