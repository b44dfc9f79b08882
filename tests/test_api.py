# tests/test_api.py: HTTP routes over the board actions
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from httpx import AsyncClient

from kanban import main
from kanban.db.models import BoardColumn


async def make_column(client: AsyncClient, title: str) -> dict:
    resp = await client.post("/api/columns/", json={"title": title})
    assert resp.status_code == 201
    columns = (await client.get("/api/columns/")).json()
    return next(c for c in columns if c["title"] == title)


@pytest.mark.asyncio
async def test_create_and_list_columns(client: AsyncClient):
    await make_column(client, "Todo")
    await make_column(client, "Done")

    resp = await client.get("/api/columns/")
    assert resp.status_code == 200
    data = resp.json()
    assert [(c["title"], c["order"]) for c in data] == [("Todo", 1), ("Done", 2)]


@pytest.mark.asyncio
async def test_create_column_invalid(client: AsyncClient):
    resp = await client.post("/api/columns/", json={"title": ""})
    assert resp.status_code == 422
    body = resp.json()
    assert body["success"] is False
    assert body["error"]["kind"] == "validation"
    assert body["error"]["details"] == {"title": ["Title is required"]}


@pytest.mark.asyncio
async def test_rename_column(client: AsyncClient):
    column = await make_column(client, "Todo")
    resp = await client.patch(f"/api/columns/{column['id']}", json={"title": "Backlog"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "data": None, "error": None}

    columns = (await client.get("/api/columns/")).json()
    assert columns[0]["title"] == "Backlog"


@pytest.mark.asyncio
async def test_rename_missing_column(client: AsyncClient):
    resp = await client.patch("/api/columns/999", json={"title": "x"})
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Column not found"


@pytest.mark.asyncio
async def test_create_task(client: AsyncClient):
    column = await make_column(client, "Todo")
    resp = await client.post(
        "/api/tasks/",
        json={"title": "Implement login", "description": "JWT", "column_id": column["id"]},
    )
    assert resp.status_code == 201
    task = resp.json()["data"]
    assert task["title"] == "Implement login"
    assert task["description"] == "JWT"
    assert task["order"] == 0


@pytest.mark.asyncio
async def test_create_task_without_title(client: AsyncClient):
    column = await make_column(client, "Todo")
    resp = await client.post("/api/tasks/", json={"title": "", "column_id": column["id"]})
    assert resp.status_code == 422
    assert "title" in resp.json()["error"]["details"]
    assert (await client.get("/api/tasks/")).json() == []


@pytest.mark.asyncio
async def test_create_task_unknown_column(client: AsyncClient):
    resp = await client.post("/api/tasks/", json={"title": "t", "column_id": 12})
    assert resp.status_code == 500
    assert resp.json()["error"]["kind"] == "persistence"


@pytest.mark.asyncio
async def test_update_task(client: AsyncClient):
    column = await make_column(client, "Todo")
    created = (
        await client.post("/api/tasks/", json={"title": "a", "column_id": column["id"]})
    ).json()["data"]

    resp = await client.patch(
        f"/api/tasks/{created['id']}",
        json={"title": "b", "description": "", "column_id": column["id"]},
    )
    assert resp.status_code == 200

    tasks = (await client.get("/api/tasks/")).json()
    assert tasks[0]["title"] == "b"
    assert tasks[0]["description"] is None


@pytest.mark.asyncio
async def test_update_missing_task(client: AsyncClient):
    column = await make_column(client, "Todo")
    resp = await client.patch(
        "/api/tasks/555", json={"title": "b", "column_id": column["id"]}
    )
    assert resp.status_code == 404
    assert resp.json()["error"]["kind"] == "not_found"


@pytest.mark.asyncio
async def test_move_and_board(client: AsyncClient):
    a = await make_column(client, "A")
    b = await make_column(client, "B")
    x = (await client.post("/api/tasks/", json={"title": "X", "column_id": a["id"]})).json()["data"]
    y = (await client.post("/api/tasks/", json={"title": "Y", "column_id": a["id"]})).json()["data"]
    assert (x["order"], y["order"]) == (0, 1)

    resp = await client.post(f"/api/tasks/{x['id']}/move", json={"target_column_id": b["id"]})
    assert resp.status_code == 200

    board = (await client.get("/api/board")).json()
    assert [c["title"] for c in board["columns"]] == ["A", "B"]
    moved = next(t for t in board["tasks"] if t["id"] == x["id"])
    assert moved["column_id"] == b["id"]
    assert moved["order"] == 0


@pytest.mark.asyncio
async def test_board_reflects_writes(client: AsyncClient):
    assert (await client.get("/api/board")).json() == {"columns": [], "tasks": []}
    await make_column(client, "Todo")
    board = (await client.get("/api/board")).json()
    assert [c["title"] for c in board["columns"]] == ["Todo"]


@pytest.mark.asyncio
async def test_delete_column_removes_tasks(client: AsyncClient):
    a = await make_column(client, "A")
    await client.post("/api/tasks/", json={"title": "X", "column_id": a["id"]})

    resp = await client.delete(f"/api/columns/{a['id']}")
    assert resp.status_code == 200
    assert (await client.get("/api/tasks/")).json() == []


@pytest.mark.asyncio
async def test_delete_task(client: AsyncClient):
    a = await make_column(client, "A")
    x = (await client.post("/api/tasks/", json={"title": "X", "column_id": a["id"]})).json()["data"]

    resp = await client.delete(f"/api/tasks/{x['id']}")
    assert resp.status_code == 200
    assert (await client.get("/api/tasks/")).json() == []


@pytest.mark.asyncio
async def test_list_assignees(client: AsyncClient):
    resp = await client.get("/api/assignees")
    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == 5
    assert data[0]["name"] == "Sarah Chen"
    assert data[0]["avatar_url"].endswith("seed=Sarah")


@pytest.mark.asyncio
async def test_board_etag_and_not_modified(client: AsyncClient):
    await make_column(client, "Todo")
    resp = await client.get("/api/board")
    etag = resp.headers["etag"]

    cached = await client.get("/api/board", headers={"If-None-Match": etag})
    assert cached.status_code == 304
    assert cached.headers["etag"] == etag

    await make_column(client, "Done")
    fresh = await client.get("/api/board", headers={"If-None-Match": etag})
    assert fresh.status_code == 200
    assert fresh.headers["etag"] != etag
    assert [c["title"] for c in fresh.json()["columns"]] == ["Todo", "Done"]


@pytest.mark.asyncio
async def test_board_shows_writes_made_outside_the_api(client: AsyncClient, session_factory):
    column = await make_column(client, "Todo")
    assert (await client.get("/api/board")).json()["columns"][0]["title"] == "Todo"

    async with session_factory() as other:
        other.add(BoardColumn(title="From worker 2", order=2))
        stored = await other.get(BoardColumn, column["id"])
        stored.title = "Renamed by hand"
        await other.commit()

    board = (await client.get("/api/board")).json()
    assert [c["title"] for c in board["columns"]] == ["Renamed by hand", "From worker 2"]


@pytest.mark.asyncio
async def test_patch_task_without_description_keeps_it(client: AsyncClient):
    column = await make_column(client, "Todo")
    created = (
        await client.post(
            "/api/tasks/",
            json={"title": "a", "description": "keep", "column_id": column["id"]},
        )
    ).json()["data"]

    resp = await client.patch(
        f"/api/tasks/{created['id']}", json={"title": "b", "column_id": column["id"]}
    )
    assert resp.status_code == 200

    task = (await client.get("/api/tasks/")).json()[0]
    assert (task["title"], task["description"]) == ("b", "keep")


@pytest.mark.asyncio
async def test_create_task_rejects_string_column_id(client: AsyncClient):
    column = await make_column(client, "Todo")
    resp = await client.post("/api/tasks/", json={"title": "t", "column_id": str(column["id"])})
    assert resp.status_code == 422
    assert list(resp.json()["error"]["details"]) == ["column_id"]


@pytest.mark.asyncio
async def test_health_connected(client: AsyncClient, session_factory, monkeypatch):
    monkeypatch.setattr(main, "async_session", session_factory)

    resp = await client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"api": "ok", "database": "connected"}

    head = await client.head("/api/health")
    assert head.status_code == 200


@pytest.mark.asyncio
async def test_health_database_unreachable(client: AsyncClient, tmp_path, monkeypatch):
    # Parent directory does not exist, so SQLite cannot open the file
    broken = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'kanban.db'}")
    monkeypatch.setattr(
        main, "async_session", async_sessionmaker(broken, class_=AsyncSession)
    )

    resp = await client.get("/api/health")
    assert resp.status_code == 503
    body = resp.json()
    assert body["api"] == "ok"
    assert body["database"].startswith("error:")
    await broken.dispose()
