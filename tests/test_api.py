"""End-to-end tests of the HTTP API."""

import pytest
from httpx import AsyncClient


async def _create_set(client: AsyncClient, **overrides: object) -> dict:
    body = {"title": "Capitals", "description": "World capitals", "private": False, "creator": "alice"}
    body.update(overrides)
    response = await client.post("/sets", json=body)
    assert response.status_code == 200
    return response.json()


async def _create_card(client: AsyncClient, set_id: str, question: str, answer: str) -> dict:
    response = await client.post("/cards", json={"set": set_id, "question": question, "answer": answer})
    assert response.status_code == 200
    return response.json()


# --- Sets ---


@pytest.mark.asyncio
async def test_create_and_get_set(client: AsyncClient) -> None:
    created = await _create_set(client, private=True)
    assert created["cards"] == 0

    response = await client.get(f"/sets/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {
        "id": created["id"],
        "title": "Capitals",
        "description": "World capitals",
        "private": True,
        "creator": "alice",
        "cards": 0,
    }


@pytest.mark.asyncio
async def test_get_missing_set_is_404(client: AsyncClient) -> None:
    response = await client.get("/sets/rec_missing")
    assert response.status_code == 404
    assert response.json() == {"detail": "Set with id rec_missing not found"}


@pytest.mark.asyncio
async def test_list_sets_only_public_summaries(client: AsyncClient) -> None:
    public = await _create_set(client, title="Rivers")
    await _create_set(client, title="Secret", private=True)

    response = await client.get("/sets")
    assert response.status_code == 200
    assert response.json() == [
        {"id": public["id"], "title": "Rivers", "description": "World capitals", "cards": 0}
    ]


@pytest.mark.asyncio
async def test_create_set_requires_title(client: AsyncClient) -> None:
    response = await client.post("/sets", json={"description": "no title"})
    assert response.status_code == 422


# --- Favorites ---


@pytest.mark.asyncio
async def test_favorites_round_trip(client: AsyncClient) -> None:
    card_set = await _create_set(client)
    response = await client.post("/usersets", json={"user": "bob", "set": card_set["id"]})
    assert response.status_code == 200
    link = response.json()
    assert link["user"] == "bob"
    assert link["set"] == card_set["id"]

    response = await client.get("/usersets", params={"user": "bob"})
    assert response.status_code == 200
    assert response.json() == [{"id": link["id"], "set": card_set}]

    assert (await client.get("/usersets", params={"user": "carol"})).json() == []


@pytest.mark.asyncio
async def test_list_favorites_requires_user(client: AsyncClient) -> None:
    assert (await client.get("/usersets")).status_code == 422


# --- Cards ---


@pytest.mark.asyncio
async def test_list_cards_of_set(client: AsyncClient) -> None:
    card_set = await _create_set(client)
    card = await _create_card(client, card_set["id"], "France?", "Paris")
    assert card["set"] == card_set["id"]

    response = await client.get(f"/cards/{card_set['id']}")
    assert response.status_code == 200
    assert response.json() == [card]
    assert (await client.get("/cards/rec_other")).json() == []


@pytest.mark.asyncio
async def test_learn_returns_random_subset(client: AsyncClient) -> None:
    card_set = await _create_set(client)
    for country, capital in [("France", "Paris"), ("Spain", "Madrid"), ("Italy", "Rome"), ("Peru", "Lima")]:
        await _create_card(client, card_set["id"], country, capital)

    response = await client.get("/cards/learn", params={"setid": card_set["id"], "limit": 2})
    assert response.status_code == 200
    drawn = response.json()
    assert len(drawn) == 2
    assert all(set(card) == {"question", "answer"} for card in drawn)
    assert len({card["question"] for card in drawn}) == 2

    response = await client.get("/cards/learn", params={"setid": card_set["id"], "limit": 0})
    assert response.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", ["-1", "2.5", "many"])
async def test_learn_rejects_invalid_limit(client: AsyncClient, limit: str) -> None:
    response = await client.get("/cards/learn", params={"setid": "rec_any", "limit": limit})
    assert response.status_code == 422


# --- Learnings ---


@pytest.mark.asyncio
async def test_record_learning_computes_score(client: AsyncClient) -> None:
    card_set = await _create_set(client)
    response = await client.post(
        "/learnings",
        json={"user": "alice", "set": card_set["id"], "cards_total": "10", "cards_correct": 7, "cards_wrong": 3},
    )
    assert response.status_code == 200
    learning = response.json()
    assert learning["score"] == 70
    assert learning["cards_total"] == 10
    assert learning["set"] == card_set["id"]


@pytest.mark.asyncio
async def test_empty_learning_score_is_null_not_zero(client: AsyncClient) -> None:
    response = await client.post(
        "/learnings",
        json={"user": "alice", "set": "rec_any", "cards_total": 0, "cards_correct": 0, "cards_wrong": 0},
    )
    assert response.status_code == 200
    assert response.json()["score"] is None


@pytest.mark.asyncio
async def test_record_learning_rejects_negative_counts(client: AsyncClient) -> None:
    response = await client.post(
        "/learnings",
        json={"user": "alice", "set": "rec_any", "cards_total": -1, "cards_correct": 0, "cards_wrong": 0},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_learnings_expands_set(client: AsyncClient) -> None:
    card_set = await _create_set(client)
    await client.post(
        "/learnings",
        json={"user": "alice", "set": card_set["id"], "cards_total": 4, "cards_correct": 1, "cards_wrong": 3},
    )

    response = await client.get("/learnings", params={"user": "alice"})
    assert response.status_code == 200
    [learning] = response.json()
    assert learning["set"] == card_set
    assert learning["score"] == 25
    assert (await client.get("/learnings", params={"user": "bob"})).json() == []


# --- Scenario ---


@pytest.mark.asyncio
async def test_capitals_scenario(client: AsyncClient) -> None:
    card_set = await _create_set(client, title="Capitals", private=False)
    set_id = card_set["id"]
    await client.post("/usersets", json={"user": "alice", "set": set_id})
    for country, capital in [("France", "Paris"), ("Japan", "Tokyo"), ("Kenya", "Nairobi")]:
        await _create_card(client, set_id, country, capital)

    assert (await client.get(f"/sets/{set_id}")).json()["cards"] == 3
    public_ids = [s["id"] for s in (await client.get("/sets")).json()]
    assert set_id in public_ids

    drawn = (await client.get("/cards/learn", params={"setid": set_id, "limit": 5})).json()
    assert sorted(card["answer"] for card in drawn) == ["Nairobi", "Paris", "Tokyo"]

    response = await client.delete(f"/sets/{set_id}")
    assert response.status_code == 200
    assert response.json() == {"success": True}

    assert (await client.get("/usersets", params={"user": "alice"})).json() == []
    assert (await client.get(f"/sets/{set_id}")).status_code == 404
