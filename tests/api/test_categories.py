"""Tests for category endpoints."""
from httpx import AsyncClient

from models.category import DEFAULT_CATEGORY_COLOR, DEFAULT_CATEGORY_ICON


async def _create_category(client: AsyncClient, **fields: object) -> dict:
    payload = {"name": "Test"}
    payload.update(fields)
    response = await client.post("/api/categories", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def test__create_category__defaults(client: AsyncClient) -> None:
    """icon and color fall back to defaults; parentId is null."""
    data = await _create_category(client, name="Prompts for Work")
    assert data["name"] == "Prompts for Work"
    assert data["icon"] == DEFAULT_CATEGORY_ICON
    assert data["color"] == DEFAULT_CATEGORY_COLOR
    assert data["description"] is None
    assert data["parentId"] is None
    assert "createdAt" in data


async def test__create_category__all_fields(client: AsyncClient) -> None:
    """All category fields can be provided."""
    parent = await _create_category(client, name="Parent")
    data = await _create_category(
        client,
        name="Child",
        description="Nested",
        icon="fas fa-star",
        color="#FFFFFF",
        parentId=parent["id"],
    )
    assert data["icon"] == "fas fa-star"
    assert data["color"] == "#FFFFFF"
    assert data["parentId"] == parent["id"]


async def test__create_category__name_required(client: AsyncClient) -> None:
    """Missing or blank name returns 400."""
    response = await client.post("/api/categories", json={})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid category data"
    assert response.json()["errors"][0]["field"] == "name"

    response = await client.post("/api/categories", json={"name": "   "})
    assert response.status_code == 400


async def test__create_category__duplicate_name_allowed(client: AsyncClient) -> None:
    """Name uniqueness is not enforced by the in-memory store."""
    first = await _create_category(client, name="Same")
    second = await _create_category(client, name="Same")
    assert first["id"] != second["id"]


async def test__list_categories__sorted_by_name(client: AsyncClient) -> None:
    """Categories are listed alphabetically."""
    await _create_category(client, name="Writing")
    await _create_category(client, name="analysis")
    await _create_category(client, name="Coding")

    response = await client.get("/api/categories")
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["analysis", "Coding", "Writing"]


async def test__get_category__success_and_not_found(client: AsyncClient) -> None:
    """Get by id returns the category, or 404."""
    created = await _create_category(client)
    response = await client.get(f"/api/categories/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created

    response = await client.get("/api/categories/missing")
    assert response.status_code == 404
    assert response.json()["message"] == "Category not found"


async def test__update_category__partial(client: AsyncClient) -> None:
    """Only provided fields change."""
    created = await _create_category(client, name="Old", description="keep me")
    response = await client.patch(
        f"/api/categories/{created['id']}",
        json={"name": "New", "color": "#000000"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "New"
    assert data["color"] == "#000000"
    assert data["description"] == "keep me"
    assert data["icon"] == DEFAULT_CATEGORY_ICON


async def test__update_category__not_found(client: AsyncClient) -> None:
    """Updating an unknown category returns 404."""
    response = await client.patch("/api/categories/missing", json={"name": "X"})
    assert response.status_code == 404


async def test__update_category__null_icon_rejected(client: AsyncClient) -> None:
    """icon cannot be cleared."""
    created = await _create_category(client)
    response = await client.patch(f"/api/categories/{created['id']}", json={"icon": None})
    assert response.status_code == 400


async def test__delete_category__does_not_cascade(client: AsyncClient) -> None:
    """Deleting a category leaves its prompts with a dangling categoryId."""
    category = await _create_category(client)
    prompt = (
        await client.post(
            "/api/prompts",
            json={"title": "T", "content": "C", "categoryId": category["id"]},
        )
    ).json()

    response = await client.delete(f"/api/categories/{category['id']}")
    assert response.status_code == 204

    response = await client.get(f"/api/prompts/{prompt['id']}")
    assert response.status_code == 200
    assert response.json()["categoryId"] == category["id"]

    response = await client.get("/api/categories/prompt-counts")
    assert category["id"] not in response.json()


async def test__delete_category__missing(client: AsyncClient) -> None:
    """Deleting an unknown category returns 404."""
    response = await client.delete("/api/categories/missing")
    assert response.status_code == 404


async def test__prompt_counts__archiving_removes_from_count(client: AsyncClient) -> None:
    """A category with one prompt counts 1; archiving it drops the count to 0."""
    category = await _create_category(client, name="Test")
    prompt = (
        await client.post(
            "/api/prompts",
            json={"title": "T", "content": "C", "categoryId": category["id"]},
        )
    ).json()

    response = await client.get("/api/categories/prompt-counts")
    assert response.status_code == 200
    assert response.json() == {category["id"]: 1}

    await client.patch(f"/api/prompts/{prompt['id']}", json={"isArchived": True})

    response = await client.get("/api/categories/prompt-counts")
    assert response.json() == {category["id"]: 0}

    response = await client.get(f"/api/prompts/{prompt['id']}")
    assert response.status_code == 200
    assert response.json()["isArchived"] is True


async def test__prompt_counts__ignores_uncategorized(client: AsyncClient) -> None:
    """Prompts without a matching category are not counted."""
    category = await _create_category(client)
    await client.post("/api/prompts", json={"title": "T", "content": "C"})
    await client.post(
        "/api/prompts",
        json={"title": "T", "content": "C", "categoryId": "gone"},
    )

    response = await client.get("/api/categories/prompt-counts")
    assert response.json() == {category["id"]: 0}
