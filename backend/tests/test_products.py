from http import HTTPStatus

from fastapi.testclient import TestClient


def _add_product(client: TestClient, seller: str, name: str, category: str = "phones", **extra):
    response = client.post(
        "/products",
        json={"sellerEmail": seller, "name": name, "category": category, **extra},
    )
    assert response.status_code == HTTPStatus.OK
    return response.json()


def _product_named(client: TestClient, name: str):
    return next(p for p in client.get("/products").json() if p["name"] == name)


def test_create_product_returns_insert_result(client: TestClient) -> None:
    result = _add_product(client, "seller@example.com", "Walton Primo")

    assert result["acknowledged"] is True
    assert len(result["insertedId"]) == 24


def test_product_from_verified_seller_is_verified(client: TestClient, create_user) -> None:
    seller = create_user("seller@example.com")
    client.put(f"/users/verify/{seller['_id']}")

    _add_product(client, "seller@example.com", "Walton Primo")

    assert _product_named(client, "Walton Primo")["verified"] is True


def test_product_from_unverified_seller_is_not_verified(client: TestClient, create_user) -> None:
    create_user("seller@example.com")

    _add_product(client, "seller@example.com", "Walton Primo")

    assert _product_named(client, "Walton Primo")["verified"] is False


def test_product_without_seller_record_is_not_verified(client: TestClient) -> None:
    _add_product(client, "ghost@example.com", "Walton Primo")

    assert _product_named(client, "Walton Primo")["verified"] is False


def test_client_cannot_claim_verified(client: TestClient) -> None:
    _add_product(client, "ghost@example.com", "Walton Primo", verified=True)

    assert _product_named(client, "Walton Primo")["verified"] is False


def test_extra_fields_are_stored(client: TestClient) -> None:
    _add_product(client, "seller@example.com", "Canon EOS", "cameras", price=27000, condition="used")

    product = _product_named(client, "Canon EOS")
    assert product["price"] == 27000
    assert product["condition"] == "used"
    assert product["sellerEmail"] == "seller@example.com"


def test_list_products_filters_by_exact_category(client: TestClient) -> None:
    _add_product(client, "a@example.com", "Walton Primo", "phones")
    _add_product(client, "a@example.com", "HP EliteBook", "laptops")
    _add_product(client, "b@example.com", "Symphony Z", "phones")

    phones = client.get("/products", params={"category": "phones"}).json()
    assert sorted(p["name"] for p in phones) == ["Symphony Z", "Walton Primo"]

    assert client.get("/products", params={"category": "Phones"}).json() == []
    assert len(client.get("/products").json()) == 3


def test_create_product_requires_seller_email(client: TestClient) -> None:
    response = client.post("/products", json={"name": "Orphan"})

    assert response.status_code == HTTPStatus.UNPROCESSABLE_ENTITY
