from decimal import Decimal


def add_line(client, user_id, product_id, amount, total):
    return client.post(
        "/cart-products",
        json={
            "newProduct": {"product_id": product_id, "amount": amount},
            "userId": user_id,
            "totalAmount": total,
        },
    )


def test_user_cart_scenario(client, user_id):
    resp = add_line(client, user_id, 1, 2, "999.98")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Cart product/(s) added!", "outcome": "inserted"}

    rows = client.get("/cart-products").json()
    assert len(rows) == 1
    row = rows[0]
    assert row["user_id"] == user_id
    assert row["product_id"] == 1
    assert row["amount"] == 2
    assert row["name"] == "Persian Carpet"
    assert row["description"] == "Hand-knotted wool carpet"
    assert Decimal(str(row["price"])) == Decimal("499.99")
    assert Decimal(str(row["totalAmount"])) == Decimal("999.98")


def test_empty_cart_is_empty_list(client):
    resp = client.get("/cart-products")
    assert resp.status_code == 200
    assert resp.json() == []


def test_second_add_does_not_touch_existing_line(client, user_id):
    add_line(client, user_id, 2, 1, "189.00")

    resp = add_line(client, user_id, 2, 5, "945.00")
    assert resp.status_code == 200
    assert resp.json()["outcome"] == "already_exists"

    rows = client.get("/cart-products").json()
    assert len(rows) == 1
    assert rows[0]["amount"] == 1
    assert Decimal(str(rows[0]["totalAmount"])) == Decimal("189.00")


def test_add_with_user_object(client, user_id):
    resp = client.post(
        "/cart-products",
        json={"newProduct": {"product_id": 3, "amount": 1}, "user": {"id": user_id}},
    )
    assert resp.status_code == 200
    rows = client.get("/cart-products", params={"userId": user_id}).json()
    assert rows[0]["product_id"] == 3
    assert Decimal(str(rows[0]["totalAmount"])) == Decimal("0")


def test_zero_amount_is_noop(client, user_id):
    resp = add_line(client, user_id, 1, 0, "0")
    assert resp.status_code == 200
    assert resp.json()["outcome"] is None
    assert client.get("/cart-products").json() == []


def test_missing_user_is_bad_request(client):
    resp = client.post("/cart-products", json={"newProduct": {"product_id": 1, "amount": 1}})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Bad Request"


def test_missing_product_is_bad_request(client, user_id):
    resp = client.post("/cart-products", json={"userId": user_id, "totalAmount": 10})
    assert resp.status_code == 400


def test_unknown_user_is_internal_failure(client):
    resp = add_line(client, 999, 1, 1, "499.99")
    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal Server Error"}


def test_update_line(client, user_id):
    add_line(client, user_id, 1, 1, "499.99")

    resp = client.put(
        "/cart-products/1",
        json={"userId": user_id, "newProduct": {"amount": 3}, "totalAmount": "1499.97"},
    )
    assert resp.status_code == 200
    rows = resp.json()
    assert rows[0]["amount"] == 3
    assert Decimal(str(rows[0]["totalAmount"])) == Decimal("1499.97")


def test_update_total_only(client, user_id):
    add_line(client, user_id, 1, 2, "999.98")

    resp = client.put("/cart-products/1", json={"userId": user_id, "totalAmount": "10.00"})
    assert resp.status_code == 200
    assert resp.json()[0]["amount"] == 2
    assert Decimal(str(resp.json()[0]["totalAmount"])) == Decimal("10.00")


def test_update_missing_line_is_404_without_mutation(client, user_id):
    add_line(client, user_id, 1, 2, "999.98")

    resp = client.put(
        "/cart-products/2",
        json={"userId": user_id, "newProduct": {"amount": 7}, "totalAmount": "1.00"},
    )
    assert resp.status_code == 404
    assert resp.json() == {"message": "Product not found"}

    rows = client.get("/cart-products").json()
    assert len(rows) == 1
    assert rows[0]["amount"] == 2


def test_delete_line(client, user_id):
    add_line(client, user_id, 1, 1, "499.99")
    add_line(client, user_id, 2, 1, "189.00")

    resp = client.request("DELETE", "/cart-products/1", json={"userId": user_id})
    assert resp.status_code == 200
    assert [r["product_id"] for r in resp.json()] == [2]


def test_delete_missing_line_is_404_without_mutation(client, user_id):
    add_line(client, user_id, 1, 1, "499.99")

    resp = client.request("DELETE", "/cart-products/1", json={"userId": user_id + 1})
    assert resp.status_code == 404
    assert len(client.get("/cart-products").json()) == 1


def test_remove_product_from_all_carts(client, user_id):
    other = client.post("/users", json={
        "name": "Other", "password": "pw", "email": "o@example.com", "address": "a",
        "city": "c", "state": "s", "zip": "z", "country": "AZ",
    }).json()["id"]
    add_line(client, user_id, 1, 1, "499.99")
    add_line(client, other, 1, 2, "999.98")
    add_line(client, other, 2, 1, "189.00")

    resp = client.delete("/all-cart-products/1")
    assert resp.status_code == 200
    assert [(r["user_id"], r["product_id"]) for r in resp.json()] == [(other, 2)]

    assert client.delete("/all-cart-products/1").status_code == 404


def test_update_to_zero_amount_is_written(client, user_id):
    add_line(client, user_id, 1, 2, "999.98")

    resp = client.put(
        "/cart-products/1",
        json={"userId": user_id, "newProduct": {"amount": 0}, "totalAmount": "0"},
    )
    assert resp.status_code == 200
    assert resp.json()[0]["amount"] == 0


def test_refreshed_view_is_scoped_to_user(client, user_id):
    other = client.post("/users", json={
        "name": "Other", "password": "pw", "email": "o@example.com", "address": "a",
        "city": "c", "state": "s", "zip": "z", "country": "AZ",
    }).json()["id"]
    add_line(client, user_id, 1, 1, "499.99")
    add_line(client, user_id, 2, 1, "189.00")
    add_line(client, other, 1, 3, "1499.97")

    updated = client.put("/cart-products/1", json={"userId": user_id, "totalAmount": "500.00"})
    assert updated.status_code == 200
    assert {r["user_id"] for r in updated.json()} == {user_id}
    assert [r["product_id"] for r in updated.json()] == [1, 2]

    removed = client.request("DELETE", "/cart-products/2", json={"userId": user_id})
    assert [(r["user_id"], r["product_id"]) for r in removed.json()] == [(user_id, 1)]

    assert len(client.get("/cart-products").json()) == 2
