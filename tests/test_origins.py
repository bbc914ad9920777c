from caspian.data.models.message import MessageFromModel
from caspian.utils.settings import ALLOWED_ORIGINS

MESSAGE = {"data": {
    "subject": "Hi",
    "from_name": "Mina",
    "from_email": "mina@example.com",
    "message": "Hello",
}}


def test_allowed_origin_passes(client):
    origin = ALLOWED_ORIGINS[0]
    resp = client.get("/products", headers={"Origin": origin})
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == origin


def test_request_without_origin_passes(client):
    assert client.get("/products").status_code == 200


def test_foreign_origin_rejected_before_handler(app, client):
    resp = client.post("/message-from", json=MESSAGE, headers={"Origin": "https://evil.example"})
    assert resp.status_code == 403
    assert "does not allow access" in resp.json()["message"]

    with app.state.session_factory() as db:
        assert db.query(MessageFromModel).count() == 0
