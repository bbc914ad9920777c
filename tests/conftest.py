import pytest
from fastapi.testclient import TestClient

from caspian.domain.errors import PaymentError
from caspian.main import create_app


class FakePaymentClient:
    def __init__(self):
        self.calls = []
        self.error = None

    def create_payment_intent(self, **kwargs) -> str:
        self.calls.append(kwargs)
        if self.error:
            raise PaymentError(self.error)
        return f"pi_{len(self.calls)}_secret_test"


USER = {
    "name": "Leyla Aliyeva",
    "password": "s3cret-pass",
    "email": "leyla@example.com",
    "address": "12 Neftchilar Ave",
    "city": "Baku",
    "state": "Absheron",
    "zip": "AZ1000",
    "country": "AZ",
}


@pytest.fixture
def payments():
    return FakePaymentClient()


@pytest.fixture
def app(payments):
    return create_app("sqlite://", payment_client=payments, seed_catalog=True)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def empty_client(payments):
    app = create_app("sqlite://", payment_client=payments, seed_catalog=False)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def user_id(client):
    resp = client.post("/users", json=USER)
    assert resp.status_code == 200
    return resp.json()["id"]


@pytest.fixture
def customer_id(client, user_id):
    resp = client.post("/customers", json={"userId": user_id})
    assert resp.status_code == 200
    return resp.json()["id"]
