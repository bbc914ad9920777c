from fastapi.testclient import TestClient
from sqlalchemy.pool import QueuePool, StaticPool

from caspian.data.database import build_engine
from caspian.main import create_app


def test_memory_sqlite_uses_static_pool():
    assert isinstance(build_engine("sqlite://").pool, StaticPool)


def test_file_sqlite_uses_bounded_queue_pool(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'shop.db'}", pool_size=2, pool_timeout=1)
    assert isinstance(engine.pool, QueuePool)
    assert engine.pool.size() == 2
    engine.dispose()


def test_connections_return_to_pool_after_failed_requests(tmp_path, payments):
    # jedno połączenie w puli - każdy wyciek kończy się timeoutem kolejnego requestu
    engine = build_engine(f"sqlite:///{tmp_path / 'shop.db'}", pool_size=1, pool_timeout=1)
    app = create_app(engine=engine, payment_client=payments, seed_catalog=True)

    with TestClient(app) as client:
        for _ in range(5):
            fk_violation = client.post(
                "/cart-products",
                json={"newProduct": {"product_id": 1, "amount": 1}, "userId": 999, "totalAmount": 1},
            )
            assert fk_violation.status_code == 500

            missing_line = client.put("/cart-products/1", json={"userId": 1, "totalAmount": "1.00"})
            assert missing_line.status_code == 404

            missing_order = client.get("/orders/42/details")
            assert missing_order.status_code == 404

        resp = client.get("/products")
        assert resp.status_code == 200
        assert len(resp.json()) == 5
        assert engine.pool.checkedout() == 0
