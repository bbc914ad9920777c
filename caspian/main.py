# caspian/main.py
from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
import uvicorn

from caspian.api import include_routers
from caspian.data.database import Base, build_engine, build_session_factory
from caspian.data.seed import seed
from caspian.services.payment_client import PaymentClient
from caspian.utils.settings import ALLOWED_ORIGINS, DATABASE_URL, PORT, SEED_CATALOG
from caspian.utils.logging import get_logger

# import wszystkich modeli przed create_all
import caspian.data.models  # noqa: F401

logger = get_logger(__name__)

ORIGIN_REJECTED_MESSAGE = (
    "The CORS policy for this site does not allow access from the specified Origin."
)


def create_app(
    database_url: str | None = None,
    payment_client: PaymentClient | None = None,
    seed_catalog: bool = SEED_CATALOG,
    engine: Engine | None = None,
    allowed_origins: List[str] | None = None,
) -> FastAPI:
    """
    Composition root: jeden engine (pula połączeń) i jeden klient płatności
    na aplikację, trzymane w app.state i przekazywane do handlerów przez Depends.
    Engine można wstrzyknąć z zewnątrz, wtedy database_url jest ignorowany.
    """
    engine = engine or build_engine(database_url or DATABASE_URL)
    session_factory = build_session_factory(engine)
    origins = allowed_origins if allowed_origins is not None else ALLOWED_ORIGINS

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Tables: {list(Base.metadata.tables.keys())}")
        Base.metadata.create_all(bind=engine)
        if seed_catalog:
            with session_factory() as db:
                seed(db)
        yield
        engine.dispose()
        logger.info("Connection pool closed")

    app = FastAPI(
        title="Caspian Treasure API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.payment_client = payment_client or PaymentClient()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["GET", "PUT", "POST", "DELETE"],
        allow_headers=["Content-Type"],
    )

    # dodany po CORSMiddleware = zewnętrzny, obcy origin nie dochodzi do handlera
    @app.middleware("http")
    async def reject_foreign_origins(request: Request, call_next):
        origin = request.headers.get("origin")
        if origin and origin not in origins:
            logger.warning(f"Rejected {request.method} {request.url.path} from origin {origin}")
            return JSONResponse(status_code=403, content={"message": ORIGIN_REJECTED_MESSAGE})
        return await call_next(request)

    @app.get("/")
    def read_root():
        return {"message": "Welcome to the Caspian Treasure API"}

    include_routers(app)
    return app


def run() -> None:
    uvicorn.run(create_app(), host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    run()
