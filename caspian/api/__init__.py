# caspian/api/__init__.py
from fastapi import FastAPI

from caspian.api.errors import register_error_handlers
from caspian.api.routers import carts, checkout, messages, orders, products, users


def include_routers(app: FastAPI) -> None:
    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(users.router)
    app.include_router(orders.router)
    app.include_router(messages.router)
    app.include_router(checkout.router)
    register_error_handlers(app)
