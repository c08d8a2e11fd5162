# online_store/main.py
from fastapi import FastAPI
import uvicorn

from online_store.api.errors import register_error_handlers
from online_store.api.routers import carts, health, orders, products
from online_store.data.seed import seed
from online_store.data.store import InMemoryStore
from online_store.utils.logging import get_logger
from online_store.utils.settings import HOST, PORT, SEED_DEMO_DATA

logger = get_logger(__name__)


def create_app(store: InMemoryStore | None = None, seed_demo_data: bool | None = None) -> FastAPI:
    app = FastAPI(
        title="Online Store",
        version="1.0.0",
    )

    app.state.store = store or InMemoryStore()

    if seed_demo_data is None:
        seed_demo_data = SEED_DEMO_DATA

    if seed_demo_data:
        added = seed(app.state.store.catalog)
        logger.info(f"Seeded {added} demo products")

    register_error_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(orders.router)

    return app


app = create_app()


def run():
    logger.info(f"Server running at http://{HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
