import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from craftstore.entrypoints.http.exception_handlers import register_exception_handlers
from craftstore.entrypoints.http.routes.carts import router as carts_router
from craftstore.entrypoints.http.routes.categories import router as categories_router
from craftstore.entrypoints.http.routes.health import router as health_router
from craftstore.entrypoints.http.routes.products import router as products_router
from craftstore.entrypoints.http.routes.users import router as users_router
from craftstore.infra.config import http_port, log_level
from craftstore.infra.storage import init_storage


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logging.basicConfig(level=log_level())
    init_storage()
    yield


def build_app() -> FastAPI:
    app = FastAPI(
        title="Craftstore API",
        description="""
        Storefront API for handcrafted, customizable products.

        ## Features
        - Browse categories and customization types
        - Search, filter and sort products
        - Featured products (bestsellers, then new, then top rated)
        - Carts with customized items and computed totals

        ## Authentication
        No authentication. Carts are addressed by id.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        contact={
            "name": "Craftstore Team",
            "email": "dev@craftstore.example.com",
        },
        license_info={
            "name": "Proprietary",
        },
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(categories_router, prefix="/v1")
    app.include_router(products_router, prefix="/v1")
    app.include_router(carts_router, prefix="/v1")
    app.include_router(users_router, prefix="/v1")

    return app


app = build_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=http_port())
