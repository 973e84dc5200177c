# quickcart/main.py
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from quickcart.api.responses import error_response
from quickcart.api.routers import carts, health, products
from quickcart.domain.errors import INVALID_JSON
from quickcart.utils.settings import HOST, PORT, PRODUCTS_FILE, CARTS_FILE
from quickcart.utils.logging import get_logger

logger = get_logger(__name__)


async def invalid_json_handler(request: Request, exc: RequestValidationError):
    #zepsuty JSON w body -> 400 w naszej kopercie, reszta jak domyslnie w FastAPI
    if any(err.get("type") == "json_invalid" for err in exc.errors()):
        return error_response(400, INVALID_JSON)
    return await request_validation_exception_handler(request, exc)


def create_app() -> FastAPI:
    app = FastAPI(
        title="QuickCart Service",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, invalid_json_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(carts.router)

    return app


app = create_app()

if __name__ == "__main__":
    logger.info(f"QuickCart backend on port {PORT} (products: {PRODUCTS_FILE}, carts: {CARTS_FILE})")
    logger.info("  GET  /products")
    logger.info("  GET  /products/{id}")
    logger.info("  POST /carts")
    logger.info("  GET  /carts")
    uvicorn.run(app, host=HOST, port=PORT)
