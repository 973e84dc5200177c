# quickcart/api/routers/products.py
from fastapi import APIRouter, Depends, Query

from quickcart.api.responses import error_response, ERROR_RESPONSES
from quickcart.data.database import JsonCollection, get_products_db
from quickcart.domain.errors import PRODUCT_NOT_FOUND, INTERNAL_SERVER_ERROR
from quickcart.domain.schemas import ProductsOut, ProductOut
from quickcart.repos.product_repo import ProductRepo
from quickcart.services.catalog_service import CatalogService
from quickcart.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


def get_service(db: JsonCollection = Depends(get_products_db)):
    return CatalogService(ProductRepo(db))


@router.get("", response_model=ProductsOut, responses=ERROR_RESPONSES)
def list_products(
    limit: str | None = Query(None),
    svc: CatalogService = Depends(get_service),
):
    #koperta budowana w try - rekord katalogu, ktory nie jest obiektem, to tez blad storage
    try:
        products = svc.list_products(limit)
        return ProductsOut(total=len(products), products=products)
    except Exception:
        logger.exception("GET /products error")
        return error_response(500, INTERNAL_SERVER_ERROR)


@router.get("/{product_id}", response_model=ProductOut, responses=ERROR_RESPONSES)
def get_product(
    product_id: str,
    svc: CatalogService = Depends(get_service),
):
    try:
        product = svc.get_product(product_id)
        if product is None:
            return error_response(404, PRODUCT_NOT_FOUND)
        return ProductOut(product=product)
    except Exception:
        logger.exception("GET /products/{id} error")
        return error_response(500, INTERNAL_SERVER_ERROR)
