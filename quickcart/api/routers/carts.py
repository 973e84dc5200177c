# quickcart/api/routers/carts.py
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response

from quickcart.api.responses import error_response, ERROR_RESPONSES
from quickcart.data.database import JsonCollection, get_carts_db, get_products_db
from quickcart.domain.errors import (
    CartValidationError,
    MISSING_USER_ID,
    INTERNAL_SERVER_ERROR,
)
from quickcart.domain.schemas import CartSubmitOut, CartsOut
from quickcart.repos.cart_repo import CartRepo
from quickcart.repos.product_repo import ProductRepo
from quickcart.services.cart_service import CartService
from quickcart.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/carts", tags=["carts"])


def get_service(
    products_db: JsonCollection = Depends(get_products_db),
    carts_db: JsonCollection = Depends(get_carts_db),
):
    return CartService(
        product_repo=ProductRepo(products_db),
        cart_repo=CartRepo(carts_db),
    )


@router.post(
    "",
    response_model=CartSubmitOut,
    status_code=201,
    responses={200: {"model": CartSubmitOut}, **ERROR_RESPONSES},
)
def submit_cart(
    response: Response,
    payload: Any = Body(None),
    svc: CartService = Depends(get_service),
):
    """
    Zapis koszyka: { cart_id?, customer_id, items: [{product_id, quantity}] }.
    201 dla nowego koszyka, 200 gdy koszyk o tym cart_id juz istnial.
    """
    try:
        result = svc.submit_cart(payload)
    except CartValidationError as e:
        extra = {"details": e.details} if e.details is not None else {}
        return error_response(400, e.code, **extra)
    except Exception:
        logger.exception("POST /carts error")
        return error_response(500, INTERNAL_SERVER_ERROR)

    response.status_code = 201 if result.created else 200
    return CartSubmitOut(cart_id=result.cart_id, status=result.status, message=result.message)


@router.get("", response_model=CartsOut, responses=ERROR_RESPONSES)
def list_carts(
    customer_id: str | None = Query(None),
    svc: CartService = Depends(get_service),
):
    if not customer_id:
        return error_response(400, MISSING_USER_ID)

    try:
        carts = svc.get_customer_carts(customer_id)
        return CartsOut(total=len(carts), carts=carts)
    except Exception:
        logger.exception("GET /carts error")
        return error_response(500, INTERNAL_SERVER_ERROR)
