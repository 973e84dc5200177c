# quickcart/services/cart_service.py
import random
from datetime import datetime, timezone, timedelta
from typing import Any, Callable, List, Tuple

from quickcart.domain.errors import (
    CartValidationError,
    MISSING_CUSTOMER_ID,
    ITEMS_REQUIRED,
    INVALID_ITEMS,
    ITEM_FIELDS_REQUIRED,
    INVALID_QUANTITY,
    PRODUCT_NOT_FOUND,
)
from quickcart.domain.parsing import parse_number
from quickcart.domain.schemas import Cart, CartItem, CartSubmitResult, ItemError
from quickcart.repos.cart_repo import CartRepo
from quickcart.repos.product_repo import ProductRepo
from quickcart.utils.settings import CART_TTL_SECONDS, CART_STATUS_SAVED
from quickcart.utils.logging import get_logger

logger = get_logger(__name__)


def utc_now() -> datetime:
    #obcinamy do milisekund, tyle trzyma zapisany timestamp
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def generate_cart_id(now: datetime) -> str:
    #CART-YYYYMMDD-NNNN, bez sprawdzania kolizji
    return f"CART-{now:%Y%m%d}-{random.randint(1000, 9999)}"


class CartService:
    """
    Zapis koszyka (upsert po cart_id):
    - walidacja customer_id i items
    - walidacja kazdej pozycji wzgledem katalogu (bledy zbierane dla wszystkich pozycji)
    - zapis z metadanymi (created_at, updated_at, expires_at, status)
    Nie liczy cen i nie rusza stanow magazynowych.
    """

    def __init__(
        self,
        product_repo: ProductRepo,
        cart_repo: CartRepo,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[datetime], str] = generate_cart_id,
    ):
        self.product_repo = product_repo
        self.cart_repo = cart_repo
        self.clock = clock
        self.id_factory = id_factory

    #query
    def get_customer_carts(self, customer_id: str) -> List[Cart]:
        return self.cart_repo.find_by_customer(customer_id)

    #command
    def submit_cart(self, payload: Any) -> CartSubmitResult:
        body = payload if isinstance(payload, dict) else {}

        #walidacje przed jakimkolwiek odczytem katalogu
        customer_id = body.get("customer_id")
        if not isinstance(customer_id, str) or not customer_id.strip():
            raise CartValidationError(MISSING_CUSTOMER_ID)

        raw_items = body.get("items")
        if not isinstance(raw_items, list) or not raw_items:
            raise CartValidationError(ITEMS_REQUIRED)

        items, errors = self._validate_items(raw_items)
        if errors:
            logger.info(f"Odrzucono koszyk klienta {customer_id}: {len(errors)} blednych pozycji")
            raise CartValidationError(
                INVALID_ITEMS,
                details=[e.model_dump(exclude_unset=True) for e in errors],
            )

        now = self.clock()
        cart_id = self._resolve_cart_id(body.get("cart_id"), now)

        # created_at = now tylko dla nowego koszyka, upsert zostawia created_at z pierwszego zapisu
        # expires_at liczone od aktualizacji (kazda aktualizacja przedluza koszyk o kolejne 7 dni)
        cart = Cart(
            cart_id=cart_id,
            customer_id=customer_id,
            items=items,
            status=CART_STATUS_SAVED,
            created_at=now,
            updated_at=now,
            expires_at=now + timedelta(seconds=CART_TTL_SECONDS),
        )

        previous = self.cart_repo.upsert(cart)

        if previous:
            logger.info(f"Zaktualizowano koszyk {cart_id} klienta {customer_id}")
            return CartSubmitResult(
                created=False, cart_id=cart_id, status=cart.status, message="Cart updated"
            )

        logger.info(f"Zapisano nowy koszyk {cart_id} klienta {customer_id}")
        return CartSubmitResult(
            created=True, cart_id=cart_id, status=cart.status, message="Cart saved"
        )

    def _validate_items(self, raw_items: List[Any]) -> Tuple[List[CartItem], List[ItemError]]:
        known_ids = self.product_repo.get_product_ids()

        items: List[CartItem] = []
        errors: List[ItemError] = []

        #sprawdzamy wszystkie pozycje, nie konczymy na pierwszym bledzie
        for index, raw in enumerate(raw_items):
            if not isinstance(raw, dict) or "product_id" not in raw or "quantity" not in raw:
                errors.append(ItemError(index=index, reason=ITEM_FIELDS_REQUIRED))
                continue

            quantity = parse_number(raw["quantity"])
            if quantity is None or quantity <= 0:
                errors.append(ItemError(index=index, reason=INVALID_QUANTITY))
                continue

            product_id = parse_number(raw["product_id"])
            if product_id is None or product_id not in known_ids:
                errors.append(
                    ItemError(index=index, reason=PRODUCT_NOT_FOUND, product_id=product_id)
                )
                continue

            items.append(CartItem(product_id=product_id, quantity=quantity))

        return items, errors

    def _resolve_cart_id(self, raw_cart_id: Any, now: datetime) -> str:
        if isinstance(raw_cart_id, str) and raw_cart_id.strip():
            return raw_cart_id.strip()
        return self.id_factory(now)
