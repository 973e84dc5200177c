# quickcart/services/catalog_service.py
from typing import Any, List

from quickcart.domain.parsing import parse_limit, parse_number
from quickcart.repos.product_repo import ProductRepo
from quickcart.utils.settings import DEFAULT_PRODUCTS_LIMIT


class CatalogService:
    """Odczyt katalogu - nigdy nie dotyka koszykow."""

    def __init__(self, product_repo: ProductRepo):
        self.repo = product_repo

    def list_products(self, limit: str | None = None) -> List[dict[str, Any]]:
        return self.repo.list_products(parse_limit(limit, DEFAULT_PRODUCTS_LIMIT))

    def get_product(self, product_id: str) -> dict[str, Any] | None:
        #nieliczbowe id po prostu nie istnieje
        parsed = parse_number(product_id)
        if parsed is None:
            return None
        return self.repo.get_product(parsed)
