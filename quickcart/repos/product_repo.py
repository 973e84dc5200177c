# quickcart/repos/product_repo.py
from typing import Any, List, Set

from quickcart.data.database import JsonCollection
from quickcart.domain.parsing import parse_number


class ProductRepo:
    """Katalog produktow - tylko odczyt."""

    def __init__(self, db: JsonCollection):
        self.db = db

    def list_products(self, limit: int) -> List[dict[str, Any]]:
        #kolejnosc jak w pliku
        return self.db.read_all()[:limit]

    def get_product(self, product_id: int | float) -> dict[str, Any] | None:
        for product in self.db.read_all():
            if isinstance(product, dict) and parse_number(product.get("id")) == product_id:
                return product
        return None

    def get_product_ids(self) -> Set[int | float]:
        #jeden odczyt katalogu na cala walidacje koszyka
        ids = {
            parse_number(product.get("id"))
            for product in self.db.read_all()
            if isinstance(product, dict)
        }
        ids.discard(None)
        return ids
