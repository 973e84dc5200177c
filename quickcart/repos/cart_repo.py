# quickcart/repos/cart_repo.py
from typing import List

from quickcart.data.database import JsonCollection
from quickcart.domain.schemas import Cart


class CartRepo:
    def __init__(self, db: JsonCollection):
        self.db = db

    def find_by_customer(self, customer_id: str) -> List[Cart]:
        return [
            Cart.model_validate(record)
            for record in self.db.read_all()
            if record.get("customer_id") == customer_id
        ]

    def upsert(self, cart: Cart) -> Cart | None:
        """
        Zastepuje rekord o tym samym cart_id (w tym samym miejscu) albo dopisuje nowy.
        Przy zastapieniu created_at zostaje z poprzedniej wersji (cart jest aktualizowany).
        Zwraca poprzednia wersje koszyka albo None.
        Caly plik jest czytany i nadpisywany - brak blokady, ostatni zapis wygrywa.
        """
        records = self.db.read_all()

        for index, record in enumerate(records):
            if record.get("cart_id") == cart.cart_id:
                previous = Cart.model_validate(record)
                cart.created_at = previous.created_at
                records[index] = cart.model_dump(mode="json")
                self.db.write_all(records)
                return previous

        records.append(cart.model_dump(mode="json"))
        self.db.write_all(records)
        return None
