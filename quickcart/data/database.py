# quickcart/data/database.py
import json
from pathlib import Path
from typing import Any, List

from quickcart.utils.settings import PRODUCTS_FILE, CARTS_FILE


class JsonCollection:
    """
    Kolekcja rekordow trzymana jako jeden dokument JSON (tablica).
    Kazda zmiana to read-modify-write calego pliku, bez zadnych lockow -
    dwa rownolegle zapisy moga sie nadpisac (wygrywa ostatni).
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def read_all(self) -> List[dict[str, Any]]:
        #brak pliku = pusta kolekcja, kazdy inny blad leci dalej
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []

        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"{self.path} does not contain a JSON array")
        return data

    def write_all(self, records: List[dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(records, indent=2), encoding="utf-8")


def get_products_db() -> JsonCollection:
    return JsonCollection(PRODUCTS_FILE)


def get_carts_db() -> JsonCollection:
    return JsonCollection(CARTS_FILE)
