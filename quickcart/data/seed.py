# quickcart/data/seed.py
from quickcart.data.database import JsonCollection, get_products_db
from quickcart.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_PRODUCTS = [
    {"id": 1, "name": "Keyboard", "price": 199.99},
    {"id": 2, "name": "Mouse", "price": 49.50},
    {"id": 3, "name": "Monitor", "price": 899.00},
]


def seed(db: JsonCollection | None = None) -> bool:
    db = db or get_products_db()
    # not forcing: only seed if the catalog file does not exist yet
    if db.path.exists():
        logger.info(f"Catalog {db.path} already exists, skipping seed")
        return False

    db.write_all(DEMO_PRODUCTS)
    logger.info(f"Seeded {len(DEMO_PRODUCTS)} products into {db.path}")
    return True


if __name__ == "__main__":
    seed()
