# quickcart/utils/settings.py
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent.parent

DATA_DIR = Path(os.getenv("DATA_DIR", BASE_DIR / "data"))
PRODUCTS_FILE = Path(os.getenv("PRODUCTS_FILE", DATA_DIR / "products.json"))
CARTS_FILE = Path(os.getenv("CARTS_FILE", DATA_DIR / "carts.json"))

DEFAULT_PRODUCTS_LIMIT = 10
CART_TTL_SECONDS = 7 * 24 * 60 * 60  # stale 7 dni, nie konfigurowalne
CART_STATUS_SAVED = "saved"

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 5000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
