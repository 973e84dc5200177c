# quickcart/domain/parsing.py
import math
import re
from typing import Any

_DIGITS = re.compile(r"[0-9]+")
#zapis dziesietny jak w JS Number(): bez "_", "nan", "inf" i cyfr spoza ASCII
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_number(value: Any) -> int | float | None:
    """
    Jawne parsowanie luzno typowanej liczby z requestu (int, float albo string).
    Zwraca None gdy wartosci nie da sie potraktowac jako skonczonej liczby.
    Calkowite floaty sa normalizowane do int (2.0 -> 2).
    """
    #bool to podklasa int, ale True nie jest iloscia
    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not _DECIMAL.fullmatch(text):
            return None
        number = float(text)
    else:
        return None

    if isinstance(number, float):
        if not math.isfinite(number):
            return None
        if number.is_integer():
            return int(number)
    return number


def parse_limit(value: str | None, default: int) -> int:
    #tylko dodatnia liczba calkowita, wszystko inne -> default
    if value is None:
        return default

    text = value.strip()
    if not _DIGITS.fullmatch(text):
        return default

    limit = int(text)
    return limit if limit > 0 else default
