# engine/basket.py
import json
import os
from typing import List

from engine.errors import BasketError


def validate_basket(items) -> List[str]:
    """Return the basket as a list of item ids, rejecting anything else."""
    if isinstance(items, (str, bytes)) or not hasattr(items, "__iter__"):
        raise BasketError(f"Basket must be a list of item ids, got {type(items).__name__}")
    basket = list(items)
    for idx, item in enumerate(basket):
        if not isinstance(item, str):
            raise BasketError(f"Basket entry #{idx} is not an item id: {item!r}")
    return basket


def load_basket(basket_or_path) -> List[str]:
    if isinstance(basket_or_path, (str, os.PathLike)):
        if not os.path.exists(basket_or_path):
            raise BasketError(f"Basket file not found: {basket_or_path}")
        try:
            with open(basket_or_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise BasketError(f"Basket {basket_or_path} is not valid JSON: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise BasketError(f"Could not read basket {basket_or_path}: {e}") from e
        return validate_basket(raw)
    return validate_basket(basket_or_path)
