# engine/errors.py
from typing import Optional


class SplitterError(Exception):
    """Base class for every error raised while splitting a basket."""


class ConfigurationError(SplitterError):
    """The capability catalog (or the search setup) is missing or unusable."""

    def __init__(self, msg: str):
        super().__init__(f"[CONFIG ERROR] {msg}")


class SearchLimitError(ConfigurationError):
    """Too many candidate methods for the configured search strategy."""

    def __init__(self, method_count: int, limit: int, strategy: Optional[str] = None):
        self.method_count = method_count
        self.limit = limit
        self.strategy = strategy
        who = f" for strategy '{strategy}'" if strategy else ""
        super().__init__(
            f"Basket touches {method_count} delivery methods, limit{who} is {limit}"
        )


class UnavailableItemError(SplitterError):
    """A basket item has no entry in the catalog."""

    def __init__(self, item: str):
        self.item = item
        super().__init__(f"Item '{item}' is not available for any delivery method")


class BasketError(SplitterError):
    """Basket input is not a list of item identifiers."""


def error(msg: str):
    raise ConfigurationError(msg)
