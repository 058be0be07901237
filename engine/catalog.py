# engine/catalog.py
import json
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from engine.errors import ConfigurationError, error


def _clean_methods(item, methods) -> Tuple[str, ...]:
    if not isinstance(methods, (list, tuple)):
        error(f"Item '{item}' must map to a list of delivery methods, got {type(methods).__name__}")
    out = []
    for m in methods:
        if not isinstance(m, str) or not m.strip():
            error(f"Item '{item}' lists an invalid delivery method: {m!r}")
        # collapse repeats, keep first position
        if m not in out:
            out.append(m)
    if not out:
        error(f"Item '{item}' has no delivery methods")
    return tuple(out)


@dataclass(frozen=True)
class Catalog:
    """Read-only item -> capable delivery methods mapping.

    Method lists are stored as tuples behind a MappingProxyType, so one Catalog
    can be shared by any number of splitters and concurrent split calls.
    """
    options: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.options, Mapping):
            error(f"Catalog must be a JSON object of item -> [methods], got {type(self.options).__name__}")
        frozen = {}
        for item, methods in self.options.items():
            if not isinstance(item, str) or not item.strip():
                error(f"Invalid item identifier in catalog: {item!r}")
            frozen[item] = _clean_methods(item, methods)
        object.__setattr__(self, "options", MappingProxyType(frozen))

    def __contains__(self, item) -> bool:
        return item in self.options

    def __len__(self) -> int:
        return len(self.options)

    def __iter__(self):
        return iter(self.options)

    def methods_for(self, item: str) -> Tuple[str, ...]:
        return self.options[item]

    def restrict(self, items: Iterable[str]) -> Dict[str, Tuple[str, ...]]:
        """Filtered view: only the given items (which must all be present)."""
        return {item: self.options[item] for item in items}


def load_catalog(cfg_or_path) -> Catalog:
    """Build a Catalog from a JSON file path, a decoded mapping, or a Catalog."""
    if isinstance(cfg_or_path, Catalog):
        return cfg_or_path
    if isinstance(cfg_or_path, (str, os.PathLike)):
        if not os.path.exists(cfg_or_path):
            error(f"Catalog file not found: {cfg_or_path}")
        try:
            with open(cfg_or_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Catalog {cfg_or_path} is not valid JSON: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Could not read catalog {cfg_or_path}: {e}") from e
        return Catalog(raw)
    if isinstance(cfg_or_path, Mapping):
        return Catalog(cfg_or_path)
    raise TypeError("load_catalog expects a path, a mapping or a Catalog")
