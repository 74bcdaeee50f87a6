"""
Catalog of pre-bundled extras products.

Maps an extras code to the canonical bundle structure stored on a quote,
and finds the code back from a structure by deep structural equality.
"""
from __future__ import annotations

import copy
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple


def structurally_equal(left: Any, right: Any) -> bool:
    """
    Compare two bundle structures value by value.

    Mappings must have the same key set with equal values, sequences must
    have equal items in the same order. Booleans never equal numbers.
    """
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if set(left.keys()) != set(right.keys()):
            return False
        return all(structurally_equal(left[key], right[key]) for key in left)

    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(structurally_equal(a, b) for a, b in zip(left, right))

    if isinstance(left, (Mapping, list, tuple)) or isinstance(right, (Mapping, list, tuple)):
        return False
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right


class BundleCatalog:
    """
    Read-only code → bundle structure lookup.

    Structures are copied on the way in and on the way out so a quote
    holding one can be mutated without corrupting the catalog.
    """

    def __init__(self, products: Optional[Mapping[str, Mapping[str, Any]]] = None) -> None:
        self._products: Dict[str, Dict[str, Any]] = {
            code: copy.deepcopy(dict(structure))
            for code, structure in (products or {}).items()
        }

    def get(self, code: str) -> Optional[Dict[str, Any]]:
        """Return a copy of the structure for `code`, or None if unknown."""
        structure = self._products.get(code)
        if structure is None:
            return None
        return copy.deepcopy(structure)

    def find_code(self, structure: Any) -> Optional[str]:
        """
        Return the first catalog code whose structure equals `structure`.

        Returns:
            The matching code, or None when nothing matches (for example a
            manually assembled bundle).
        """
        if structure is None:
            return None
        for code, candidate in self._products.items():
            if structurally_equal(structure, candidate):
                return code
        return None

    def codes(self) -> Tuple[str, ...]:
        return tuple(self._products)

    def __contains__(self, code: object) -> bool:
        return code in self._products

    def __iter__(self) -> Iterator[str]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)


__all__ = ["BundleCatalog", "structurally_equal"]
