"""
Nested key/value store addressed by dot-delimited paths.

Paths such as ``"PersonalDetails.PolicyHolder.Title"`` are resolved one
segment at a time through nested dictionaries. Writes create missing
intermediate dictionaries and, unless silent, report the change through
a callback so an owner can broadcast it.
"""
from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Union


logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."

ChangeCallback = Callable[[str, Any], None]


def split_path(path: str) -> List[str]:
    """
    Split a dotted path into its ordered segments.

    Raises:
        ValueError: If the path is not a string or has an empty segment.
    """
    if not isinstance(path, str):
        raise ValueError("path must be a string")
    segments = path.split(PATH_SEPARATOR)
    if any(not segment for segment in segments):
        raise ValueError(f"Invalid attribute path {path!r}")
    return segments


class PathStore:
    """
    Attribute tree with get/set by dotted path.

    The store never raises for a missing node on read; a path that runs
    through an absent key or a non-mapping value simply resolves to the
    default.
    """

    def __init__(
        self,
        attributes: Optional[Mapping[str, Any]] = None,
        on_change: Optional[ChangeCallback] = None,
    ) -> None:
        self._attributes: Dict[str, Any] = {}
        self._on_change = on_change
        if attributes:
            # the store owns its tree; nested caller dicts are never shared
            self.set(copy.deepcopy(dict(attributes)), silent=True)

    def get(self, path: str, default: Any = None) -> Any:
        """
        Read the value stored at `path`.

        Args:
            path: Dot-delimited attribute path.
            default: Returned when any segment of the path is absent.
        """
        node: Any = self._attributes
        for segment in split_path(path):
            if not isinstance(node, dict) or segment not in node:
                return default
            node = node[segment]
        return node

    def set(
        self,
        path: Union[str, Mapping[str, Any]],
        value: Any = None,
        silent: bool = False,
    ) -> "PathStore":
        """
        Write a value at `path`, or every pair of a `{path: value}` mapping.

        Intermediate segments that are missing, or that currently hold a
        non-mapping value, are replaced by new dictionaries. Unless `silent`
        is true each written path is reported to the change callback, in
        the mapping's iteration order for bulk writes.

        Returns:
            The store itself, for chaining.
        """
        if isinstance(path, Mapping):
            if silent:
                logger.debug("Silently loading %d attribute(s)", len(path))
            for key, item in list(path.items()):
                self._assign(key, item, silent)
            return self

        self._assign(path, value, silent)
        return self

    def _assign(self, path: str, value: Any, silent: bool) -> None:
        segments = split_path(path)
        node = self._attributes
        for segment in segments[:-1]:
            child = node.get(segment)
            if not isinstance(child, dict):
                child = {}
                node[segment] = child
            node = child
        node[segments[-1]] = value

        if not silent and self._on_change is not None:
            self._on_change(path, value)

    def has(self, path: str) -> bool:
        """Return True if a node exists at `path` (even if it holds None)."""
        missing = object()
        return self.get(path, missing) is not missing

    def to_dict(self) -> Dict[str, Any]:
        """Return a deep copy of the whole attribute tree."""
        return copy.deepcopy(self._attributes)


__all__ = ["PATH_SEPARATOR", "PathStore", "split_path"]
