"""
Persistent logger context

Key-value metadata merged into every entry a logger emits.
"""

import copy
from typing import Any, Dict, Iterator, Mapping, Optional


class LogContext:
    """
    Mutable context store owned by a single Logger.

    Entries never hold a reference to the store itself; they receive a
    snapshot, so later updates are not retroactive.
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = dict(initial) if initial else {}

    def snapshot(self) -> Dict[str, Any]:
        """
        Copy the current context.

        Returns:
            Independent dictionary; deep-copied where the values allow it
        """
        try:
            return copy.deepcopy(self._values)
        except Exception:
            # Values such as locks or open handles cannot be deep-copied
            return dict(self._values)

    def update(self, partial: Mapping[str, Any]) -> None:
        """Merge ``partial`` into the context, overwriting existing keys."""
        if partial:
            self._values.update(partial)

    def clear(self) -> None:
        """Remove all keys."""
        self._values.clear()

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"LogContext({self._values!r})"
