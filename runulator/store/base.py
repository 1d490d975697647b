"""The key-value store the calculator persists favorites and settings in.

The store itself is owned by the caller (e.g. the app's preferences). Values are
plain strings, numbers, or sets of strings.
"""

from typing import Any, Protocol


class KeyValueStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...
