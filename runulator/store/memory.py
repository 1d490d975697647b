from typing import Any
import copy


class MemoryStore:
    """A dict-backed key-value store."""

    def __init__(self, values: dict[str, Any] | None = None):
        self._values: dict[str, Any] = dict(values) if values else {}

    def get(self, key: str, default: Any = None) -> Any:
        # Copy so callers can't mutate stored sets in place.
        return copy.copy(self._values.get(key, default))

    def set(self, key: str, value: Any) -> None:
        self._values[key] = copy.copy(value)

    def __contains__(self, key: str) -> bool:
        return key in self._values
