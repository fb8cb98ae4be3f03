from bisect import bisect_left, bisect_right
from typing import Any, Iterator, Optional


class OrderedIntMap:
    """
    Integer keyed mapping that iterates in ascending key order.

    Values live in a dict for O(1) lookup; a parallel sorted list of keys
    provides ordered traversal and successor queries via bisect.
    """

    def __init__(self):
        self._data: dict[int, Any] = {}
        self._keys: list[int] = []

    def __getitem__(self, key: int) -> Any:
        return self._data[key]

    def __setitem__(self, key: int, value: Any) -> None:
        if key not in self._data:
            self._keys.insert(bisect_left(self._keys, key), key)
        self._data[key] = value

    def __delitem__(self, key: int) -> None:
        del self._data[key]
        del self._keys[bisect_left(self._keys, key)]

    def __contains__(self, key) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[int]:
        return iter(self._keys)

    def get(self, key: int, default: Any = None) -> Any:
        return self._data.get(key, default)

    def pop(self, key: int, *args) -> Any:
        if key in self._data:
            value = self._data[key]
            del self[key]
            return value
        if args:
            return args[0]
        raise KeyError(key)

    def keys(self) -> list[int]:
        """Returns a snapshot of the keys in ascending order."""
        return list(self._keys)

    def values(self) -> list[Any]:
        return [self._data[k] for k in self._keys]

    def items(self) -> list[tuple[int, Any]]:
        return [(k, self._data[k]) for k in self._keys]

    def clear(self) -> None:
        self._data.clear()
        self._keys.clear()

    def find(self, key: int) -> Optional[int]:
        """Returns the ordinal position of key, or None if the key is absent."""
        if key not in self._data:
            return None
        return bisect_left(self._keys, key)

    def successor(self, key: int) -> Optional[int]:
        """Returns the smallest stored key strictly greater than key, or None.

        key does not have to be present in the map.
        """
        pos = bisect_right(self._keys, key)
        if pos == len(self._keys):
            return None
        return self._keys[pos]

    def first_key(self) -> Optional[int]:
        return self._keys[0] if self._keys else None

    def last_key(self) -> Optional[int]:
        return self._keys[-1] if self._keys else None

    def copy(self) -> 'OrderedIntMap':
        result = OrderedIntMap()
        result._data = self._data.copy()
        result._keys = self._keys.copy()
        return result

    def __repr__(self) -> str:
        items_str = ", ".join(f"{k}: {self._data[k]!r}" for k in self._keys)
        return f"OrderedIntMap({{{items_str}}})"
