from operator import index as op_index
from typing import Any, Iterator, Optional

from .config import SparseConfig
from .errors import InvalidIndexError
from .ordered_map import OrderedIntMap


def as_index(i, context: str = "") -> int:
    """Coerce i to a plain int, accepting anything that implements __index__."""
    try:
        return op_index(i)
    except TypeError:
        raise InvalidIndexError(i, context) from None


class CellAccessor:
    """
    Handle on a single cell of a SparseVector.

    Indexing alone does not say whether the caller wants to read or write a
    cell, so the accessor carries only the owning vector (or a matrix row
    view) and the index, and resolves to a read (get) or a write (set) when it
    is used. It does not own the vector and must not outlive it.
    """

    __slots__ = ('_vector', '_index')

    def __init__(self, vector: 'SparseVector', i: int):
        self._vector = vector
        self._index = i

    @property
    def index(self) -> int:
        return self._index

    def get(self) -> Any:
        """Resolve as a read: the stored value or the vector's default."""
        return self._vector.get(self._index)

    def set(self, value: Any) -> Any:
        """Resolve as a write: erase if value is the default, otherwise insert or update.

        Returns:
            The assigned value, so writes can be chained.
        """
        return self._vector.set(self._index, value)

    def assign(self, other: 'CellAccessor') -> 'CellAccessor':
        """Copy the value of another cell into this one.

        The right hand side is read before anything is written. Assigning an
        accessor to itself does nothing.

        Returns:
            Self, so the canonical form ``a.assign(b).set(0)`` can continue.
        """
        if other is not self:
            self.set(other.get())
        return self

    value = property(get, set)

    def __eq__(self, other) -> bool:
        if isinstance(other, CellAccessor):
            other = other.get()
        return self.get() == other

    __hash__ = None

    def __bool__(self) -> bool:
        return bool(self.get())

    def __int__(self) -> int:
        return int(self.get())

    def __float__(self) -> float:
        return float(self.get())

    def __repr__(self) -> str:
        return f"CellAccessor(index={self._index}, value={self.get()!r})"


class SparseVector:
    """
    Conceptually infinite vector that stores only non-default cells.

    Entries are kept in ascending index order. Writing the default value to a
    cell removes its entry, so size() is the number of occupied cells rather
    than a logical length.
    """

    def __init__(self, default: Any = 0, config: Optional[SparseConfig] = None,
                 data_store: Optional[OrderedIntMap] = None):
        """
        Args:
            default: Value of unoccupied cells. Ignored when config is given.
            config: Shared configuration, e.g. the one of the owning matrix.
            data_store: Initial entries, none of which may equal the default.
        """
        if config is None:
            config = SparseConfig(default=default)
        config.validate()
        self._config = config
        self.data_store = OrderedIntMap() if data_store is None else data_store

    @property
    def config(self) -> SparseConfig:
        return self._config

    @property
    def default(self) -> Any:
        """The value of unoccupied cells. Fixed at construction."""
        return self._config.default

    def get(self, i) -> Any:
        """Get the value at index i, or the default if the cell is not occupied."""
        return self.data_store.get(as_index(i), self.default)

    def set(self, i, value: Any) -> Any:
        """Write value at index i and return it.

        Args:
            i: The index to write.
            value: The value to store. The default value erases the cell.

        Returns:
            The value that was assigned.
        """
        i = as_index(i)
        if value == self.default:
            # Remove default values to maintain sparsity
            self.data_store.pop(i, None)
        else:
            self.data_store[i] = value
        return value

    def erase(self, i) -> int:
        """Remove the cell at index i.

        Returns:
            1 if an entry was removed, 0 if the cell was not occupied.
        """
        i = as_index(i)
        if i in self.data_store:
            del self.data_store[i]
            return 1
        return 0

    def at(self, i) -> CellAccessor:
        """Returns a deferred read/write handle on the cell at index i."""
        return CellAccessor(self, as_index(i))

    def __getitem__(self, i) -> Any:
        return self.get(i)

    def __setitem__(self, i, value: Any) -> None:
        self.set(i, value)

    def __delitem__(self, i) -> None:
        self.erase(i)

    def __contains__(self, i) -> bool:
        """Checks if the cell at index i is occupied."""
        try:
            return as_index(i) in self.data_store
        except InvalidIndexError:
            return False

    def size(self) -> int:
        """Returns the number of occupied cells."""
        return len(self.data_store)

    def __len__(self) -> int:
        return len(self.data_store)

    def empty(self) -> bool:
        return len(self.data_store) == 0

    def clear(self) -> None:
        """Removes all elements from the vector."""
        self.data_store.clear()

    def find(self, i) -> Optional[int]:
        """Locate the entry for index i.

        Returns:
            The ordinal position of the entry among occupied cells, or None
            (the end marker) if the cell is not occupied.
        """
        return self.data_store.find(as_index(i))

    def successor(self, i) -> Optional[int]:
        """Returns the smallest occupied index strictly greater than i, or None."""
        return self.data_store.successor(as_index(i))

    def first_index(self) -> Optional[int]:
        return self.data_store.first_key()

    def max_index(self) -> Optional[int]:
        return self.data_store.last_key()

    def __iter__(self) -> Iterator[int]:
        """Iterates over the occupied indices in ascending order."""
        return iter(self.data_store.keys())

    def keys(self) -> list[int]:
        return self.data_store.keys()

    def values(self) -> list[Any]:
        return self.data_store.values()

    def items(self) -> Iterator[tuple[int, Any]]:
        """Lazily yields (index, value) pairs in ascending index order.

        The set of indices is captured when iteration starts; each call
        starts a fresh traversal.
        """
        for i in self.data_store.keys():
            # entries erased mid traversal are skipped
            if i in self.data_store:
                yield i, self.data_store[i]

    def copy(self) -> 'SparseVector':
        """Returns a copy of the vector sharing the same configuration."""
        return SparseVector(config=self.config, data_store=self.data_store.copy())

    def __eq__(self, other) -> bool:
        if not isinstance(other, SparseVector):
            return NotImplemented
        return self.default == other.default and self.data_store.items() == other.data_store.items()

    __hash__ = None

    def __repr__(self) -> str:
        """String representation of the vector."""
        if self.empty():
            return f"SparseVector({{}}, default={self.default!r})"
        items_str = ", ".join(f"{k}: {v!r}" for k, v in self.items())
        return f"SparseVector({{{items_str}}}, default={self.default!r})"
