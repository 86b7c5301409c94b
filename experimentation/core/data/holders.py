"""
Data Holder Implementation
==========================

Mutable value slots shared by reference between experiment actions. The
experiment that creates a holder owns it; actions only read or write it.
"""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class DataHolderNotSetError(LookupError):
    """Raised when reading a holder that has no value."""

    def __init__(self, name: str):
        super().__init__(f"Data holder '{name}' is not set")
        self.name = name


class DataHolder(Generic[T]):
    """
    A named slot that may or may not hold a value.

    ``None`` is not a value: setting it resets the holder.
    """

    read_only = False

    def __init__(self, name: str, value: Optional[T] = None):
        self.name = name
        self._value: Optional[T] = value

    def is_set(self) -> bool:
        return self._value is not None

    def get(self) -> T:
        """
        Get the held value.

        Raises:
            DataHolderNotSetError: If the holder is empty.
        """
        if self._value is None:
            raise DataHolderNotSetError(self.name)
        return self._value

    def set(self, value: Optional[T]) -> None:
        self._value = value

    def reset(self) -> None:
        self._value = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, value={self._value!r})"


class ConstantDataHolder(DataHolder[T]):
    """Holder with a fixed value, e.g. a data link known up front."""

    read_only = True

    def __init__(self, name: str, value: T):
        if value is None:
            raise ValueError("A constant data holder requires a value")
        super().__init__(name, value)

    def set(self, value: Optional[T]) -> None:
        raise TypeError(f"Constant data holder '{self.name}' cannot be changed")

    def reset(self) -> None:
        raise TypeError(f"Constant data holder '{self.name}' cannot be changed")
