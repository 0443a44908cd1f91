from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence


class Matrix(ABC):
    """Capability contract for mutable two-dimensional containers.

    Rows and columns are zero-based. Access is valid on ``[0, dim)``,
    insertion on ``[0, dim]`` so that inserting at ``dim`` appends.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def height(self) -> int:
        pass

    @property
    @abstractmethod
    def width(self) -> int:
        pass

    @abstractmethod
    def get(self, row: int, col: int) -> Any:
        pass

    @abstractmethod
    def set(self, row: int, col: int, val: Any) -> None:
        pass

    @abstractmethod
    def insert_row(self, at: int, values: Optional[Sequence[Any]] = None) -> None:
        pass

    @abstractmethod
    def insert_col(self, at: int, values: Optional[Sequence[Any]] = None) -> None:
        pass

    @abstractmethod
    def delete_row(self, at: int) -> None:
        pass

    @abstractmethod
    def delete_col(self, at: int) -> None:
        pass

    @abstractmethod
    def fill_region(self, start_row: int, start_col: int, end_row: int, end_col: int, val: Any) -> None:
        pass

    @abstractmethod
    def fill_line(
        self,
        start_row: int,
        start_col: int,
        delta_row: int,
        delta_col: int,
        end_row: int,
        end_col: int,
        val: Any,
    ) -> None:
        pass

    @abstractmethod
    def clone(self) -> Matrix:
        pass

    @abstractmethod
    def equals(self, other: object) -> bool:
        pass

    @abstractmethod
    def hash_code(self) -> int:
        pass

    @property
    def shape(self):
        return (self.height, self.width)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return self.hash_code()
