"""
Scalar data types and per-column category domains.

Responsibilities:
    * enumerate the atomic data types a graph edge may carry
    * infer the data type of literal values from numpy dtypes
    * describe a known finite domain, one ordered value sequence per column
"""
# 说明：图边上传递的原子数据类型与逐列类别域（jagged）抽象。
# 职责：
# - DataType：BOOL / I64 / F64 / STR 四种数据类型，并支持从 numpy dtype 推断
# - CategorySet：每列一个有序取值序列的不可变类别集合，提供列数、各列长度等查询

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from dpvalidator.core.errors import UnsupportedShapeError


class DataType(enum.Enum):
    """Atomic data types carried on graph edges."""

    BOOL = "bool"
    I64 = "i64"
    F64 = "f64"
    STR = "str"

    @classmethod
    def from_dtype(cls, dtype: Any) -> "DataType":
        # 按 numpy dtype.kind 归类：b→BOOL，i/u→I64，f→F64，U/S/O→STR
        kind = np.dtype(dtype).kind
        if kind == "b":
            return cls.BOOL
        if kind in ("i", "u"):
            return cls.I64
        if kind == "f":
            return cls.F64
        if kind in ("U", "S", "O"):
            return cls.STR
        raise UnsupportedShapeError(f"unsupported dtype '{np.dtype(dtype)}'")

    @property
    def is_numeric(self) -> bool:
        return self in (DataType.I64, DataType.F64)

    @property
    def numpy_dtype(self) -> Any:
        return {
            DataType.BOOL: np.bool_,
            DataType.I64: np.int64,
            DataType.F64: np.float64,
            DataType.STR: np.str_,
        }[self]


def _to_scalar(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


@dataclass(frozen=True)
class CategorySet:
    """
    Known finite domain of a property, one ordered sequence per column.

    - Configuration
      - columns: Tuple of per-column category tuples.
      - data_type: Atomic type shared by every category.

    - Usage Notes
      - Build with :meth:`from_columns` to normalise numpy scalars and infer
        the data type.
    """

    columns: Tuple[Tuple[Any, ...], ...]
    data_type: DataType

    @classmethod
    def from_columns(
        cls,
        columns: Iterable[Sequence[Any]],
        data_type: Optional[DataType] = None,
    ) -> "CategorySet":
        normalised = tuple(tuple(_to_scalar(v) for v in column) for column in columns)
        if data_type is None:
            flat = [v for column in normalised for v in column]
            if not flat:
                raise UnsupportedShapeError("data type of empty categories cannot be inferred")
            data_type = DataType.from_dtype(np.asarray(flat).dtype)
        return cls(columns=normalised, data_type=data_type)

    @property
    def num_columns(self) -> int:
        return len(self.columns)

    def lengths(self) -> List[int]:
        return [len(column) for column in self.columns]

    def column(self, index: int) -> Tuple[Any, ...]:
        try:
            return self.columns[index]
        except IndexError as exc:
            raise UnsupportedShapeError(
                f"categories have {self.num_columns} columns, column {index} requested"
            ) from exc

    def to_list(self) -> List[List[Any]]:
        return [list(column) for column in self.columns]
