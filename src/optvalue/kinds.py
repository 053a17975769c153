"""
Scalar Kinds — каталог поддерживаемых скалярных типов

Каждый kind = (имя, Python-тип, zero value). Kind связывает обобщённые
адаптеры из adapters.py с конкретным типом и его zero value.

Целочисленные kinds разной разрядности (int8 ... uint64) номинальны:
Python int не ограничен, проверка диапазона не выполняется.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Final, Generic, Mapping, Sequence, TypeVar

from src.optvalue.adapters import (
    from_optional,
    from_optional_mapping,
    from_optional_sequence,
    to_optional,
    to_optional_mapping,
    to_optional_sequence,
)
from src.optvalue.box import Box

T = TypeVar("T")


# =============================================================================
# ZERO VALUES
# =============================================================================

ZERO_BOOL: Final[bool] = False

# Все целочисленные kinds: int*, uint*, byte, rune
ZERO_INT: Final[int] = 0

# float32 / float64
ZERO_FLOAT: Final[float] = 0.0

# complex64 / complex128
ZERO_COMPLEX: Final[complex] = 0j

ZERO_STRING: Final[str] = ""

# Нулевой момент времени: 0001-01-01 00:00:00 UTC
ZERO_TIME: Final[datetime] = datetime(1, 1, 1, tzinfo=timezone.utc)

ZERO_DURATION: Final[timedelta] = timedelta(0)


# =============================================================================
# SCALAR KIND
# =============================================================================


@dataclass(frozen=True)
class ScalarKind(Generic[T]):
    """Скалярный kind с привязанными операциями lift/lower."""

    name: str
    annotation: type[T]
    zero: T

    def to_optional(self, value: T) -> Box[T]:
        return to_optional(value, self.annotation)

    def from_optional(self, box: Box[T] | None) -> T:
        return from_optional(box, self.zero)

    def to_optional_sequence(self, values: Sequence[T] | None) -> list[Box[T]]:
        return to_optional_sequence(values, self.annotation)

    def from_optional_sequence(self, boxes: Sequence[Box[T] | None] | None) -> list[T]:
        return from_optional_sequence(boxes, self.zero)

    def to_optional_mapping(self, values: Mapping[str, T] | None) -> dict[str, Box[T]]:
        return to_optional_mapping(values, self.annotation)

    def from_optional_mapping(
        self, boxes: Mapping[str, Box[T] | None] | None
    ) -> dict[str, T]:
        return from_optional_mapping(boxes, self.zero)


# =============================================================================
# KINDS
# =============================================================================

BOOL: Final[ScalarKind[bool]] = ScalarKind("bool", bool, ZERO_BOOL)

BYTE: Final[ScalarKind[int]] = ScalarKind("byte", int, ZERO_INT)
RUNE: Final[ScalarKind[int]] = ScalarKind("rune", int, ZERO_INT)

# Знаковые целые
INT: Final[ScalarKind[int]] = ScalarKind("int", int, ZERO_INT)
INT8: Final[ScalarKind[int]] = ScalarKind("int8", int, ZERO_INT)
INT16: Final[ScalarKind[int]] = ScalarKind("int16", int, ZERO_INT)
INT32: Final[ScalarKind[int]] = ScalarKind("int32", int, ZERO_INT)
INT64: Final[ScalarKind[int]] = ScalarKind("int64", int, ZERO_INT)

# Беззнаковые целые
UINT: Final[ScalarKind[int]] = ScalarKind("uint", int, ZERO_INT)
UINT8: Final[ScalarKind[int]] = ScalarKind("uint8", int, ZERO_INT)
UINT16: Final[ScalarKind[int]] = ScalarKind("uint16", int, ZERO_INT)
UINT32: Final[ScalarKind[int]] = ScalarKind("uint32", int, ZERO_INT)
UINT64: Final[ScalarKind[int]] = ScalarKind("uint64", int, ZERO_INT)

FLOAT32: Final[ScalarKind[float]] = ScalarKind("float32", float, ZERO_FLOAT)
FLOAT64: Final[ScalarKind[float]] = ScalarKind("float64", float, ZERO_FLOAT)

COMPLEX64: Final[ScalarKind[complex]] = ScalarKind("complex64", complex, ZERO_COMPLEX)
COMPLEX128: Final[ScalarKind[complex]] = ScalarKind("complex128", complex, ZERO_COMPLEX)

STRING: Final[ScalarKind[str]] = ScalarKind("string", str, ZERO_STRING)

TIME: Final[ScalarKind[datetime]] = ScalarKind("time", datetime, ZERO_TIME)
DURATION: Final[ScalarKind[timedelta]] = ScalarKind("duration", timedelta, ZERO_DURATION)

ALL_KINDS: Final[tuple[ScalarKind, ...]] = (
    BOOL,
    BYTE,
    RUNE,
    INT,
    INT8,
    INT16,
    INT32,
    INT64,
    UINT,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    FLOAT32,
    FLOAT64,
    COMPLEX64,
    COMPLEX128,
    STRING,
    TIME,
    DURATION,
)


# =============================================================================
# RUNTIME TYPE REGISTRY
# =============================================================================

# Канонический kind для каждого Python runtime-типа
_KIND_BY_TYPE: Final[dict[type, ScalarKind]] = {
    bool: BOOL,
    int: INT,
    float: FLOAT64,
    complex: COMPLEX128,
    str: STRING,
    datetime: TIME,
    timedelta: DURATION,
}


def kind_for_type(value_type: type) -> ScalarKind | None:
    """
    Канонический kind для runtime-типа.

    Сравнение по точному типу: подклассы (например, IntEnum) не
    сопоставляются с kind базового типа.

    Args:
        value_type: Python-тип (например, type(value))

    Returns:
        ScalarKind или None, если тип не входит в каталог
    """
    return _KIND_BY_TYPE.get(value_type)
