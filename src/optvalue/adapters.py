"""
Optional Adapters — обобщённые конверсии value ↔ optional

Шесть форм операций, реализованных один раз для любого типа T:
- to_optional / from_optional                       (скаляр)
- to_optional_sequence / from_optional_sequence     (упорядоченная последовательность)
- to_optional_mapping / from_optional_mapping       (словарь со строковыми ключами)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Absent (None) при lower всегда даёт zero value, никогда не exception
2. Длина последовательности и набор ключей словаря сохраняются
3. Входной контейнер никогда не мутируется, результат — всегда новый контейнер
4. None вместо контейнера эквивалентен пустому контейнеру
"""

from typing import Mapping, Sequence, TypeVar

from src.optvalue.box import Box

T = TypeVar("T")


# =============================================================================
# СКАЛЯРЫ
# =============================================================================


def to_optional(value: T, annotation: type[T]) -> Box[T]:
    """
    Lift: значение → присутствующий optional.

    Args:
        value: Исходное значение
        annotation: Тип значения, которым параметризуется Box

    Returns:
        Box[annotation] с value

    Examples:
        >>> to_optional(5, int).value
        5
    """
    return Box[annotation](value=value)


def from_optional(box: Box[T] | None, zero: T) -> T:
    """
    Lower: optional → значение.

    Args:
        box: Присутствующий Box или None
        zero: Zero value, возвращаемое для absent

    Returns:
        box.value если optional присутствует, иначе zero

    Examples:
        >>> from_optional(None, 0)
        0
        >>> from_optional(to_optional(7, int), 0)
        7
    """
    if box is None:
        return zero
    return box.value


# =============================================================================
# ПОСЛЕДОВАТЕЛЬНОСТИ
# =============================================================================


def to_optional_sequence(
    values: Sequence[T] | None,
    annotation: type[T],
) -> list[Box[T]]:
    """
    Поэлементный lift последовательности.

    Args:
        values: Последовательность значений (None трактуется как пустая)
        annotation: Тип элементов

    Returns:
        Новый список той же длины, элемент i = to_optional(values[i])
    """
    if values is None:
        return []
    return [to_optional(v, annotation) for v in values]


def from_optional_sequence(
    boxes: Sequence[Box[T] | None] | None,
    zero: T,
) -> list[T]:
    """
    Поэлементный lower последовательности.

    Absent элементы заменяются на zero, порядок и длина сохраняются.

    Args:
        boxes: Последовательность optional (None трактуется как пустая)
        zero: Zero value для absent элементов

    Returns:
        Новый список значений той же длины
    """
    if boxes is None:
        return []
    return [from_optional(b, zero) for b in boxes]


# =============================================================================
# СЛОВАРИ
# =============================================================================


def to_optional_mapping(
    values: Mapping[str, T] | None,
    annotation: type[T],
) -> dict[str, Box[T]]:
    """
    Поэлементный lift словаря.

    Args:
        values: Словарь значений (None трактуется как пустой)
        annotation: Тип значений

    Returns:
        Новый словарь с тем же набором ключей
    """
    if values is None:
        return {}
    return {k: to_optional(v, annotation) for k, v in values.items()}


def from_optional_mapping(
    boxes: Mapping[str, Box[T] | None] | None,
    zero: T,
) -> dict[str, T]:
    """
    Поэлементный lower словаря.

    Args:
        boxes: Словарь optional (None трактуется как пустой)
        zero: Zero value для absent значений

    Returns:
        Новый словарь с тем же набором ключей; absent → zero
    """
    if boxes is None:
        return {}
    return {k: from_optional(b, zero) for k, b in boxes.items()}
