"""
Тесты для каталога скалярных kinds

Проверяет:
1. Zero values по каждому kind
2. Полноту каталога (20 kinds, уникальные имена)
3. Регистр runtime-типов kind_for_type
4. Операции, привязанные к ScalarKind
"""

from datetime import datetime, timedelta, timezone
from enum import IntEnum

import pytest

from src.optvalue.box import Box
from src.optvalue.kinds import (
    ALL_KINDS,
    BOOL,
    BYTE,
    COMPLEX128,
    DURATION,
    FLOAT32,
    FLOAT64,
    INT,
    RUNE,
    STRING,
    TIME,
    UINT64,
    ZERO_TIME,
    ScalarKind,
    kind_for_type,
)


class TestZeroValues:
    """Тесты zero value по kind"""

    def test_bool_zero(self) -> None:
        """bool → False"""
        assert BOOL.from_optional(None) is False

    def test_integer_kinds_zero(self) -> None:
        """Все целочисленные kinds → 0"""
        for kind in ALL_KINDS:
            if kind.annotation is int:
                assert kind.from_optional(None) == 0, kind.name

    def test_float_zero(self) -> None:
        """float32 / float64 → 0.0"""
        assert FLOAT32.from_optional(None) == 0.0
        assert isinstance(FLOAT64.from_optional(None), float)

    def test_complex_zero(self) -> None:
        """complex → 0j"""
        assert COMPLEX128.from_optional(None) == 0j

    def test_string_zero(self) -> None:
        """string → пустая строка"""
        assert STRING.from_optional(None) == ""

    def test_time_zero(self) -> None:
        """time → 0001-01-01 00:00:00 UTC"""
        zero = TIME.from_optional(None)
        assert zero == ZERO_TIME
        assert zero == datetime(1, 1, 1, tzinfo=timezone.utc)
        assert zero.tzinfo is timezone.utc

    def test_duration_zero(self) -> None:
        """duration → timedelta(0)"""
        assert DURATION.from_optional(None) == timedelta(0)

    def test_zero_matches_annotation(self) -> None:
        """Zero value каждого kind имеет тип kind.annotation"""
        for kind in ALL_KINDS:
            assert type(kind.zero) is kind.annotation, kind.name


class TestCatalog:
    """Тесты полноты каталога"""

    def test_twenty_kinds(self) -> None:
        """Каталог содержит 20 kinds"""
        assert len(ALL_KINDS) == 20

    def test_unique_names(self) -> None:
        """Имена kinds уникальны"""
        names = [kind.name for kind in ALL_KINDS]
        assert len(names) == len(set(names))

    def test_kind_is_immutable(self) -> None:
        """ScalarKind frozen"""
        with pytest.raises(AttributeError):
            BOOL.zero = True


class TestKindForType:
    """Тесты kind_for_type"""

    def test_canonical_kinds(self) -> None:
        """Канонический kind для каждого поддерживаемого типа"""
        assert kind_for_type(bool) is BOOL
        assert kind_for_type(int) is INT
        assert kind_for_type(float) is FLOAT64
        assert kind_for_type(complex) is COMPLEX128
        assert kind_for_type(str) is STRING
        assert kind_for_type(datetime) is TIME
        assert kind_for_type(timedelta) is DURATION

    def test_unknown_type(self) -> None:
        """Тип вне каталога → None"""
        assert kind_for_type(bytes) is None
        assert kind_for_type(list) is None

    def test_subclass_not_matched(self) -> None:
        """Подклассы не сопоставляются с kind базового типа"""

        class Level(IntEnum):
            LOW = 1

        assert kind_for_type(Level) is None


class TestBoundOperations:
    """Тесты операций ScalarKind"""

    def test_roundtrip(self) -> None:
        """Round-trip через kind"""
        assert BYTE.from_optional(BYTE.to_optional(255)) == 255
        assert RUNE.from_optional(RUNE.to_optional(ord("ж"))) == ord("ж")
        assert UINT64.from_optional(UINT64.to_optional(2**64 - 1)) == 2**64 - 1

    def test_lift_box_type(self) -> None:
        """Lift даёт Box[kind.annotation]"""
        assert type(STRING.to_optional("a")) is Box[str]

    def test_sequence_and_mapping(self) -> None:
        """Контейнерные операции используют zero value kind"""
        assert STRING.from_optional_sequence([None, STRING.to_optional("x")]) == ["", "x"]
        assert BOOL.from_optional_mapping({"a": None, "b": BOOL.to_optional(True)}) == {
            "a": False,
            "b": True,
        }

    def test_custom_kind(self) -> None:
        """ScalarKind можно объявить для собственного типа"""
        kind = ScalarKind("bytes", bytes, b"")
        assert kind.from_optional(None) == b""
        assert kind.from_optional(kind.to_optional(b"\x01")) == b"\x01"
