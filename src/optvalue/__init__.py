"""
optvalue — конверсии между значениями и optional-представлениями

Optional[T] = Box[T] | None. Absent (None) при lower всегда даёт
zero value типа, никогда не exception.
"""

# Box
from src.optvalue.box import Box

# Обобщённые адаптеры
from src.optvalue.adapters import (
    from_optional,
    from_optional_mapping,
    from_optional_sequence,
    to_optional,
    to_optional_mapping,
    to_optional_sequence,
)

# Kinds
from src.optvalue.kinds import (
    ALL_KINDS,
    ZERO_BOOL,
    ZERO_COMPLEX,
    ZERO_DURATION,
    ZERO_FLOAT,
    ZERO_INT,
    ZERO_STRING,
    ZERO_TIME,
    ScalarKind,
    kind_for_type,
)

# Dynamic lift
from src.optvalue.dynamic import TypeConstructionError, dynamic_to_optional

# Каталог <kind>_to_optional / <kind>_from_optional / ...
from src.optvalue import catalog
from src.optvalue.catalog import *  # noqa: F401,F403

__all__ = [
    # Box
    "Box",
    # Обобщённые адаптеры
    "to_optional",
    "from_optional",
    "to_optional_sequence",
    "from_optional_sequence",
    "to_optional_mapping",
    "from_optional_mapping",
    # Kinds — Zero values
    "ZERO_BOOL",
    "ZERO_INT",
    "ZERO_FLOAT",
    "ZERO_COMPLEX",
    "ZERO_STRING",
    "ZERO_TIME",
    "ZERO_DURATION",
    # Kinds — Types
    "ScalarKind",
    "ALL_KINDS",
    "kind_for_type",
    # Dynamic lift
    "TypeConstructionError",
    "dynamic_to_optional",
]

__all__ += catalog.__all__
