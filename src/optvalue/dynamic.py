"""
Dynamic Lift — optional для значения заранее неизвестного типа

Единственная операция пакета с режимом отказа:
- Известные скалярные типы (bool, int, float, complex, str, datetime,
  timedelta) обслуживаются каталогом kinds
- Любой другой runtime-тип упаковывается через параметризацию Box[type(value)]
- Если Pydantic не может построить Box для типа → TypeConstructionError

ИНВАРИАНТ: type(dynamic_to_optional(v)) is Box[type(v)]
(без расширения/сужения типа и без приведения значения)
"""

import logging
from typing import Any

from pydantic import PydanticUserError, ValidationError

from src.optvalue.box import Box
from src.optvalue.kinds import kind_for_type

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class TypeConstructionError(Exception):
    """
    Невозможно построить Box для runtime-типа значения.

    Возникает, когда Pydantic не может сгенерировать схему для типа
    (например, произвольный класс без поддержки Pydantic) или значение
    не проходит strict-валидацию собственного типа.
    """

    def __init__(self, value_type: type, reason: str):
        self.value_type = value_type
        self.reason = reason
        super().__init__(
            f"Cannot construct optional box for type "
            f"{value_type.__module__}.{value_type.__qualname__}: {reason}"
        )


# =============================================================================
# DYNAMIC LIFT
# =============================================================================


def dynamic_to_optional(value: Any) -> Box[Any]:
    """
    Lift значения произвольного runtime-типа в присутствующий optional.

    Args:
        value: Значение любого типа

    Returns:
        Box[type(value)] с value

    Raises:
        TypeConstructionError: Если Box для type(value) построить невозможно

    Examples:
        >>> type(dynamic_to_optional(1)) is Box[int]
        True
        >>> dynamic_to_optional("ptr").value
        'ptr'
    """
    value_type = type(value)

    kind = kind_for_type(value_type)
    if kind is not None:
        return kind.to_optional(value)

    logger.debug("No scalar kind for %s, boxing generically", value_type.__qualname__)

    try:
        return Box[value_type](value=value)
    except (PydanticUserError, ValidationError) as e:
        logger.debug("Box construction failed for %s: %s", value_type.__qualname__, e)
        raise TypeConstructionError(value_type, str(e)) from e
