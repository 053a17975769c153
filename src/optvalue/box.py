"""
Box — присутствующее optional-значение

Optional[T] в этом пакете — это `Box[T] | None`:
- `Box[T]`  — значение присутствует (present)
- `None`    — значение отсутствует (absent)

Box — immutable generic Pydantic модель в strict режиме: значение
хранится без приведения типов (int не превращается в float, str не
превращается в int и т.д.).
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


# =============================================================================
# BOX MODEL
# =============================================================================


class Box(BaseModel, Generic[T]):
    """
    Контейнер присутствующего значения.

    Параметризация `Box[int]`, `Box[str]`, ... создаёт отдельный класс,
    поэтому runtime-тип бокса однозначно соответствует типу значения.
    """

    value: T = Field(..., description="Присутствующее значение")

    model_config = {"frozen": True, "strict": True}  # Immutable, без коэрсии

    def value_type(self) -> type:
        """Runtime-тип хранимого значения."""
        return type(self.value)
