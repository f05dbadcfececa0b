"""Base models shared by every IR entity."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _as_paragraphs(value: Any) -> Any:
    """Accept a single string wherever a list of paragraphs is expected."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return value


Paragraphs = Annotated[list[str], BeforeValidator(_as_paragraphs)]


class Primitive(str, Enum):
    """Primitive kinds understood by the renderer."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    DATE = "date"
    DATE_TIME = "date-time"
    NULL = "null"
    BINARY = "binary"
    UNTYPED = "untyped"

    @classmethod
    def from_str(cls, value: str) -> "Primitive | None":
        """Return the matching primitive, or None for an unknown kind."""
        try:
            return cls(value.lower())
        except ValueError:
            return None


class IRModel(BaseModel):
    """Base class for immutable IR entities."""

    model_config = ConfigDict(frozen=True)


class TypeReference(IRModel):
    """Reference to a primitive kind or to a named Type, Enum or Union.

    Complex references are resolved by name against the owning Service, so
    the same reference may point at a Type, an Enum or a Union.
    """

    kind: Literal["primitive", "complex"] = "complex"
    type_name: str = Field(..., description="Primitive kind or entity name")
    is_array: bool = Field(default=False)

    @property
    def is_primitive(self) -> bool:
        return self.kind == "primitive"

    @property
    def primitive(self) -> Primitive | None:
        """Primitive kind, when this is a primitive reference."""
        if not self.is_primitive:
            return None
        return Primitive.from_str(self.type_name)
