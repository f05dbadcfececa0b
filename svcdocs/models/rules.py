"""Validation rule models.

Rules form a tagged union on ``id``. Ids this package does not know parse
into ``UnknownRule`` instead of failing, so newer IR documents still load.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Discriminator, Tag

from .base import IRModel


class ArrayMaxItemsRule(IRModel):
    id: Literal["ArrayMaxItems"] = "ArrayMaxItems"
    max: int


class ArrayMinItemsRule(IRModel):
    id: Literal["ArrayMinItems"] = "ArrayMinItems"
    min: int


class ArrayUniqueItemsRule(IRModel):
    id: Literal["ArrayUniqueItems"] = "ArrayUniqueItems"


class NumberGTRule(IRModel):
    id: Literal["NumberGT"] = "NumberGT"
    value: int | float


class NumberGTERule(IRModel):
    id: Literal["NumberGTE"] = "NumberGTE"
    value: int | float


class NumberLTRule(IRModel):
    id: Literal["NumberLT"] = "NumberLT"
    value: int | float


class NumberLTERule(IRModel):
    id: Literal["NumberLTE"] = "NumberLTE"
    value: int | float


class NumberMultipleOfRule(IRModel):
    id: Literal["NumberMultipleOf"] = "NumberMultipleOf"
    value: int | float


class StringMaxLengthRule(IRModel):
    id: Literal["StringMaxLength"] = "StringMaxLength"
    length: int


class StringMinLengthRule(IRModel):
    id: Literal["StringMinLength"] = "StringMinLength"
    length: int


class StringPatternRule(IRModel):
    id: Literal["StringPattern"] = "StringPattern"
    pattern: str


class UnknownRule(IRModel):
    """Rule kind this package cannot document (extra fields are kept)."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str


KNOWN_RULE_IDS = frozenset(
    {
        "ArrayMaxItems",
        "ArrayMinItems",
        "ArrayUniqueItems",
        "NumberGT",
        "NumberGTE",
        "NumberLT",
        "NumberLTE",
        "NumberMultipleOf",
        "StringMaxLength",
        "StringMinLength",
        "StringPattern",
    }
)


def _rule_tag(value: Any) -> str:
    if isinstance(value, dict):
        rule_id = value.get("id")
    else:
        rule_id = getattr(value, "id", None)
    return rule_id if rule_id in KNOWN_RULE_IDS else "Unknown"


ValidationRule = Annotated[
    Union[
        Annotated[ArrayMaxItemsRule, Tag("ArrayMaxItems")],
        Annotated[ArrayMinItemsRule, Tag("ArrayMinItems")],
        Annotated[ArrayUniqueItemsRule, Tag("ArrayUniqueItems")],
        Annotated[NumberGTRule, Tag("NumberGT")],
        Annotated[NumberGTERule, Tag("NumberGTE")],
        Annotated[NumberLTRule, Tag("NumberLT")],
        Annotated[NumberLTERule, Tag("NumberLTE")],
        Annotated[NumberMultipleOfRule, Tag("NumberMultipleOf")],
        Annotated[StringMaxLengthRule, Tag("StringMaxLength")],
        Annotated[StringMinLengthRule, Tag("StringMinLength")],
        Annotated[StringPatternRule, Tag("StringPattern")],
        Annotated[UnknownRule, Tag("Unknown")],
    ],
    Discriminator(_rule_tag),
]
