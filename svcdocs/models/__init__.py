"""Pydantic models for the service IR."""

from .base import IRModel, Paragraphs, Primitive, TypeReference
from .rules import (
    KNOWN_RULE_IDS,
    ArrayMaxItemsRule,
    ArrayMinItemsRule,
    ArrayUniqueItemsRule,
    NumberGTERule,
    NumberGTRule,
    NumberLTERule,
    NumberLTRule,
    NumberMultipleOfRule,
    StringMaxLengthRule,
    StringMinLengthRule,
    StringPatternRule,
    UnknownRule,
    ValidationRule,
)
from .service import (
    ENUM_DESCRIPTION_KEY,
    ENUM_VALUE_DESCRIPTIONS_KEY,
    ComplexType,
    EnumDocs,
    EnumType,
    Interface,
    MapProperties,
    Method,
    Parameter,
    Property,
    ReturnValue,
    Service,
    UnionType,
)

__all__ = [
    "IRModel",
    "Paragraphs",
    "Primitive",
    "TypeReference",
    "KNOWN_RULE_IDS",
    "ArrayMaxItemsRule",
    "ArrayMinItemsRule",
    "ArrayUniqueItemsRule",
    "NumberGTRule",
    "NumberGTERule",
    "NumberLTRule",
    "NumberLTERule",
    "NumberMultipleOfRule",
    "StringMaxLengthRule",
    "StringMinLengthRule",
    "StringPatternRule",
    "UnknownRule",
    "ValidationRule",
    "ENUM_DESCRIPTION_KEY",
    "ENUM_VALUE_DESCRIPTIONS_KEY",
    "ComplexType",
    "EnumDocs",
    "EnumType",
    "Interface",
    "MapProperties",
    "Method",
    "Parameter",
    "Property",
    "ReturnValue",
    "Service",
    "UnionType",
]
