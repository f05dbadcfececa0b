"""Service IR models: interfaces, methods, types, enums and unions."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, Field, model_validator

from .base import IRModel, Paragraphs, TypeReference
from .rules import ValidationRule

# Well-known keys of the generic metadata list some parsers attach to enums
ENUM_DESCRIPTION_KEY = "codegen-enum-description"
ENUM_VALUE_DESCRIPTIONS_KEY = "codegen-enum-value-descriptions"


class Parameter(IRModel):
    """Method parameter."""

    name: str
    required: bool = Field(default=False)
    description: Paragraphs = Field(default_factory=list)
    rules: list[ValidationRule] = Field(default_factory=list)
    value: TypeReference


class Property(IRModel):
    """Property of a complex type."""

    name: str
    required: bool = Field(default=False)
    description: Paragraphs = Field(default_factory=list)
    rules: list[ValidationRule] = Field(default_factory=list)
    value: TypeReference


class ReturnValue(IRModel):
    """Method return value."""

    value: TypeReference
    description: Paragraphs = Field(default_factory=list)


class Method(IRModel):
    """Interface method."""

    name: str
    description: Paragraphs = Field(default_factory=list)
    parameters: list[Parameter] = Field(default_factory=list)
    returns: ReturnValue | None = Field(default=None)


class Interface(IRModel):
    """Group of methods documented together in one file."""

    name: str
    description: Paragraphs = Field(default_factory=list)
    methods: list[Method] = Field(default_factory=list)


class MapProperties(IRModel):
    """Key and value types of a dictionary-shaped type."""

    key: TypeReference
    value: TypeReference


class ComplexType(IRModel):
    """Named object type."""

    name: str
    description: Paragraphs = Field(default_factory=list)
    properties: list[Property] = Field(default_factory=list)
    map_properties: MapProperties | None = Field(default=None)


class UnionType(IRModel):
    """Sum type: a value is exactly one of the listed members."""

    name: str
    description: Paragraphs = Field(default_factory=list)
    members: list[TypeReference] = Field(default_factory=list)


def _string_keys(value: Any) -> Any:
    """Key member descriptions by the member's text, numeric literals included."""
    if isinstance(value, dict):
        return {str(key): text for key, text in value.items()}
    return value


EnumMember = str | int | float


class EnumDocs(IRModel):
    """Optional documentation attached to an enum."""

    description: str | None = Field(default=None)
    value_descriptions: Annotated[dict[str, str], BeforeValidator(_string_keys)] = Field(
        default_factory=dict
    )


class EnumType(IRModel):
    """Named set of literal values. Enums reference no other entity."""

    name: str
    members: list[EnumMember] = Field(default_factory=list)
    docs: EnumDocs | None = Field(default=None)

    @model_validator(mode="before")
    @classmethod
    def lift_meta(cls, data: Any) -> Any:
        """Move the generic ``meta`` key/value list into ``docs``."""
        if not isinstance(data, dict) or "meta" not in data:
            return data

        data = dict(data)
        meta = data.pop("meta") or []
        if data.get("docs") is not None:
            return data

        entries = {
            item.get("key"): item.get("value")
            for item in meta
            if isinstance(item, dict)
        }
        description = entries.get(ENUM_DESCRIPTION_KEY)
        value_descriptions = entries.get(ENUM_VALUE_DESCRIPTIONS_KEY)
        if description is not None or value_descriptions is not None:
            data["docs"] = {
                "description": description,
                "value_descriptions": value_descriptions or {},
            }
        return data

    @property
    def description(self) -> str | None:
        return self.docs.description if self.docs else None

    def value_description(self, member: EnumMember) -> str | None:
        """Description of a single member, if documented."""
        if self.docs is None:
            return None
        return self.docs.value_descriptions.get(str(member))


def _keyed_by_name(value: Any) -> Any:
    """Accept entity lists as well as name-keyed mappings."""
    if value is None:
        return {}
    if isinstance(value, list):
        keyed = {}
        for item in value:
            name = item.get("name") if isinstance(item, dict) else item.name
            keyed[name] = item
        return keyed
    if isinstance(value, dict):
        keyed = {}
        for name, item in value.items():
            if isinstance(item, dict) and "name" not in item:
                item = {**item, "name": name}
            keyed[name] = item
        return keyed
    return value


class Service(IRModel):
    """Root of the IR."""

    title: str
    major_version: int = Field(default=1)
    source_path: str | None = Field(default=None)
    interfaces: list[Interface] = Field(default_factory=list)
    types: Annotated[dict[str, ComplexType], BeforeValidator(_keyed_by_name)] = Field(
        default_factory=dict
    )
    enums: Annotated[dict[str, EnumType], BeforeValidator(_keyed_by_name)] = Field(
        default_factory=dict
    )
    unions: Annotated[dict[str, UnionType], BeforeValidator(_keyed_by_name)] = Field(
        default_factory=dict
    )

    def get_type(self, name: str) -> ComplexType | None:
        return self.types.get(name)

    def get_enum(self, name: str) -> EnumType | None:
        return self.enums.get(name)

    def get_union(self, name: str) -> UnionType | None:
        return self.unions.get(name)

    def get_interface(self, name: str) -> Interface | None:
        """Get interface by name."""
        for interface in self.interfaces:
            if interface.name == name:
                return interface
        return None
