"""Name casing, display names and output path policy."""

from __future__ import annotations

import re

from .models import Interface, Method, Parameter, Primitive, Property, Service, TypeReference

_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")

# Display names of primitive kinds in the documented language (TypeScript)
PRIMITIVE_DISPLAY_NAMES = {
    Primitive.STRING: "string",
    Primitive.NUMBER: "number",
    Primitive.INTEGER: "number",
    Primitive.LONG: "number",
    Primitive.FLOAT: "number",
    Primitive.DOUBLE: "number",
    Primitive.BOOLEAN: "boolean",
    Primitive.DATE: "Date",
    Primitive.DATE_TIME: "Date",
    Primitive.NULL: "null",
    Primitive.BINARY: "Blob",
    Primitive.UNTYPED: "unknown",
}


def split_words(value: str) -> list[str]:
    """Split an identifier on separators and case boundaries.

    ``"widgetReceipt"``, ``"widget-receipt"`` and ``"WIDGET_RECEIPT"`` all
    split into two words.
    """
    value = _CASE_BOUNDARY.sub(r"\1 \2", value)
    value = _ACRONYM_BOUNDARY.sub(r"\1 \2", value)
    return [word for word in _SEPARATORS.split(value) if word]


def pascal(value: str) -> str:
    return "".join(word.capitalize() for word in split_words(value))


def camel(value: str) -> str:
    words = split_words(value)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def kebab(value: str) -> str:
    return "-".join(word.lower() for word in split_words(value))


def title(value: str) -> str:
    return " ".join(word.capitalize() for word in split_words(value))


def build_interface_name(interface: Interface) -> str:
    return pascal(f"{interface.name} service")


def build_method_name(method: Method) -> str:
    return camel(method.name)


def build_parameter_name(param: Parameter) -> str:
    return camel(param.name)


def build_property_name(prop: Property) -> str:
    return camel(prop.name)


def build_entity_name(name: str) -> str:
    """Display name of a Type, Enum or Union."""
    return pascal(name)


def build_type_name(ref: TypeReference, skip_arrayify: bool = False) -> str:
    """Display name of the referenced type, with ``[]`` for arrays."""
    if ref.is_primitive:
        primitive = ref.primitive
        if primitive is None:
            name = ref.type_name
        else:
            name = PRIMITIVE_DISPLAY_NAMES[primitive]
    else:
        name = build_entity_name(ref.type_name)

    if ref.is_array and not skip_arrayify:
        return f"{name}[]"
    return name


def build_docs_filepath(interface: Interface, service: Service) -> list[str]:
    """Output path segments for an interface's document."""
    return [
        f"v{service.major_version}",
        f"{kebab(build_interface_name(interface))}.md",
    ]
