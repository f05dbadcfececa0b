"""Anchors and linked type names."""

from __future__ import annotations

from ..models import Primitive, Service, TypeReference
from ..naming import build_type_name

_MDN_DATA_STRUCTURES = (
    "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Data_structures"
)

# Primitive kinds without an entry are rendered without a link
PRIMITIVE_URLS: dict[Primitive, str] = {
    Primitive.STRING: f"{_MDN_DATA_STRUCTURES}#string_type",
    Primitive.NUMBER: f"{_MDN_DATA_STRUCTURES}#number_type",
    Primitive.INTEGER: f"{_MDN_DATA_STRUCTURES}#number_type",
    Primitive.LONG: f"{_MDN_DATA_STRUCTURES}#number_type",
    Primitive.FLOAT: f"{_MDN_DATA_STRUCTURES}#number_type",
    Primitive.DOUBLE: f"{_MDN_DATA_STRUCTURES}#number_type",
    Primitive.BOOLEAN: f"{_MDN_DATA_STRUCTURES}#boolean_type",
    Primitive.DATE: "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference/Global_Objects/Date",
    Primitive.DATE_TIME: "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference/Global_Objects/Date",
    Primitive.NULL: f"{_MDN_DATA_STRUCTURES}#null_type",
}


def anchor(name: str) -> str:
    """In-document link target for a heading.

    Must agree with how Markdown renderers derive heading ids.
    """
    return "#" + "-".join(name.lower().split(" "))


def primitive_url(ref: TypeReference) -> str | None:
    primitive = ref.primitive
    if primitive is None:
        return None
    return PRIMITIVE_URLS.get(primitive)


class TypeLinker:
    """Render type references as Markdown links."""

    def __init__(self, service: Service):
        self.service = service

    def linked_type_name(self, ref: TypeReference) -> str:
        """Linked display name of a reference.

        Unions are flattened into their members, each linked separately.
        """
        return self._linked(ref, frozenset())

    def _linked(self, ref: TypeReference, expanding: frozenset[str]) -> str:
        union = None
        if (
            not ref.is_primitive
            and ref.type_name not in expanding
            and self.service.get_type(ref.type_name) is None
        ):
            union = self.service.get_union(ref.type_name)

        if union is not None:
            inner = expanding | {ref.type_name}
            members = " | ".join(self._linked(member, inner) for member in union.members)
            return f"({members})[]" if ref.is_array else members

        type_name = build_type_name(ref, skip_arrayify=True)
        suffix = "[]" if ref.is_array else ""
        label = f"&lt;{type_name}{suffix}&gt;"

        if ref.is_primitive:
            url = primitive_url(ref)
            return f"[{label}]({url})" if url else label

        return f"[{label}]({anchor(type_name)})"
