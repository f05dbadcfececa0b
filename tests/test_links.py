"""Tests for anchors and linked type names."""

from __future__ import annotations

from conftest import prim, ref

from svcdocs.docs import PRIMITIVE_URLS, TypeLinker, anchor
from svcdocs.models import Primitive, Service, TypeReference

STRING_URL = PRIMITIVE_URLS[Primitive.STRING]
NUMBER_URL = PRIMITIVE_URLS[Primitive.NUMBER]


def tref(data: dict) -> TypeReference:
    return TypeReference.model_validate(data)


class TestAnchor:
    def test_lowercase_and_hyphens(self):
        assert anchor("Widget Service") == "#widget-service"

    def test_single_word(self):
        assert anchor("WidgetReceipt") == "#widgetreceipt"


class TestPrimitiveUrls:
    def test_number_family_shares_url(self):
        for kind in (Primitive.INTEGER, Primitive.LONG, Primitive.FLOAT, Primitive.DOUBLE):
            assert PRIMITIVE_URLS[kind] == NUMBER_URL

    def test_date_kinds_share_url(self):
        assert PRIMITIVE_URLS[Primitive.DATE] == PRIMITIVE_URLS[Primitive.DATE_TIME]

    def test_binary_has_no_url(self):
        assert Primitive.BINARY not in PRIMITIVE_URLS


class TestLinkedTypeName:
    def test_primitive_with_url(self, widget_service):
        linker = TypeLinker(widget_service)
        assert linker.linked_type_name(tref(prim("string"))) == f"[&lt;string&gt;]({STRING_URL})"

    def test_primitive_array(self, widget_service):
        linker = TypeLinker(widget_service)
        assert (
            linker.linked_type_name(tref(prim("integer", is_array=True)))
            == f"[&lt;number[]&gt;]({NUMBER_URL})"
        )

    def test_primitive_without_url(self, widget_service):
        linker = TypeLinker(widget_service)
        assert linker.linked_type_name(tref(prim("binary"))) == "&lt;Blob&gt;"

    def test_unknown_primitive_kind_keeps_name(self, widget_service):
        linker = TypeLinker(widget_service)
        assert linker.linked_type_name(tref(prim("decimal"))) == "&lt;decimal&gt;"

    def test_complex_type(self, widget_service):
        linker = TypeLinker(widget_service)
        assert (
            linker.linked_type_name(tref(ref("WidgetReceipt")))
            == "[&lt;WidgetReceipt&gt;](#widgetreceipt)"
        )

    def test_complex_array(self, widget_service):
        linker = TypeLinker(widget_service)
        assert (
            linker.linked_type_name(tref(ref("Widget", is_array=True)))
            == "[&lt;Widget[]&gt;](#widget)"
        )

    def test_unresolved_name_still_linked(self, widget_service):
        linker = TypeLinker(widget_service)
        assert linker.linked_type_name(tref(ref("ghost"))) == "[&lt;Ghost&gt;](#ghost)"


class TestUnionFlattening:
    def test_members_linked_separately(self, pet_service):
        linker = TypeLinker(pet_service)
        assert (
            linker.linked_type_name(tref(ref("Pet")))
            == "[&lt;Cat&gt;](#cat) | [&lt;Dog&gt;](#dog)"
        )

    def test_array_of_union_parenthesized(self, pet_service):
        linker = TypeLinker(pet_service)
        assert (
            linker.linked_type_name(tref(ref("Pet", is_array=True)))
            == "([&lt;Cat&gt;](#cat) | [&lt;Dog&gt;](#dog))[]"
        )

    def test_nested_union_is_flattened(self):
        service = Service.model_validate(
            {
                "title": "Nested",
                "unions": [
                    {"name": "Inner", "members": [prim("string"), ref("Thing")]},
                    {"name": "Outer", "members": [ref("Inner"), prim("null")]},
                ],
            }
        )
        linker = TypeLinker(service)
        assert linker.linked_type_name(tref(ref("Outer"))) == (
            f"[&lt;string&gt;]({STRING_URL}) | [&lt;Thing&gt;](#thing)"
            f" | [&lt;null&gt;]({PRIMITIVE_URLS[Primitive.NULL]})"
        )

    def test_self_referencing_union_terminates(self):
        service = Service.model_validate(
            {
                "title": "Loop",
                "unions": [{"name": "Json", "members": [prim("string"), ref("Json", is_array=True)]}],
            }
        )
        linker = TypeLinker(service)
        assert linker.linked_type_name(tref(ref("Json"))) == (
            f"[&lt;string&gt;]({STRING_URL}) | [&lt;Json[]&gt;](#json)"
        )
