"""Render one Markdown document per interface."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from ..config import DocsConfig
from ..models import (
    ComplexType,
    EnumType,
    Interface,
    Method,
    Parameter,
    Property,
    Service,
)
from ..naming import (
    build_entity_name,
    build_interface_name,
    build_method_name,
    build_parameter_name,
    build_property_name,
    title,
)
from .closure import InterfaceClosure
from .links import TypeLinker, anchor
from .rules import build_rules

BannerFactory = Callable[[Service], Iterable[str]]


class DocumentRenderer:
    """Render an interface, its methods and its type closure as Markdown.

    ``render`` is a generator without state between calls: rendering the same
    interface twice yields the same lines.
    """

    def __init__(
        self,
        service: Service,
        config: DocsConfig | None = None,
        banner: BannerFactory | None = None,
    ):
        self.service = service
        self.config = config or DocsConfig()
        self.banner = banner
        self.linker = TypeLinker(service)

    def render_text(self, interface: Interface, closure: InterfaceClosure | None = None) -> str:
        """Render the whole document as a single newline-terminated string."""
        return "\n".join(self.render(interface, closure)) + "\n"

    def render(
        self, interface: Interface, closure: InterfaceClosure | None = None
    ) -> Iterator[str]:
        """Yield the lines of the interface's document."""
        if closure is None:
            closure = InterfaceClosure(self.service, interface)

        methods = sorted(interface.methods, key=lambda m: m.name)
        types = sorted(closure.types, key=lambda t: build_entity_name(t.name))
        enums = sorted(closure.enums, key=lambda e: build_entity_name(e.name))

        if self.config.banner and self.banner is not None:
            yield "<!--"
            yield from self.banner(self.service)
            yield "-->"
            yield ""

        yield f"# {title(build_interface_name(interface))}"
        yield ""
        for paragraph in interface.description:
            yield paragraph
            yield ""
        yield from self._toc(methods, types, enums)
        yield ""

        if methods:
            yield "## Methods"
            yield ""
            for method in methods:
                yield from self._method(method)
        if types:
            yield "## Types"
            yield ""
            for type_ in types:
                yield from self._type(type_)
        if enums:
            yield "## Enums"
            yield ""
            for enum in enums:
                yield from self._enum(enum)

    def _toc(
        self,
        methods: list[Method],
        types: list[ComplexType],
        enums: list[EnumType],
    ) -> Iterator[str]:
        if methods:
            yield "- Methods"
            for method in methods:
                name = build_method_name(method)
                yield f"  - [{name}]({anchor(name)})"
        if types:
            yield "- Types"
            for type_ in types:
                name = build_entity_name(type_.name)
                yield f"  - [{name}]({anchor(name)})"
        if enums:
            yield "- Enums"
            for enum in enums:
                name = build_entity_name(enum.name)
                yield f"  - [{name}]({anchor(name)})"

    def _method(self, method: Method) -> Iterator[str]:
        yield f"### {build_method_name(method)}"
        yield ""
        yield f"`{self._signature(method)}`"
        if method.parameters:
            yield ""
            for param in _sorted_parameters(method.parameters):
                yield from self._member(build_parameter_name(param), param)
        if method.returns:
            yield ""
            yield f"Returns: {self.linker.linked_type_name(method.returns.value)}"
        for paragraph in method.description:
            yield ""
            yield paragraph
        yield ""

    def _signature(self, method: Method) -> str:
        name = build_method_name(method)
        if not method.parameters:
            return name

        names = ", ".join(
            f"{build_parameter_name(param)}{'' if param.required else '?'}"
            for param in _sorted_parameters(method.parameters)
        )
        has_required = any(param.required for param in method.parameters)
        optional = "" if has_required else " | undefined"
        return f"{name}({{{names}}}{optional})"

    def _member(self, name: str, member: Parameter | Property) -> Iterator[str]:
        """Bullet for a parameter or property, followed by its rules."""
        optional = "" if member.required else " (optional)"
        description = f" - {' '.join(member.description)}" if member.description else ""
        yield (
            f"- `{name}` {self.linker.linked_type_name(member.value)}"
            f"{optional}{description}"
        )
        yield from build_rules(member.rules)

    def _type(self, type_: ComplexType) -> Iterator[str]:
        name = build_entity_name(type_.name)
        yield f"### {name}"
        yield ""
        yield f"`{name}`"
        for paragraph in type_.description:
            yield ""
            yield paragraph
        if type_.properties:
            yield ""
            for prop in type_.properties:
                yield from self._member(build_property_name(prop), prop)
        if type_.map_properties:
            yield ""
            yield "#### Map Properties"
            yield ""
            yield f"- Keys: {self.linker.linked_type_name(type_.map_properties.key)}"
            yield f"- Values: {self.linker.linked_type_name(type_.map_properties.value)}"
        yield ""

    def _enum(self, enum: EnumType) -> Iterator[str]:
        name = build_entity_name(enum.name)
        yield f"### {name}"
        yield ""
        yield f"`{name}`"
        if enum.description:
            yield ""
            yield enum.description
        if enum.members:
            yield ""
            for member in enum.members:
                value_description = enum.value_description(member)
                suffix = f" - {value_description}" if value_description else ""
                yield f"- `{member}`{suffix}"
        yield ""


def _sorted_parameters(parameters: list[Parameter]) -> list[Parameter]:
    return sorted(parameters, key=lambda p: p.name)
