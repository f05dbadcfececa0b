"""Compute the types, enums and unions reachable from an interface."""

from __future__ import annotations

import logging
from typing import Literal

from ..models import ComplexType, EnumType, Interface, Service, TypeReference, UnionType

logger = logging.getLogger(__name__)

Direction = Literal["input", "output"]


class InterfaceClosure:
    """Closed set of entities reachable from an interface's method signatures.

    Parameters are traversed as ``input``, non-primitive return values as
    ``output``. Each direction keeps its own visited set, so an entity reached
    from both sides is recorded once per direction and once in the merged view.

    Every collection is sorted by entity name.
    """

    def __init__(self, service: Service, interface: Interface):
        self.service = service
        self.interface = interface

        self._types: dict[Direction, dict[str, ComplexType]] = {"input": {}, "output": {}}
        self._enums: dict[Direction, dict[str, EnumType]] = {"input": {}, "output": {}}
        self._unions: dict[Direction, dict[str, UnionType]] = {"input": {}, "output": {}}
        self._visited: dict[Direction, set[str]] = {"input": set(), "output": set()}

        self._resolve()

    @property
    def input_types(self) -> list[ComplexType]:
        return _sorted(self._types["input"])

    @property
    def output_types(self) -> list[ComplexType]:
        return _sorted(self._types["output"])

    @property
    def types(self) -> list[ComplexType]:
        return _merged(self._types)

    @property
    def input_enums(self) -> list[EnumType]:
        return _sorted(self._enums["input"])

    @property
    def output_enums(self) -> list[EnumType]:
        return _sorted(self._enums["output"])

    @property
    def enums(self) -> list[EnumType]:
        return _merged(self._enums)

    @property
    def input_unions(self) -> list[UnionType]:
        return _sorted(self._unions["input"])

    @property
    def output_unions(self) -> list[UnionType]:
        return _sorted(self._unions["output"])

    @property
    def unions(self) -> list[UnionType]:
        return _merged(self._unions)

    def _resolve(self) -> None:
        for method in self.interface.methods:
            for param in method.parameters:
                self._traverse(param.value, "input")

            if method.returns and not method.returns.value.is_primitive:
                self._traverse(method.returns.value, "output")

        logger.debug(
            f"Closure for {self.interface.name}: "
            f"{len(self.types)} types, {len(self.enums)} enums, {len(self.unions)} unions"
        )

    def _traverse(self, start: TypeReference, direction: Direction) -> None:
        """Depth-first walk from ``start`` using an explicit stack."""
        visited = self._visited[direction]
        stack = [start]

        while stack:
            ref = stack.pop()
            if ref.is_primitive:
                continue

            name = ref.type_name
            if name in visited:
                continue

            # Type wins over Union, Union over Enum
            type_ = self.service.get_type(name)
            union = self.service.get_union(name) if type_ is None else None
            enum = self.service.get_enum(name) if type_ is None and union is None else None

            if type_ is not None:
                self._types[direction][name] = type_
                visited.add(name)
                children = [prop.value for prop in type_.properties]
            elif union is not None:
                self._unions[direction][name] = union
                visited.add(name)
                children = list(union.members)
            elif enum is not None:
                self._enums[direction][name] = enum
                visited.add(name)
                children = []
            else:
                logger.debug(f"Unresolved type reference: {name}")
                continue

            # Reversed so children are visited in declared order
            stack.extend(reversed(children))


def _sorted(entities: dict) -> list:
    return [entities[name] for name in sorted(entities)]


def _merged(by_direction: dict) -> list:
    """Union of input and output entities, one instance per name."""
    merged = {**by_direction["output"], **by_direction["input"]}
    return _sorted(merged)
