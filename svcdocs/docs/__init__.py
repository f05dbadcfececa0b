"""Closure resolution and Markdown rendering for service interfaces."""

from .closure import InterfaceClosure
from .links import PRIMITIVE_URLS, TypeLinker, anchor
from .renderer import DocumentRenderer
from .rules import RULE_TEMPLATES, build_rules, format_rule

__all__ = [
    "DocumentRenderer",
    "InterfaceClosure",
    "PRIMITIVE_URLS",
    "RULE_TEMPLATES",
    "TypeLinker",
    "anchor",
    "build_rules",
    "format_rule",
]
