"""Render validation rules as Markdown bullets."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from ..models import ValidationRule

# Rule id -> bullet text. Ids missing here are not documented.
RULE_TEMPLATES: dict[str, Callable[[Any], str]] = {
    "ArrayMaxItems": lambda rule: f"Max array length: {rule.max}",
    "ArrayMinItems": lambda rule: f"Min array length: {rule.min}",
    "ArrayUniqueItems": lambda rule: "Values must be unique",
    "NumberGT": lambda rule: f"Must be greater than {rule.value}",
    "NumberGTE": lambda rule: f"Must be greater than or equal to {rule.value}",
    "NumberLT": lambda rule: f"Must be less than {rule.value}",
    "NumberLTE": lambda rule: f"Must be less than or equal to {rule.value}",
    "NumberMultipleOf": lambda rule: f"Must be a multiple of {rule.value}",
    "StringMaxLength": lambda rule: f"Max length: {rule.length}",
    "StringMinLength": lambda rule: f"Min length: {rule.length}",
    "StringPattern": lambda rule: f"Must match pattern: {rule.pattern}",
}


def format_rule(rule: ValidationRule) -> str | None:
    """Return the bullet text for a rule, or None if the rule is unknown."""
    template = RULE_TEMPLATES.get(rule.id)
    if template is None:
        return None
    return template(rule)


def build_rules(rules: Iterable[ValidationRule]) -> Iterator[str]:
    """Yield nested bullet lines for rules, in declared order."""
    for rule in rules:
        text = format_rule(rule)
        if text is not None:
            yield f"  - {text}"
