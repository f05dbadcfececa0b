"""Shared pytest fixtures for svcdocs tests."""

from pathlib import Path

import pytest

from svcdocs.config import ConfigLoader
from svcdocs.models import Service


def prim(name: str, is_array: bool = False) -> dict:
    return {"kind": "primitive", "type_name": name, "is_array": is_array}


def ref(name: str, is_array: bool = False) -> dict:
    return {"kind": "complex", "type_name": name, "is_array": is_array}


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from a real ~/.svcdocs directory."""
    user_dir = tmp_path / "user-config"
    monkeypatch.setattr(ConfigLoader, "USER_CONFIG_DIR", user_dir)
    return user_dir


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def widget_service() -> Service:
    """Service with disjoint input and output types plus an enum."""
    return Service.model_validate(
        {
            "title": "Widgets",
            "major_version": 2,
            "interfaces": [
                {
                    "name": "widget",
                    "description": ["Manage widgets."],
                    "methods": [
                        {
                            "name": "create",
                            "description": "Create a widget.",
                            "parameters": [
                                {"name": "input", "required": True, "value": ref("Widget")},
                            ],
                            "returns": {"value": ref("WidgetReceipt")},
                        },
                    ],
                },
            ],
            "types": [
                {
                    "name": "Widget",
                    "properties": [
                        {"name": "name", "required": True, "value": prim("string")},
                        {"name": "color", "value": ref("Color")},
                    ],
                },
                {
                    "name": "WidgetReceipt",
                    "properties": [
                        {"name": "id", "required": True, "value": prim("string")},
                    ],
                },
            ],
            "enums": [
                {
                    "name": "Color",
                    "members": ["red", "green"],
                    "docs": {
                        "description": "Paint color.",
                        "value_descriptions": {"red": "Like a fire truck"},
                    },
                },
            ],
        }
    )


@pytest.fixture
def node_service() -> Service:
    """Service whose only type references itself."""
    return Service.model_validate(
        {
            "title": "Nodes",
            "interfaces": [
                {
                    "name": "graph",
                    "methods": [
                        {
                            "name": "append",
                            "parameters": [{"name": "node", "required": True, "value": ref("Node")}],
                        },
                    ],
                },
            ],
            "types": [
                {
                    "name": "Node",
                    "properties": [
                        {"name": "value", "value": prim("integer")},
                        {"name": "next", "value": ref("Node")},
                    ],
                },
            ],
        }
    )


@pytest.fixture
def pet_service() -> Service:
    """Service with a union parameter and a mutual type cycle."""
    return Service.model_validate(
        {
            "title": "Pets",
            "interfaces": [
                {
                    "name": "pet",
                    "methods": [
                        {
                            "name": "adopt",
                            "parameters": [
                                {"name": "pet", "required": True, "value": ref("Pet")},
                                {"name": "note", "value": prim("string")},
                            ],
                            "returns": {"value": ref("Owner")},
                        },
                        {
                            "name": "list",
                            "returns": {"value": ref("Pet", is_array=True)},
                        },
                    ],
                },
            ],
            "types": [
                {
                    "name": "Cat",
                    "properties": [{"name": "owner", "value": ref("Owner")}],
                },
                {
                    "name": "Dog",
                    "properties": [{"name": "size", "value": ref("Size")}],
                },
                {
                    "name": "Owner",
                    "properties": [{"name": "pets", "value": ref("Pet", is_array=True)}],
                },
            ],
            "unions": [
                {"name": "Pet", "members": [ref("Cat"), ref("Dog")]},
            ],
            "enums": [
                {"name": "Size", "members": ["small", "large"]},
            ],
        }
    )
