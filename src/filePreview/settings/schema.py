"""Schema helpers for the gallery settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from filePreview.config import DEFAULT_PAGE_SIZE, DEFAULT_SIZE_DECIMALS
from filePreview.domain.models.core import SortDirection, SortField
from filePreview.domain.services.filter_set import EmptyFilterPolicy

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "filePreview/settings.schema.json",
    "type": "object",
    "required": ["schema", "gallery"],
    "properties": {
        "schema": {"const": "filePreview/settings@1"},
        "gallery": {
            "type": "object",
            "properties": {
                "page_size": {"type": "integer", "minimum": 1},
                "size_decimals": {"type": "integer", "minimum": 0, "maximum": 10},
                "empty_filter_policy": {
                    "type": "string",
                    "enum": [policy.value for policy in EmptyFilterPolicy],
                },
                "default_sort_field": {
                    "type": "string",
                    "enum": [field.alias for field in SortField],
                },
                "default_sort_direction": {
                    "type": "string",
                    "enum": [direction.value for direction in SortDirection],
                },
                "object_api_name": {"type": ["string", "null"]},
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "filePreview/settings@1",
    "gallery": {
        "page_size": DEFAULT_PAGE_SIZE,
        "size_decimals": DEFAULT_SIZE_DECIMALS,
        "empty_filter_policy": EmptyFilterPolicy.PASS_THROUGH.value,
        "default_sort_field": SortField.CREATED_DATE.alias,
        "default_sort_direction": SortDirection.DESC.value,
        "object_api_name": None,
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "gallery" and isinstance(value, dict):
                merged["gallery"].update(value)
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults"]
