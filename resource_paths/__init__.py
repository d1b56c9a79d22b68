"""Shared path conventions for REST-like resource URLs.

Generate, decompose and validate paths such as "/persons/", "/persons/<id>/edit/"
and "/places/<id>/persons/" from a single source of truth.
"""
from importlib.metadata import PackageNotFoundError, version

from .domain.errors import FormatError, InvalidIdentifierError, PathError, UnknownResourceError
from .domain.info import ActionMode, PathInfo, PathKind
from .domain.paths import (
    CONTEXT_ID_PLACEHOLDER,
    ITEM_ID_PLACEHOLDER,
    extract_path_info,
    generate_context_list_path,
    generate_global_list_path,
    generate_item_create_path,
    generate_item_edit_path,
    generate_item_view_path,
    is_item_path,
    is_list_path,
    reset_current_path,
    set_current_path,
    validate_path,
)
from .domain.registry import ContextMapping, ResourceRegistry

try:
    __version__ = version("resource-paths")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "ActionMode",
    "CONTEXT_ID_PLACEHOLDER",
    "ContextMapping",
    "FormatError",
    "ITEM_ID_PLACEHOLDER",
    "InvalidIdentifierError",
    "PathError",
    "PathInfo",
    "PathKind",
    "ResourceRegistry",
    "UnknownResourceError",
    "extract_path_info",
    "generate_context_list_path",
    "generate_global_list_path",
    "generate_item_create_path",
    "generate_item_edit_path",
    "generate_item_view_path",
    "is_item_path",
    "is_list_path",
    "reset_current_path",
    "set_current_path",
    "validate_path",
]
