from __future__ import annotations

from collections.abc import Callable
from contextvars import ContextVar, Token
from typing import NamedTuple, Optional

from ..logging_conf import get_logger
from .errors import FormatError, InvalidIdentifierError, PathError, UnknownResourceError
from .ids import looks_like_uuid
from .info import ActionMode, PathInfo, PathKind
from .registry import ResourceRegistry

__all__ = [
    "ITEM_ID_PLACEHOLDER",
    "CONTEXT_ID_PLACEHOLDER",
    "SplitPath",
    "PathShape",
    "generate_global_list_path",
    "generate_context_list_path",
    "generate_item_create_path",
    "generate_item_view_path",
    "generate_item_edit_path",
    "split_path",
    "path_shape",
    "classify_path_shape",
    "extract_path_info",
    "is_item_path",
    "is_list_path",
    "validate_path",
    "set_current_path",
    "reset_current_path",
]

logger = get_logger("resource_paths.paths")

ITEM_ID_PLACEHOLDER = ":id"
CONTEXT_ID_PLACEHOLDER = ":contextId"

_CREATE = "create"
_EDIT = "edit"

# Location of the request being handled, set by the host (middleware, test, ...).
_current_path: ContextVar[Optional[str]] = ContextVar("resource_paths_current_path", default=None)


class SplitPath(NamedTuple):
    segments: list[str]
    query: Optional[str]


class PathShape(NamedTuple):
    """The features of a segment list that decide what a path addresses."""

    segment_count: int
    second_is_create: bool
    last_is_edit: bool


# ------------------------
# Internals
# ------------------------

def _id_or(identifier: str | None, placeholder: str) -> str:
    # None and "" are both "no identifier"; an empty segment would not decompose.
    if identifier is None or identifier == "":
        return placeholder
    return identifier


def _resolve(path: str | None) -> str:
    if path is not None:
        return path
    current = _current_path.get()
    if current is None:
        raise FormatError("No path given and no current path is set.")
    return current


# Ordered decision table; the first matching rule wins.
_SHAPE_RULES: tuple[tuple[Callable[[PathShape], bool], PathKind], ...] = (
    (
        lambda s: (s.segment_count == 2 and not s.second_is_create)
        or (s.segment_count == 3 and s.last_is_edit),
        PathKind.item,
    ),
    (lambda s: s.segment_count == 1, PathKind.global_list),
    (lambda s: s.segment_count == 2 and s.second_is_create, PathKind.create),
    (lambda s: s.segment_count == 3, PathKind.context_list),
)


def _action_mode(shape: PathShape, kind: PathKind | None) -> ActionMode:
    # "/x/edit/" views an item with id "edit"; "/p/1/create/" lists "create" resources.
    if kind is PathKind.item and shape.segment_count == 3:
        return ActionMode.edit
    if kind is PathKind.create:
        return ActionMode.create
    return ActionMode.view


# ------------------------
# Generation
# ------------------------

def generate_global_list_path(resource_name: str) -> str:
    """Return the path of the global list for a resource.

    No validation is performed; pass the result to `validate_path` to check the
    resource name.
    """
    return f"/{resource_name}/"


def generate_context_list_path(
    ctx_resource_name: str,
    ctx_id: str | None,
    resource_name: str,
    *,
    registry: ResourceRegistry | None = None,
) -> str:
    """Return the path of a resource list within a context.

    If `registry` holds a context mapper for (resource_name, ctx_resource_name)
    the mapper decides the context segments and the path ends with "/".
    Otherwise the literal context is used and the path has no trailing "/".
    A missing context id becomes ":contextId".
    """
    mapper = (
        registry.get_context_mapper_for_resource(resource_name, ctx_resource_name)
        if registry is not None
        else None
    )
    if mapper is not None:
        mapped_context, mapped_id = mapper(ctx_id)
        return f"/{mapped_context}/{_id_or(mapped_id, CONTEXT_ID_PLACEHOLDER)}/{resource_name}/"
    return f"/{ctx_resource_name}/{_id_or(ctx_id, CONTEXT_ID_PLACEHOLDER)}/{resource_name}"


def generate_item_create_path(resource_name: str) -> str:
    return f"/{resource_name}/{_CREATE}/"


def generate_item_view_path(resource_name: str, item_id: str | None = None) -> str:
    """Return the path to view an item; a missing id becomes ":id"."""
    return f"/{resource_name}/{_id_or(item_id, ITEM_ID_PLACEHOLDER)}/"


def generate_item_edit_path(resource_name: str, item_id: str | None = None) -> str:
    """Return the path to edit an item; a missing id becomes ":id"."""
    return f"/{resource_name}/{_id_or(item_id, ITEM_ID_PLACEHOLDER)}/{_EDIT}/"


# ------------------------
# Decomposition
# ------------------------

def split_path(path: str) -> SplitPath:
    """Split a canonical path into its segments and raw query.

    Raises:
        FormatError: if the path lacks the leading or trailing "/", or has an
            empty segment ("//").
    """
    path_name, sep, query = path.partition("?")
    if not (path_name.startswith("/") and path_name.endswith("/")):
        raise FormatError(
            f"Cannot extract information from a non-absolute/canonical path: '{path}'. "
            "Ensure to include a leading and trailing '/'.",
            path=path,
        )
    segments = path_name[1:-1].split("/") if path_name != "/" else []
    if "" in segments:
        raise FormatError(f"Empty segment in path '{path}'.", path=path)
    return SplitPath(segments=segments, query=query if sep else None)


def path_shape(segments: list[str]) -> PathShape:
    return PathShape(
        segment_count=len(segments),
        second_is_create=len(segments) > 1 and segments[1] == _CREATE,
        last_is_edit=bool(segments) and segments[-1] == _EDIT,
    )


def classify_path_shape(shape: PathShape) -> PathKind | None:
    """Return what a path of this shape addresses, or None if nothing does."""
    for matches, kind in _SHAPE_RULES:
        if matches(shape):
            return kind
    return None


def extract_path_info(path: str | None = None) -> PathInfo:
    """Decompose a canonical path into a `PathInfo`.

    When `path` is omitted, the current path set by the host with
    `set_current_path` is used.

    The action mode is "edit" for paths ending in "/edit/", "create" for paths
    ending in "/create/" and "view" otherwise. It signals intent for rendering;
    it does not limit which operations a UI may offer.

    The form of the path is checked, but not whether the resources it names are
    known. Use `validate_path` for that.

    Raises:
        FormatError: if the path is not canonical or has no recognised shape.
    """
    path = _resolve(path)
    segments, _ = split_path(path)
    shape = path_shape(segments)
    kind = classify_path_shape(shape)
    action_mode = _action_mode(shape, kind)

    if kind is PathKind.item:
        pub_id = segments[1]
        info = PathInfo(
            resource_name=segments[0],
            pub_id=pub_id,
            is_uuid=looks_like_uuid(pub_id),
            is_item=True,
            is_list=False,
            action_mode=action_mode,
        )
    elif kind is PathKind.global_list:
        info = PathInfo(
            resource_name=segments[0], is_item=False, is_list=True, action_mode=action_mode
        )
    elif kind is PathKind.create:
        info = PathInfo(
            resource_name=segments[0], is_item=True, is_list=False, action_mode=action_mode
        )
    elif kind is PathKind.context_list:
        ctx_pub_id = segments[1]
        info = PathInfo(
            resource_name=segments[2],
            ctx_resource_name=segments[0],
            ctx_pub_id=ctx_pub_id,
            is_uuid=looks_like_uuid(ctx_pub_id),
            is_item=False,
            is_list=True,
            action_mode=action_mode,
        )
    else:
        raise FormatError(
            f"Cannot extract information from path '{path}': "
            f"{len(segments)} segment(s) match no known path form.",
            path=path,
        )

    logger.debug(
        "path.extract",
        extra={
            "event": "path_extract",
            "path": path,
            "kind": kind.value,
            "action_mode": action_mode.value,
        },
    )
    return info


def is_item_path(path: str | None = None) -> bool:
    return extract_path_info(path).is_item


def is_list_path(path: str | None = None) -> bool:
    return extract_path_info(path).is_list


# ------------------------
# Validation
# ------------------------

def _rejected(err: PathError) -> PathError:
    logger.debug(
        "path.invalid",
        extra={"event": "path_invalid", "error_code": err.code, "path": err.path},
    )
    return err


def _is_valid_id(registry: ResourceRegistry, resource_name: str, identifier: str) -> bool:
    if looks_like_uuid(identifier):
        return True
    return any(
        pattern.search(identifier)
        for pattern in registry.get_alt_id_matchers_for_resource(resource_name)
    )


def validate_path(path: str | None = None, *, registry: ResourceRegistry) -> str:
    """Check a path's form, resource names and identifier forms.

    Returns the path unchanged so calls can be chained, e.g.:

        path = validate_path(generate_item_edit_path("foos"), registry=registry)
        info = extract_path_info(validate_path(path, registry=registry))

    Whether any specific item or context exists is not checked; only that ids are
    UUID-shaped or match an alternate-ID pattern registered for their resource.

    Raises:
        FormatError: see `extract_path_info`.
        UnknownResourceError: if a (context) resource is not registered.
        InvalidIdentifierError: if an id matches neither a UUID nor an alternate ID.
    """
    path = _resolve(path)
    info = extract_path_info(path)

    if not registry.is_resource_defined(info.resource_name):
        raise _rejected(
            UnknownResourceError(
                f"Unknown resource '{info.resource_name}' found in path '{path}'.",
                path=path,
                resource_name=info.resource_name,
            )
        )
    if info.ctx_resource_name is not None and not registry.is_resource_defined(
        info.ctx_resource_name
    ):
        raise _rejected(
            UnknownResourceError(
                f"Unknown context resource '{info.ctx_resource_name}' found in path '{path}'.",
                path=path,
                resource_name=info.ctx_resource_name,
            )
        )

    checks = (
        (info.resource_name, info.pub_id),
        (info.ctx_resource_name, info.ctx_pub_id),
    )
    for resource_name, identifier in checks:
        if resource_name is None or identifier is None:
            continue
        if not _is_valid_id(registry, resource_name, identifier):
            raise _rejected(
                InvalidIdentifierError(
                    f"No valid resource ID found where expected in path '{path}'. "
                    f"Do you need to define a valid alternate ID for '{resource_name}'?",
                    path=path,
                    resource_name=resource_name,
                    identifier=identifier,
                )
            )

    return path


# ------------------------
# Current path
# ------------------------

def set_current_path(path: str | None) -> Token:
    """Set the path used when `extract_path_info`/`validate_path` get none.

    Returns a token for `reset_current_path`.
    """
    return _current_path.set(path)


def reset_current_path(token: Token) -> None:
    _current_path.reset(token)
