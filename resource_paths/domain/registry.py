r"""In-memory registry of known resources, alternate-ID rules and context mappers.

Usage:
    registry = ResourceRegistry()
    registry.add_resource("persons")
    registry.add_alt_id_matcher("persons", r"^self\Z")
    registry.add_context_mapper(
        "persons", "orgs", lambda org_id: ContextMapping("organizations", org_id)
    )

Nothing here validates its inputs and no operation raises. The registry is NOT
thread-safe: populate it before concurrent readers start, or serialize access
externally.
"""
from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from typing import NamedTuple, Optional, Union

from ..logging_conf import get_logger

__all__ = [
    "ContextMapping",
    "ContextMapper",
    "IdPattern",
    "ResourceRegistry",
]

logger = get_logger("resource_paths.registry")


class ContextMapping(NamedTuple):
    """Path segments a context mapper substitutes for (context resource, context id)."""

    mapped_context: str
    mapped_id: Optional[str] = None


ContextMapper = Callable[[Optional[str]], ContextMapping]
IdPattern = Union[str, re.Pattern]


# Patterns run with pattern.search(id). In Python "$" also matches before a final
# "\n", so anchor with "\Z" (r"^self\Z") to reject "self\n".
def _compile(pattern: IdPattern) -> re.Pattern[str]:
    return pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)


class ResourceRegistry:
    """Known resource names plus per-resource identifier and context rules."""

    _resources: set[str]
    _alt_id_matchers: dict[str, list[re.Pattern[str]]]
    _context_mappers: dict[str, dict[str, ContextMapper]]

    def __init__(self) -> None:
        self._resources = set()
        self._alt_id_matchers = {}
        self._context_mappers = {}

    # ------------------------
    # Resources
    # ------------------------

    def is_resource_defined(self, resource_name: str) -> bool:
        return resource_name in self._resources

    def add_resource(self, resource_name: str) -> None:
        self._resources.add(resource_name)
        logger.debug(
            "registry.resource_add",
            extra={"event": "registry_resource_add", "resource_name": resource_name},
        )

    def set_resources(self, resource_names: Iterable[str]) -> None:
        """Replace the full set of known resources."""
        self._resources = set(resource_names)
        logger.debug(
            "registry.resources_set",
            extra={"event": "registry_resources_set", "count": len(self._resources)},
        )

    def list_resources(self) -> list[str]:
        return sorted(self._resources)

    # ------------------------
    # Alternate IDs
    # ------------------------

    def get_alt_id_matchers(self) -> dict[str, list[re.Pattern[str]]]:
        """Return a copy of the full resource -> patterns mapping."""
        return {name: list(patterns) for name, patterns in self._alt_id_matchers.items()}

    def get_alt_id_matchers_for_resource(self, resource_name: str) -> list[re.Pattern[str]]:
        """Return the alternate-ID patterns for a resource.

        Always a (copied) list: an unregistered resource and a resource without
        alternate IDs both yield [].
        """
        return list(self._alt_id_matchers.get(resource_name, []))

    def add_alt_id_matcher(
        self, resource_name: str, pattern_or_patterns: IdPattern | Iterable[IdPattern]
    ) -> None:
        """Append one pattern, or extend with a sequence of patterns."""
        if isinstance(pattern_or_patterns, (str, re.Pattern)):
            new = [_compile(pattern_or_patterns)]
        else:
            new = [_compile(p) for p in pattern_or_patterns]
        self._alt_id_matchers.setdefault(resource_name, []).extend(new)
        logger.debug(
            "registry.alt_id_add",
            extra={
                "event": "registry_alt_id_add",
                "resource_name": resource_name,
                "patterns": [p.pattern for p in new],
            },
        )

    def set_alt_id_matchers(self, mapping: Mapping[str, Iterable[IdPattern]]) -> None:
        """Replace the full resource -> patterns mapping."""
        self._alt_id_matchers = {
            name: [_compile(p) for p in patterns] for name, patterns in mapping.items()
        }

    # ------------------------
    # Context mappers
    # ------------------------

    def get_context_mapper_for_resource(
        self, resource_name: str, ctx_resource_name: str
    ) -> ContextMapper | None:
        return self._context_mappers.get(resource_name, {}).get(ctx_resource_name)

    def add_context_mapper(
        self, resource_name: str, ctx_resource_name: str, mapper: ContextMapper
    ) -> None:
        """Register `mapper` for the pair, replacing any existing one."""
        self._context_mappers.setdefault(resource_name, {})[ctx_resource_name] = mapper
        logger.debug(
            "registry.context_mapper_add",
            extra={
                "event": "registry_context_mapper_add",
                "resource_name": resource_name,
                "ctx_resource_name": ctx_resource_name,
            },
        )

    def set_resource_mappers(
        self, mapping: Mapping[str, Mapping[str, ContextMapper]]
    ) -> None:
        """Replace the full resource -> context resource -> mapper mapping."""
        self._context_mappers = {name: dict(inner) for name, inner in mapping.items()}
