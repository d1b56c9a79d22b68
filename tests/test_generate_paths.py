"""Tests for the path generators."""

from resource_paths.domain.paths import (
    generate_context_list_path,
    generate_global_list_path,
    generate_item_create_path,
    generate_item_edit_path,
    generate_item_view_path,
)
from resource_paths.domain.registry import ContextMapping, ResourceRegistry

TEST_UUID = "C6B4E077-91F1-4BC3-A857-42EFC7B9D247"


class TestGlobalListPath:
    def test_known_resource(self) -> None:
        assert generate_global_list_path("persons") == "/persons/"

    def test_unknown_resource(self) -> None:
        assert generate_global_list_path("foos") == "/foos/"


class TestItemPaths:
    def test_create(self) -> None:
        assert generate_item_create_path("persons") == "/persons/create/"

    def test_view_with_id(self) -> None:
        assert generate_item_view_path("persons", TEST_UUID) == f"/persons/{TEST_UUID}/"

    def test_view_placeholder(self) -> None:
        assert generate_item_view_path("persons") == "/persons/:id/"

    def test_edit_with_id(self) -> None:
        assert generate_item_edit_path("persons", "self") == "/persons/self/edit/"

    def test_edit_placeholder(self) -> None:
        assert generate_item_edit_path("persons") == "/persons/:id/edit/"

    def test_empty_id_uses_placeholder(self) -> None:
        assert generate_item_view_path("persons", "") == "/persons/:id/"
        assert generate_item_edit_path("persons", "") == "/persons/:id/edit/"


class TestContextListPath:
    def test_without_mapper_has_no_trailing_slash(self) -> None:
        assert generate_context_list_path("places", TEST_UUID, "persons") == (
            f"/places/{TEST_UUID}/persons"
        )

    def test_placeholder_without_mapper(self) -> None:
        assert generate_context_list_path("places", None, "persons") == (
            "/places/:contextId/persons"
        )

    def test_registry_without_matching_mapper(self, registry: ResourceRegistry) -> None:
        registry.add_context_mapper("persons", "orgs", lambda ctx_id: ContextMapping("x", ctx_id))
        assert generate_context_list_path("places", "p1", "persons", registry=registry) == (
            "/places/p1/persons"
        )

    def test_mapper_rewrites_context(self, registry: ResourceRegistry) -> None:
        registry.add_context_mapper(
            "persons", "orgs", lambda ctx_id: ContextMapping("organizations", ctx_id)
        )
        assert generate_context_list_path("orgs", TEST_UUID, "persons", registry=registry) == (
            f"/organizations/{TEST_UUID}/persons/"
        )

    def test_mapper_receives_context_id(self, registry: ResourceRegistry) -> None:
        seen: list[str | None] = []

        def mapper(ctx_id: str | None) -> ContextMapping:
            seen.append(ctx_id)
            return ContextMapping("places", "home")

        registry.add_context_mapper("persons", "homes", mapper)
        assert generate_context_list_path("homes", "h1", "persons", registry=registry) == (
            "/places/home/persons/"
        )
        assert seen == ["h1"]

    def test_mapper_without_id_uses_placeholder(self, registry: ResourceRegistry) -> None:
        registry.add_context_mapper("persons", "orgs", lambda ctx_id: ("organizations", None))
        assert generate_context_list_path("orgs", None, "persons", registry=registry) == (
            "/organizations/:contextId/persons/"
        )
