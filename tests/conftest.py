import pytest

from resource_paths.domain.paths import reset_current_path, set_current_path
from resource_paths.domain.registry import ResourceRegistry


@pytest.fixture
def registry() -> ResourceRegistry:
    """A fresh registry with 'places' and 'persons'; persons accept the 'self' id."""
    reg = ResourceRegistry()
    reg.add_resource("places")
    reg.add_resource("persons")
    reg.add_alt_id_matcher("persons", r"^self$")
    return reg


@pytest.fixture
def current_path():
    """Set the host's current path for the duration of a test."""
    tokens = []

    def _set(path: str | None) -> None:
        tokens.append(set_current_path(path))

    yield _set
    for token in reversed(tokens):
        reset_current_path(token)
