from __future__ import annotations

import json
import os
import re
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from .domain.registry import ResourceRegistry
from .logging_conf import get_logger

__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigError",
    "RegistryConfig",
    "load_registry_config",
    "get_config_path_from_env",
    "registry_from_env",
]

CONFIG_ENV_VAR = "RESOURCE_PATHS_CONFIG"

logger = get_logger("resource_paths.config")


class ConfigError(ValueError):
    code: str = "invalid_config"


class RegistryConfig(BaseModel):
    """Declarative registry contents, typically loaded from a JSON file.

    Context mappers are code and are registered on the built registry directly.
    """

    resources: list[str] = Field(default_factory=list)
    alt_id_patterns: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("alt_id_patterns")
    @classmethod
    def _patterns_compile(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        for resource_name, patterns in value.items():
            for pattern in patterns:
                try:
                    re.compile(pattern)
                except re.error as e:
                    raise ValueError(
                        f"invalid alternate ID pattern {pattern!r} for '{resource_name}': {e}"
                    ) from e
        return value

    def build_registry(self) -> ResourceRegistry:
        registry = ResourceRegistry()
        registry.set_resources(self.resources)
        for resource_name, patterns in self.alt_id_patterns.items():
            registry.add_alt_id_matcher(resource_name, patterns)
        return registry


def load_registry_config(path: str | Path) -> RegistryConfig:
    """Read and validate a registry config JSON file.

    Raises:
        ConfigError: if the file is missing, not JSON, or does not match the schema.
    """
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read registry config {p}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"registry config {p} is not valid JSON: {e}") from e

    try:
        config = RegistryConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"registry config {p} schema invalid: {e}") from e

    logger.info(
        "config.load",
        extra={"event": "config_load", "path": str(p), "resources": len(config.resources)},
    )
    return config


def get_config_path_from_env() -> Path | None:
    """Return the RESOURCE_PATHS_CONFIG path, or None if unset or blank."""
    val = os.getenv(CONFIG_ENV_VAR, "").strip()
    return Path(val) if val else None


def registry_from_env() -> ResourceRegistry:
    """Build a registry from RESOURCE_PATHS_CONFIG; empty if the variable is unset."""
    path = get_config_path_from_env()
    if path is None:
        return ResourceRegistry()
    return load_registry_config(path).build_registry()
