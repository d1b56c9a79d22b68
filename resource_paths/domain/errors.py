from __future__ import annotations

__all__ = [
    "PathError",
    "FormatError",
    "UnknownResourceError",
    "InvalidIdentifierError",
]


class PathError(ValueError):
    """Base class for path-related errors.

    The `code` attribute gives UI code a stable machine code to report on.
    """

    code: str = "invalid_path"

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class FormatError(PathError):
    code = "malformed_path"


class UnknownResourceError(PathError):
    code = "unknown_resource"

    def __init__(self, message: str, *, path: str | None = None, resource_name: str) -> None:
        super().__init__(message, path=path)
        self.resource_name = resource_name


class InvalidIdentifierError(PathError):
    code = "invalid_identifier"

    def __init__(
        self, message: str, *, path: str | None = None, resource_name: str, identifier: str
    ) -> None:
        super().__init__(message, path=path)
        self.resource_name = resource_name
        self.identifier = identifier
