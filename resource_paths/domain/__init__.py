"""Pure domain code: path grammar, resource registry, path info and errors.

Nothing here touches the request or the browser location; the current path is
only ever an explicit argument or a value the host puts in a context variable.
"""
__all__ = ["errors", "ids", "info", "paths", "registry"]
