"""Errors raised while transforming a schema tree into record types."""

from __future__ import annotations

from pathlib import Path


class TransformError(Exception):
    """Base class for transformation failures.

    Attributes
    ----------
        path: Dotted property path where the failure happened, if known.

    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(f"{message} (at {path})" if path else message)


class MissingTitleError(TransformError):
    """The root schema has no title to use as the root type name."""

    def __init__(self) -> None:
        super().__init__("Schema has no title; a title is required for the root type name")


class MalformedReferenceError(TransformError):
    """A reference string is empty or has an unrecognized shape."""

    def __init__(self, reference: str, path: str | None = None) -> None:
        self.reference = reference
        super().__init__(f"Invalid reference: {reference!r}", path)


class UnknownDefinitionError(TransformError):
    """A local reference points at a definition that does not exist."""

    def __init__(self, name: str, reference: str, path: str | None = None) -> None:
        self.name = name
        self.reference = reference
        super().__init__(f"No definition named {name!r} for reference {reference!r}", path)


class ExternalResolutionError(TransformError):
    """An externally referenced document could not be loaded."""

    def __init__(self, location: Path, reason: str, path: str | None = None) -> None:
        self.location = location
        self.reason = reason
        super().__init__(f"Cannot load referenced document {location}: {reason}", path)


class UnsupportedKindError(TransformError):
    """A property declares a type the transformer cannot map."""

    def __init__(self, kind: str | None, path: str | None = None, detail: str | None = None) -> None:
        self.kind = kind
        label = repr(kind) if kind is not None else "no type"
        message = f"Unsupported schema type: {label}"
        if detail:
            message = f"{message}; {detail}"
        super().__init__(message, path)


class CyclicReferenceError(TransformError):
    """A reference resolves back to itself, directly or transitively."""

    def __init__(self, chain: list[str], path: str | None = None) -> None:
        self.chain = chain
        super().__init__(f"Circular reference: {' -> '.join(chain)}", path)


class RecursionLimitError(TransformError):
    """The schema nests deeper than the configured maximum depth."""

    def __init__(self, depth: int, path: str | None = None) -> None:
        self.depth = depth
        super().__init__(f"Schema nesting exceeds maximum depth of {depth}", path)
