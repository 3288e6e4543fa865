"""Classification of ``$ref`` strings.

Two reference shapes are supported:

- local definition references, e.g. ``#/$defs/address``, looked up in the
  definitions of the document that contains the reference;
- external document references, e.g. ``address.schema.json`` or
  ``common.yaml#/definitions/address``, loaded relative to the directory of
  the referring document.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from jgschema.config import ConversionSettings
from jgschema.transform.errors import MalformedReferenceError


class ReferenceKind(Enum):
    """The two supported reference shapes."""

    LOCAL_DEFINITION = "local_definition"
    EXTERNAL_DOCUMENT = "external_document"


@dataclass(frozen=True)
class Reference:
    """A parsed ``$ref`` string.

    Attributes
    ----------
        raw: The reference as written in the schema.
        kind: Local definition or external document.
        document: Document part for external references.
        definition: Definition name from the fragment, if any.

    """

    raw: str
    kind: ReferenceKind
    document: str | None = None
    definition: str | None = None

    def location(self, base_dir: Path) -> Path:
        """Location of the external document, relative paths joined to ``base_dir``."""
        if self.document is None:
            raise ValueError(f"Local reference {self.raw!r} has no document location")
        path = Path(self.document)
        if not path.is_absolute():
            path = base_dir / path
        return Path(os.path.normpath(path))


def _unescape_pointer(segment: str) -> str:
    """Decode JSON pointer escapes (``~1`` is ``/``, ``~0`` is ``~``)."""
    return segment.replace("~1", "/").replace("~0", "~")


def _definition_name(fragment: str, markers: tuple[str, ...]) -> str | None:
    """Return the trailing segment of a fragment that goes through a definitions section."""
    segments = [_unescape_pointer(s) for s in fragment.strip("/").split("/") if s]
    if len(segments) < 2:
        return None
    if not any(segment in markers for segment in segments[:-1]):
        return None
    return segments[-1]


def parse_reference(
    reference: str,
    settings: ConversionSettings | None = None,
    path: str | None = None,
) -> Reference:
    """Classify a reference string.

    Args:
    ----
        reference: The ``$ref`` value.
        settings: Definition markers and external suffixes to recognize.
        path: Property path of the reference, for error messages.

    Returns:
    -------
        The parsed Reference.

    Raises:
    ------
        MalformedReferenceError: If the string is empty or matches neither shape.

    """
    settings = settings or ConversionSettings()
    raw = reference.strip()
    if not raw:
        raise MalformedReferenceError(reference, path)

    document, _, fragment = raw.partition("#")
    definition = _definition_name(fragment, settings.definition_markers)

    if document:
        if not document.lower().endswith(settings.external_suffixes):
            raise MalformedReferenceError(reference, path)
        if fragment.strip("/") and definition is None:
            raise MalformedReferenceError(reference, path)
        return Reference(
            raw=raw,
            kind=ReferenceKind.EXTERNAL_DOCUMENT,
            document=document,
            definition=definition,
        )

    if definition is None:
        raise MalformedReferenceError(reference, path)
    return Reference(raw=raw, kind=ReferenceKind.LOCAL_DEFINITION, definition=definition)
