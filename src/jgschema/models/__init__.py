"""Pydantic model of JSON Schema documents and file loading.

Primary Entry Points:
    load_schema_document(path): Load a YAML/JSON file into a SchemaNode tree
    load_schema_file(path): Load a YAML/JSON file into a raw dictionary
    SchemaNode: A node of the schema tree
    FileReferenceLoader: Loader used to fetch externally referenced documents

Example:
-------
    >>> from pathlib import Path
    >>> from jgschema.models import load_schema_document
    >>> root = load_schema_document(Path("person.schema.json"))
    >>> print(list(root.properties))

"""

from jgschema.models.loader import (
    FileReferenceLoader,
    LoaderError,
    ReferenceLoader,
    load_schema_document,
    load_schema_file,
)
from jgschema.models.schema import Combinator, SchemaKind, SchemaNode

__all__ = [
    "Combinator",
    "FileReferenceLoader",
    "LoaderError",
    "ReferenceLoader",
    "SchemaKind",
    "SchemaNode",
    "load_schema_document",
    "load_schema_file",
]
