"""Schema tree to record type transformation module.

This module flattens a JSON Schema tree into an ordered list of GraphQL
record types.

The transformation process:
    1. Reserve the root record (named by the schema title)
    2. Map each property to a field, in document order
    3. Turn nested objects and object array elements into new records
    4. Resolve local ($defs) and external (file) references into new records
    5. Emit allOf/oneOf/anyOf members as records, linking allOf members as fields

Primary Class:
    SchemaToRecordTransformer: Main transformer class

Example:
-------
    >>> from pathlib import Path
    >>> from jgschema.models import load_schema_document
    >>> from jgschema.transform import SchemaToRecordTransformer
    >>>
    >>> path = Path("person.schema.json")
    >>> records = SchemaToRecordTransformer().transform(load_schema_document(path), path)
    >>> print([record.type_name for record in records])

"""

from jgschema.transform.errors import (
    CyclicReferenceError,
    ExternalResolutionError,
    MalformedReferenceError,
    MissingTitleError,
    RecursionLimitError,
    TransformError,
    UnknownDefinitionError,
    UnsupportedKindError,
)
from jgschema.transform.transformer import SchemaToRecordTransformer, transform

__all__ = [
    "CyclicReferenceError",
    "ExternalResolutionError",
    "MalformedReferenceError",
    "MissingTitleError",
    "RecursionLimitError",
    "SchemaToRecordTransformer",
    "TransformError",
    "UnknownDefinitionError",
    "UnsupportedKindError",
    "transform",
]
