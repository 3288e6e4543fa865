"""Intermediate Representation (IR) models for schema to SDL conversion.

The IR sits between the schema tree and the SDL text:

1. Flattens nested objects into independent named record types
2. Replaces references with the name of the record they produced
3. Keeps discovery order, so rendering is deterministic
"""

from jgschema.ir.types import Field, RecordType, ScalarType

__all__ = [
    "Field",
    "RecordType",
    "ScalarType",
]
