"""Type mapping and GraphQL naming helpers."""

from __future__ import annotations

import re

from jgschema.ir.types import ScalarType
from jgschema.models.schema import SchemaKind

# Mapping from JSON Schema scalar kinds to GraphQL scalars
SCALAR_KIND_TO_GRAPHQL: dict[SchemaKind, ScalarType] = {
    SchemaKind.INTEGER: ScalarType.INT,
    SchemaKind.BOOLEAN: ScalarType.BOOLEAN,
    SchemaKind.NUMBER: ScalarType.FLOAT,
    SchemaKind.STRING: ScalarType.STRING,
}

_WORD_SEPARATOR = re.compile(r"[\W_]+")


def scalar_type_for(kind: SchemaKind | None) -> ScalarType | None:
    """Return the GraphQL scalar for a scalar kind, None for object/array/unknown."""
    if kind is None:
        return None
    return SCALAR_KIND_TO_GRAPHQL.get(kind)


def upper_camel(name: str) -> str:
    """Convert a property key or title to an UpperCamelCase type name.

    Examples:
    --------
        >>> upper_camel("address")
        'Address'
        >>> upper_camel("billing_address")
        'BillingAddress'
        >>> upper_camel("shippingAddress")
        'ShippingAddress'

    """
    words = [word for word in _WORD_SEPARATOR.split(name) if word]
    return "".join(word[0].upper() + word[1:] for word in words)


def lower_camel(name: str) -> str:
    """Convert a name to a lowerCamelCase field name.

    Examples:
    --------
        >>> lower_camel("SimpleSchema")
        'simpleSchema'
        >>> lower_camel("Sample Object")
        'sampleObject'

    """
    converted = upper_camel(name)
    if not converted:
        return converted
    return converted[0].lower() + converted[1:]
