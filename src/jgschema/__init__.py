"""jgschema: Converter from JSON Schema documents to GraphQL SDL.

This package provides tools for:
- Loading JSON/YAML schema documents into an ordered node tree
- Flattening nested objects, arrays, references and combinators into record types
- Rendering record types as GraphQL schema definition language

Quick Start:
    >>> from pathlib import Path
    >>> from jgschema.models import load_schema_document
    >>> from jgschema.transform import SchemaToRecordTransformer
    >>> from jgschema.converters import SDLWriter
    >>>
    >>> path = Path("person.schema.json")
    >>> records = SchemaToRecordTransformer().transform(load_schema_document(path), path)
    >>> print(SDLWriter().render(records))

Modules:
    models: Pydantic model of the input schema tree and file loading
    ir: Record type and field data structures
    transform: Schema tree to record type transformation
    converters: Record types to SDL text
    cli: Command-line interface
"""

__version__ = "0.1.0"
