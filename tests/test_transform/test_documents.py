"""Transformation of the sample schema documents on disk."""

from pathlib import Path

import pytest
from jgschema.converters import render
from jgschema.ir.types import Field, RecordType
from jgschema.models import load_schema_document
from jgschema.transform import SchemaToRecordTransformer


def _records(path: Path) -> list[RecordType]:
    return SchemaToRecordTransformer().transform(load_schema_document(path), path)


class TestSampleDocuments:
    """Tests against the JSON/YAML fixtures."""

    def test_simple_schema(self, jsonschema_dir: Path) -> None:
        """Should produce a single record."""
        records = _records(jsonschema_dir / "simple-schema.json")

        assert records == [
            RecordType(
                type_name="simpleSchema",
                description="A sample schema for the purpose of testing.",
                fields=[
                    Field(
                        name="sampleField",
                        type_ref="String",
                        description="Sample field description.",
                    )
                ],
            )
        ]

    def test_nested_schema(self, jsonschema_dir: Path) -> None:
        """Should produce the root and the nested object record."""
        records = _records(jsonschema_dir / "nested-schema.json")

        assert [r.type_name for r in records] == ["nestedSchema", "SampleObjectField"]
        assert records[0].get_field("sampleObjectField") == Field(
            name="sampleObjectField",
            type_ref="SampleObjectField",
            description="Sample object field description.",
        )
        assert records[1].fields == [
            Field(name="nestedField", type_ref="Int", description="Nested object field description.")
        ]

    def test_definition_schema(self, jsonschema_dir: Path) -> None:
        """Should name the definition record after the definition."""
        records = _records(jsonschema_dir / "def-schema.json")

        assert [r.type_name for r in records] == ["nestedSchema", "SampleObject"]
        assert records[0].fields[1] == Field(
            name="sampleObject",
            type_ref="SampleObject",
            description="Sample object field description.",
        )

    def test_definition_file_schema(self, jsonschema_dir: Path) -> None:
        """Should load the referenced file next to the schema."""
        records = _records(jsonschema_dir / "def-file-schema.json")

        assert [r.type_name for r in records] == ["nestedSchema", "simpleSchema"]
        assert records[0].fields[1].name == "simpleSchema"
        assert records[1].field_names == ["sampleField"]

    def test_array_schema(self, jsonschema_dir: Path) -> None:
        """Should keep scalar arrays on the root record."""
        records = _records(jsonschema_dir / "array-schema.json")

        assert len(records) == 1
        assert records[0].fields[0].repeated is True
        assert records[0].fields[0].type_ref == "String"

    def test_object_array_schema(self, jsonschema_dir: Path) -> None:
        """Should create element records for both object arrays."""
        records = _records(jsonschema_dir / "object-array-schema.json")

        assert [r.type_name for r in records] == [
            "objectArraySchema",
            "ArrayObjectField",
            "SecondArrayField",
        ]
        assert records[0].fields[0] == Field(
            name="arrayObjectField",
            type_ref="ArrayObjectField",
            description="Sample array field description.",
            required=True,
            repeated=True,
        )
        assert records[1].field_names == ["objectStringField", "objectIntegerField"]

    def test_all_of_schema(self, jsonschema_dir: Path) -> None:
        """Should link the allOf member to the root record."""
        records = _records(jsonschema_dir / "schema-with-allOf.json")

        assert [r.type_name for r in records] == ["allOfSchema", "simpleSchema"]
        assert records[0].fields[-1] == Field(
            name="simpleSchema",
            type_ref="simpleSchema",
            description="A sample schema for the purpose of testing.",
        )

    def test_one_of_schema(self, jsonschema_dir: Path) -> None:
        """Should emit alternatives without linking them."""
        records = _records(jsonschema_dir / "schema-with-oneOf.json")

        assert [r.type_name for r in records] == ["oneOfSchema", "simpleSchema", "Alternative"]
        assert records[0].field_names == ["exampleField"]
        assert records[2].fields == [Field(name="flag", type_ref="Boolean")]

    def test_yaml_document_with_nested_reference(self, jsonschema_dir: Path) -> None:
        """Should resolve definitions inside the referenced YAML document."""
        records = _records(jsonschema_dir / "person.schema.yaml")

        assert [r.type_name for r in records] == ["Person", "Geo", "Address"]
        assert records[0].fields == [
            Field(name="name", type_ref="String", description="Full name.", required=True),
            Field(name="age", type_ref="Int"),
            Field(name="tags", type_ref="String", required=True, repeated=True),
            Field(name="address", type_ref="Address", description="A postal address."),
        ]
        assert records[2].field_names == ["street", "city", "geo"]

    @pytest.mark.parametrize(
        "filename",
        [
            "simple-schema.json",
            "nested-schema.json",
            "def-schema.json",
            "def-file-schema.json",
            "array-schema.json",
            "object-array-schema.json",
            "schema-with-allOf.json",
            "schema-with-oneOf.json",
            "person.schema.yaml",
        ],
    )
    def test_every_field_type_is_declared(self, jsonschema_dir: Path, filename: str) -> None:
        """Should only reference scalars or emitted record types."""
        records = _records(jsonschema_dir / filename)
        declared = {r.type_name for r in records} | {"String", "Int", "Float", "Boolean"}

        for record in records:
            for field in record.fields:
                assert field.type_ref in declared
        assert records[0].type_name in render(records).splitlines()[1]
