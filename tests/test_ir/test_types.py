"""Tests for IR record types."""

import dataclasses

import pytest
from jgschema.ir.types import Field, RecordType, ScalarType


class TestField:
    """Tests for Field."""

    def test_defaults(self) -> None:
        """Should default to optional, single, undescribed."""
        field = Field(name="id", type_ref=ScalarType.STRING.value)

        assert field.type_ref == "String"
        assert field.description == ""
        assert field.required is False
        assert field.repeated is False

    def test_frozen(self) -> None:
        """Should be immutable."""
        field = Field(name="id", type_ref="String")

        with pytest.raises(dataclasses.FrozenInstanceError):
            field.name = "other"  # type: ignore[misc]


class TestRecordType:
    """Tests for RecordType."""

    def test_add_field_keeps_order(self) -> None:
        """Should append fields in call order."""
        record = RecordType(type_name="Person")
        record.add_field(Field(name="b", type_ref="Int"))
        record.add_field(Field(name="a", type_ref="Int"))

        assert record.field_names == ["b", "a"]

    def test_get_field(self) -> None:
        """Should find fields by name."""
        record = RecordType(type_name="Person", fields=[Field(name="age", type_ref="Int")])

        assert record.get_field("age") == Field(name="age", type_ref="Int")
        assert record.get_field("missing") is None

    def test_independent_field_lists(self) -> None:
        """Should not share the default field list between records."""
        first = RecordType(type_name="A")
        second = RecordType(type_name="B")
        first.add_field(Field(name="x", type_ref="Int"))

        assert second.fields == []
