"""Tests for the GraphQL SDL writer."""

from pathlib import Path

import pytest
from jgschema.converters import RenderError, SDLWriter, render, render_type
from jgschema.converters.sdl_writer import quote_description
from jgschema.ir.types import Field, RecordType


@pytest.fixture
def person_records() -> list[RecordType]:
    """Return a root record referencing a nested record."""
    return [
        RecordType(
            type_name="Person",
            description="A person.",
            fields=[
                Field(name="name", type_ref="String", required=True),
                Field(name="tags", type_ref="String", repeated=True),
                Field(name="address", type_ref="Address", description="Home address."),
            ],
        ),
        RecordType(type_name="Address", fields=[Field(name="street", type_ref="String")]),
    ]


class TestRenderType:
    """Tests for field type rendering."""

    @pytest.mark.parametrize(
        ("required", "repeated", "expected"),
        [
            (False, False, "String"),
            (True, False, "String!"),
            (False, True, "[String]"),
            (True, True, "[String]!"),
        ],
    )
    def test_modifiers(self, required: bool, repeated: bool, expected: str) -> None:
        """Should wrap lists in brackets, then append the non-null marker."""
        field = Field(name="f", type_ref="String", required=required, repeated=repeated)

        assert render_type(field) == expected


class TestQuoteDescription:
    """Tests for description quoting."""

    def test_plain(self) -> None:
        """Should wrap plain text in double quotes."""
        assert quote_description("Full name.") == '"Full name."'

    def test_escapes(self) -> None:
        """Should escape quotes, backslashes and newlines."""
        assert quote_description('Say "hi"\\\nbye') == '"Say \\"hi\\"\\\\\\nbye"'


class TestSDLWriter:
    """Tests for SDLWriter.render."""

    def test_single_required_field(self) -> None:
        """Should render a minimal type exactly."""
        records = [RecordType(type_name="Test", fields=[Field(name="name", type_ref="String", required=True)])]

        assert SDLWriter().render(records) == "type Test {\n\tname: String!\n}"

    def test_empty_list(self) -> None:
        """Should render nothing for no records."""
        assert SDLWriter().render([]) == ""

    def test_none_records(self) -> None:
        """Should reject a missing record list."""
        with pytest.raises(RenderError):
            SDLWriter().render(None)

    def test_empty_record(self) -> None:
        """Should render a type without fields."""
        assert render([RecordType(type_name="Meta")]) == "type Meta {\n}"

    def test_full_document(self, person_records: list[RecordType]) -> None:
        """Should render descriptions, modifiers and blank-line separation."""
        expected = (
            '"A person."\n'
            "type Person {\n"
            "\tname: String!\n"
            "\ttags: [String]\n"
            "\n"
            '\t"Home address."\n'
            "\taddress: Address\n"
            "}\n"
            "\n"
            "type Address {\n"
            "\tstreet: String\n"
            "}"
        )

        assert SDLWriter().render(person_records) == expected

    def test_first_described_field_has_no_blank_line(self) -> None:
        """Should not put a blank line before the first field."""
        records = [
            RecordType(
                type_name="A",
                fields=[Field(name="x", type_ref="Int", description="X.")],
            )
        ]

        assert render(records) == 'type A {\n\t"X."\n\tx: Int\n}'

    def test_record_order_preserved(self, person_records: list[RecordType]) -> None:
        """Should render records in list order."""
        sdl = render(list(reversed(person_records)))

        assert sdl.index("type Address") < sdl.index("type Person")

    def test_custom_indent(self) -> None:
        """Should indent fields with the configured string."""
        records = [RecordType(type_name="A", fields=[Field(name="x", type_ref="Int")])]

        assert SDLWriter(indent="  ").render(records) == "type A {\n  x: Int\n}"

    def test_type_names_verbatim(self) -> None:
        """Should not change the case of type names."""
        records = [RecordType(type_name="simpleSchema")]

        assert render(records).startswith("type simpleSchema {")


class TestSDLWriterFile:
    """Tests for SDLWriter.write."""

    def test_write_file(self, tmp_path: Path, person_records: list[RecordType]) -> None:
        """Should write the rendered SDL with a trailing newline."""
        output = tmp_path / "person.graphql"

        SDLWriter().write(person_records, output)

        assert output.read_text(encoding="utf-8") == render(person_records) + "\n"

    def test_creates_parent_directories(self, tmp_path: Path, person_records: list[RecordType]) -> None:
        """Should create missing parent directories."""
        output = tmp_path / "nested" / "dir" / "person.graphql"

        SDLWriter().write(person_records, output)

        assert output.exists()
