"""Main schema tree to record type transformer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from jgschema.config import ConversionSettings
from jgschema.ir.types import Field, RecordType
from jgschema.models.loader import FileReferenceLoader, ReferenceLoader
from jgschema.models.schema import SchemaKind, SchemaNode
from jgschema.transform.errors import (
    CyclicReferenceError,
    ExternalResolutionError,
    MalformedReferenceError,
    MissingTitleError,
    RecursionLimitError,
    UnknownDefinitionError,
    UnsupportedKindError,
)
from jgschema.transform.naming import lower_camel, scalar_type_for, upper_camel
from jgschema.transform.references import ReferenceKind, parse_reference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _DocumentScope:
    """The document a node belongs to: where it lives and its definitions."""

    location: Path
    definitions: dict[str, SchemaNode]

    @property
    def base_dir(self) -> Path:
        return self.location.parent


@dataclass(frozen=True)
class _ResolvedReference:
    node: SchemaNode
    scope: _DocumentScope
    name: str | None
    definition: str | None
    key: str


class SchemaToRecordTransformer:
    """Transform a schema tree into an ordered list of record types.

    The first record is always the root type. Every nested object, array
    object element, resolved reference and combinator member becomes an
    additional record, appended after its own nested records, in the order
    the walk discovers them.

    Usage:
        transformer = SchemaToRecordTransformer()
        records = transformer.transform(root_node, Path("person.schema.json"))
    """

    def __init__(
        self,
        loader: ReferenceLoader | None = None,
        settings: ConversionSettings | None = None,
    ) -> None:
        """Initialize the transformer.

        Args:
        ----
            loader: Loader for externally referenced documents.
                Defaults to reading files from disk.
            settings: Reference and recursion settings.

        """
        self._loader = loader or FileReferenceLoader()
        self._settings = settings or ConversionSettings()
        self._documents: dict[Path, SchemaNode] = {}
        self._resolving: list[str] = []

    def transform(self, root: SchemaNode, location: Path | str) -> list[RecordType]:
        """Transform a schema document into record types.

        Args:
        ----
            root: Root node of the schema document.
            location: Path of the document, used to resolve relative
                external references.

        Returns:
        -------
            Record types, root first.

        Raises:
        ------
            TransformError: On any structural problem; no partial result is returned.

        """
        if not root.title:
            raise MissingTitleError()

        # The root document counts as being resolved, so a reference back to it is a cycle
        location = Path(os.path.normpath(location))
        self._documents = {}
        self._resolving = [str(location)]

        scope = _DocumentScope(location=location, definitions=root.definitions)
        root_record = RecordType(type_name=root.title, description=root.description or "")

        # Slot 0 is reserved for the root before descending
        records: list[RecordType] = [root_record]
        self._populate(root, root_record, records, scope, path=root.title, depth=0)

        logger.debug("Transformed %s into %d record type(s)", location, len(records))
        return records

    def _populate(
        self,
        node: SchemaNode,
        record: RecordType,
        records: list[RecordType],
        scope: _DocumentScope,
        path: str,
        depth: int,
    ) -> None:
        """Add fields for a node's properties, then process its combinators."""
        if depth > self._settings.max_depth:
            raise RecursionLimitError(self._settings.max_depth, path)

        for key, child in node.properties.items():
            record.add_field(
                self._property_field(key, child, node, record, records, scope, f"{path}.{key}", depth)
            )

        self._process_combinators(node, record, records, scope, path, depth)

    def _property_field(
        self,
        key: str,
        child: SchemaNode,
        parent: SchemaNode,
        record: RecordType,
        records: list[RecordType],
        scope: _DocumentScope,
        path: str,
        depth: int,
    ) -> Field:
        """Build the field for one property, creating nested records as needed."""
        required = key in parent.required

        if child.ref is not None:
            resolved, nested = self._build_reference(
                child.ref, record.type_name, records, scope, path, depth
            )
            return Field(
                name=lower_camel(resolved.name or key) or key,
                type_ref=nested.type_name,
                description=resolved.node.description or child.description or "",
                required=required,
            )

        description = child.description or ""
        kind = child.schema_kind

        if kind is SchemaKind.OBJECT:
            nested = self._build_record(
                child,
                child.title or upper_camel(key) or record.type_name,
                "",
                records,
                scope,
                path,
                depth,
            )
            return Field(
                name=key, type_ref=nested.type_name, description=description, required=required
            )

        if kind is SchemaKind.ARRAY:
            return Field(
                name=key,
                type_ref=self._array_item_type(key, child, record, records, scope, path, depth),
                description=description,
                required=required,
                repeated=True,
            )

        scalar = scalar_type_for(kind)
        if scalar is None:
            raise UnsupportedKindError(child.kind, path)
        return Field(name=key, type_ref=scalar.value, description=description, required=required)

    def _array_item_type(
        self,
        key: str,
        array: SchemaNode,
        record: RecordType,
        records: list[RecordType],
        scope: _DocumentScope,
        path: str,
        depth: int,
    ) -> str:
        """Return the element type of an array property.

        Object elements become a new record bound to the array's own field.
        """
        items = array.items
        if items is None:
            raise UnsupportedKindError(array.kind, path, "array declares no items")

        item_path = f"{path}[]"
        if items.ref is not None:
            _, nested = self._build_reference(
                items.ref, record.type_name, records, scope, item_path, depth
            )
            return nested.type_name

        item_kind = items.schema_kind
        if item_kind is SchemaKind.OBJECT:
            nested = self._build_record(
                items,
                items.title or upper_camel(key) or record.type_name,
                items.description or "",
                records,
                scope,
                item_path,
                depth,
            )
            return nested.type_name

        if item_kind is SchemaKind.ARRAY:
            raise UnsupportedKindError(items.kind, item_path, "nested arrays are not supported")

        scalar = scalar_type_for(item_kind)
        if scalar is None:
            raise UnsupportedKindError(items.kind, item_path)
        return scalar.value

    def _process_combinators(
        self,
        node: SchemaNode,
        record: RecordType,
        records: list[RecordType],
        scope: _DocumentScope,
        path: str,
        depth: int,
    ) -> None:
        """Emit a record per allOf/oneOf/anyOf member; link only allOf members."""
        for combinator, members in node.combinators:
            for index, member in enumerate(members):
                member_path = f"{path}.{combinator.value}[{index}]"
                if member.ref is not None:
                    _, nested = self._build_reference(
                        member.ref, record.type_name, records, scope, member_path, depth
                    )
                else:
                    nested = self._build_record(
                        member,
                        member.title or record.type_name,
                        member.description or "",
                        records,
                        scope,
                        member_path,
                        depth,
                    )

                if combinator.links_parent:
                    name = lower_camel(nested.type_name) or nested.type_name
                    if record.get_field(name) is not None:
                        logger.warning(
                            "Type %s already has a field %r; allOf member %s adds another",
                            record.type_name,
                            name,
                            nested.type_name,
                        )
                    record.add_field(
                        Field(
                            name=name,
                            type_ref=nested.type_name,
                            description=nested.description,
                        )
                    )

    def _build_record(
        self,
        node: SchemaNode,
        type_name: str,
        description: str,
        records: list[RecordType],
        scope: _DocumentScope,
        path: str,
        depth: int,
    ) -> RecordType:
        """Walk a node into a new record and append it after its own nested records."""
        record = RecordType(type_name=type_name, description=description)
        self._populate(node, record, records, scope, path, depth + 1)
        records.append(record)
        logger.debug("Created record type %s with fields %s", type_name, record.field_names)
        return record

    def _build_reference(
        self,
        ref: str,
        fallback_name: str,
        records: list[RecordType],
        scope: _DocumentScope,
        path: str,
        depth: int,
    ) -> tuple[_ResolvedReference, RecordType]:
        """Resolve a reference and build a new record from its target."""
        resolved = self._resolve(ref, scope, path)
        if resolved.key in self._resolving:
            raise CyclicReferenceError([*self._resolving, resolved.key], path)

        if resolved.node.title:
            type_name = resolved.node.title
        else:
            type_name = upper_camel(resolved.definition or "") or fallback_name

        self._resolving.append(resolved.key)
        try:
            record = self._build_record(
                resolved.node,
                type_name,
                resolved.node.description or "",
                records,
                resolved.scope,
                path,
                depth,
            )
        finally:
            self._resolving.pop()
        return resolved, record

    def _resolve(self, ref: str, scope: _DocumentScope, path: str) -> _ResolvedReference:
        """Resolve a reference to its target node and the scope it lives in."""
        reference = parse_reference(ref, self._settings, path)

        if reference.kind is ReferenceKind.EXTERNAL_DOCUMENT:
            location = reference.location(scope.base_dir)
            document = self._load_document(location, path)
            scope = _DocumentScope(location=location, definitions=document.definitions)
            if reference.definition is None:
                logger.debug("Resolved %s to document %s", ref, location)
                return _ResolvedReference(
                    node=document,
                    scope=scope,
                    name=document.title,
                    definition=None,
                    key=str(location),
                )

        name = reference.definition
        if name is None:
            raise MalformedReferenceError(ref, path)
        node = scope.definitions.get(name)
        if node is None:
            raise UnknownDefinitionError(name, ref, path)

        logger.debug("Resolved %s to definition %s in %s", ref, name, scope.location)
        return _ResolvedReference(
            node=node,
            scope=scope,
            name=node.title or name,
            definition=name,
            key=f"{scope.location}#{name}",
        )

    def _load_document(self, location: Path, path: str) -> SchemaNode:
        """Load an external document once per transform call."""
        cached = self._documents.get(location)
        if cached is not None:
            return cached

        try:
            document = self._loader.load(location)
        except Exception as e:
            raise ExternalResolutionError(location, str(e), path) from e

        logger.debug("Loaded external schema document %s", location)
        self._documents[location] = document
        return document


def transform(
    root: SchemaNode,
    location: Path | str,
    loader: ReferenceLoader | None = None,
    settings: ConversionSettings | None = None,
) -> list[RecordType]:
    """Transform a schema document into record types with a fresh transformer."""
    return SchemaToRecordTransformer(loader=loader, settings=settings).transform(root, location)
