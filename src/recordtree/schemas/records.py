"""Record tree models."""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    TypeAdapter,
    field_validator,
    model_serializer,
)

from recordtree.config import RECORDTREE_RESERVED_ID_PREFIX


class Record(BaseModel):
    """A node in the record tree.

    Attributes:
        fields: Scalar attributes of the record, conventionally including ``ID``.
            Serialized under the ``data`` key.
        sections: Named child collections, in insertion order. ``None`` marks a
            leaf. Serialized under the ``children`` key.
        address: Positional path of the record, derived on load and never
            persisted. Serialized under the ``__path`` key.

    Keys other than these are kept as they are and written back on save.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    fields: dict[str, Any] = Field(default_factory=dict, alias="data")
    sections: dict[str, Section] | None = Field(default=None, alias="children")
    address: list[str] | None = Field(default=None, alias="__path")

    @model_serializer(mode="wrap")
    def drop_absent_keys(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        # Leaves have no children key and stored records no __path.
        for key in ("children", "sections", "__path", "address"):
            if key in data and data[key] is None:
                del data[key]
        return data

    @property
    def record_id(self) -> str | None:
        """Return the ``ID`` field as a string, if present."""
        value = self.fields.get("ID")
        return None if value is None else str(value)

    @property
    def is_deletable(self) -> bool:
        """Whether the record may be deleted individually from a listing.

        Section-header rows carry an ``ID`` with the reserved prefix and are
        only removed together with their parent.
        """
        record_id = self.record_id
        return not (record_id and record_id.startswith(RECORDTREE_RESERVED_ID_PREFIX))


class Section(BaseModel):
    """A named, ordered collection of child records."""

    model_config = ConfigDict(extra="allow")

    records: list[Record] = Field(default_factory=list)

    @field_validator("records", mode="before")
    @classmethod
    def empty_records(cls, v: Any) -> Any:
        """Read a null ``records`` entry as an empty section."""
        return [] if v is None else v


Record.model_rebuild()
Section.model_rebuild()

RecordTree = list[Record]

_TREE_ADAPTER: TypeAdapter[list[Record]] = TypeAdapter(list[Record])


def parse_tree(payload: Any) -> list[Record]:
    """Validate a decoded JSON document into a list of records."""
    return _TREE_ADAPTER.validate_python(payload)


def dump_tree(records: list[Record]) -> list[dict[str, Any]]:
    """Serialize records to plain JSON-compatible data using the wire keys."""
    return [record.model_dump(mode="json", by_alias=True) for record in records]
