import datetime
import numbers
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Tuple

from ..fields import TEXT, Field
from ..mixins import FromXmlMixin, ToDictMixin, ToXmlMixin
from .validations import FieldError, Rule, run_validations

SYNC_TOKEN_MISSING = "Missing required attribute SyncToken for update"


class QuickbooksBaseObject(ToXmlMixin, FromXmlMixin, ToDictMixin):
    XML_NODE = ""
    fields: Tuple[Field, ...] = ()

    def __init__(self, **kwargs: Any) -> None:
        for f in self.fields:
            setattr(self, f.name, [] if f.many else None)
        for key, value in kwargs.items():
            if self.field_for(key) is None:
                raise TypeError(f"{type(self).__name__} has no field {key!r}")
            setattr(self, key, value)

    @classmethod
    def field_for(cls, name: str) -> Optional[Field]:
        for f in cls.fields:
            if f.name == name:
                return f
        return None

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.to_dict() == other.to_dict()  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        set_fields = ", ".join(
            f"{f.name}={getattr(self, f.name)!r}"
            for f in self.fields
            if getattr(self, f.name) not in (None, [])
        )
        return f"{type(self).__name__}({set_fields})"


class MetaData(QuickbooksBaseObject):
    fields = (
        Field("create_time", "CreateTime", datetime.datetime),
        Field("last_updated_time", "LastUpdatedTime", datetime.datetime),
    )


class BaseReference(QuickbooksBaseObject):
    """Pointer to another entity: ``<CustomerRef name="Bob">7</CustomerRef>``."""

    fields = (
        Field("value", TEXT),
        Field("name", "@name"),
        Field("type", "@type"),
    )


class PhysicalAddress(QuickbooksBaseObject):
    fields = (
        Field("id", "Id", int),
        Field("line1", "Line1"),
        Field("line2", "Line2"),
        Field("line3", "Line3"),
        Field("line4", "Line4"),
        Field("line5", "Line5"),
        Field("city", "City"),
        Field("country", "Country"),
        Field("country_sub_division_code", "CountrySubDivisionCode"),
        Field("postal_code", "PostalCode"),
        Field("note", "Note"),
        Field("lat", "Lat"),
        Field("lon", "Long"),
    )


class EmailAddress(QuickbooksBaseObject):
    fields = (Field("address", "Address"),)


class TelephoneNumber(QuickbooksBaseObject):
    fields = (Field("free_form_number", "FreeFormNumber"),)


class WebSiteAddress(QuickbooksBaseObject):
    fields = (Field("uri", "URI"),)


ENTITY_FIELDS = (
    Field("id", "Id", int),
    Field("sync_token", "SyncToken", int),
    Field("meta_data", "MetaData", MetaData),
)


def _coerce_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, numbers.Number):
            return int(value)  # type: ignore[call-overload]
        return int(str(value).strip())
    except (TypeError, ValueError, OverflowError):
        return None


class QuickbooksEntity(QuickbooksBaseObject):
    """
    A top-level API resource with its own REST endpoint.

    Subclasses set ``XML_NODE``, ``REST_RESOURCE``, a ``fields`` table that
    starts with ``ENTITY_FIELDS`` and a ``validations`` tuple of rules.
    """

    XML_COLLECTION_NODE = ""
    REST_RESOURCE = ""
    validations: Tuple[Rule, ...] = ()
    # field used as the display name when referencing this entity
    ref_name_field: Optional[str] = None

    id: Any
    sync_token: Any

    def validate_for_create(self) -> List[FieldError]:
        return run_validations(self, self.validations)

    def validate_for_update(self) -> List[FieldError]:
        errors = self.validate_for_create()
        if self.sync_token is None:
            errors.append(FieldError("sync_token", SYNC_TOKEN_MISSING))
        return errors

    def valid_for_create(self) -> bool:
        return not self.validate_for_create()

    def valid_for_update(self) -> bool:
        return not self.validate_for_update()

    def valid_for_deletion(self) -> bool:
        if self.id is None or self.sync_token is None:
            return False
        if str(self.sync_token).strip() == "":
            return False
        entity_id = _coerce_int(self.id)
        sync_token = _coerce_int(self.sync_token)
        return entity_id is not None and entity_id > 0 and sync_token is not None and sync_token >= 0

    def to_ref(self) -> BaseReference:
        name = getattr(self, self.ref_name_field) if self.ref_name_field else None
        return BaseReference(
            value=None if self.id is None else str(self.id),
            name=name,
        )


@dataclass
class Collection:
    """One page of query results."""

    entries: List[Any] = field(default_factory=list)
    start_position: Optional[int] = None
    max_results: Optional[int] = None
    total_count: Optional[int] = None

    @property
    def count(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> Any:
        return self.entries[index]
