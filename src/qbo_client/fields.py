"""
Schema entries and scalar coercions for the XML wire format.

A model declares ``fields`` as a tuple of ``Field(name, xml_name, type)``.
``xml_name`` is either a child element name, ``"@attr"`` for an attribute
on the model's own element, or ``TEXT`` for the element's text content.
"""

import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, NamedTuple, Optional

TEXT = "#text"


class Field(NamedTuple):
    name: str
    xml_name: str
    type: Any = str
    many: bool = False

    @property
    def is_attribute(self) -> bool:
        return self.xml_name.startswith("@")

    @property
    def is_text(self) -> bool:
        return self.xml_name == TEXT

    @property
    def attribute_name(self) -> str:
        return self.xml_name[1:]

    @property
    def is_nested(self) -> bool:
        return hasattr(self.type, "from_element")


def parse_bool(text: str) -> bool:
    return text.strip().lower() == "true"


def parse_date(text: str) -> datetime.date:
    # TxnDate occasionally carries a zone suffix, e.g. 2014-02-13-08:00
    return datetime.date.fromisoformat(text.strip()[:10])


def parse_datetime(text: str) -> datetime.datetime:
    return datetime.datetime.fromisoformat(text.strip().replace("Z", "+00:00"))


PARSERS: Dict[Any, Callable[[str], Any]] = {
    str: lambda text: text,
    int: lambda text: int(text.strip()),
    Decimal: lambda text: Decimal(text.strip()),
    bool: parse_bool,
    datetime.date: parse_date,
    datetime.datetime: parse_datetime,
}


def to_python(type_: Any, text: Optional[str]) -> Any:
    """Convert element text to the declared Python type."""
    if text is None:
        return None
    return PARSERS[type_](text)


def to_text(value: Any) -> str:
    """Render a Python value the way the API expects it on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime.datetime, datetime.date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)
