import datetime
from decimal import Decimal

import pytest
from lxml import etree

from qbo_client.fields import Field, to_python, to_text
from qbo_client.mixins import QBO_NAMESPACE, find_first, parse_xml
from qbo_client.model import BaseReference, Collection, TimeActivity


class TestScalars:
    @pytest.mark.parametrize(
        "type_, text, expected",
        [
            (str, "Emily", "Emily"),
            (int, " 42 ", 42),
            (Decimal, "25.50", Decimal("25.50")),
            (bool, "true", True),
            (bool, "False", False),
            (datetime.date, "2014-02-13", datetime.date(2014, 2, 13)),
            (datetime.date, "2014-02-13-08:00", datetime.date(2014, 2, 13)),
            (
                datetime.datetime,
                "2014-02-13T10:42:21Z",
                datetime.datetime(2014, 2, 13, 10, 42, 21, tzinfo=datetime.timezone.utc),
            ),
        ],
    )
    def test_to_python(self, type_, text, expected) -> None:
        assert to_python(type_, text) == expected

    def test_missing_text_is_none(self) -> None:
        assert to_python(int, None) is None

    def test_to_text(self) -> None:
        assert to_text(True) == "true"
        assert to_text(False) == "false"
        assert to_text(datetime.date(2014, 2, 13)) == "2014-02-13"
        assert to_text(Decimal("1E+1")) == "10"
        assert to_text(7) == "7"

    def test_field_kinds(self) -> None:
        assert Field("name", "@name").is_attribute
        assert Field("name", "@name").attribute_name == "name"
        assert Field("value", "#text").is_text
        assert Field("ref", "EmployeeRef", BaseReference).is_nested
        assert not Field("hours", "Hours", int).is_nested


class TestReferences:
    def test_serializes_value_as_text_and_name_as_attribute(self) -> None:
        element = BaseReference(value="55", name="Emily Platt").to_xml(tag="EmployeeRef")
        assert element.tag == f"{{{QBO_NAMESPACE}}}EmployeeRef"
        assert element.text == "55"
        assert element.get("name") == "Emily Platt"
        assert element.get("type") is None

    def test_reference_without_name(self) -> None:
        ref = BaseReference.from_element(etree.fromstring("<TaxCodeRef>TAX</TaxCodeRef>"))
        assert ref.value == "TAX"
        assert ref.name is None


class TestParsing:
    def test_from_xml_accepts_unwrapped_element(self) -> None:
        xml = f'<TimeActivity xmlns="{QBO_NAMESPACE}"><Id>9</Id><Hours>2</Hours></TimeActivity>'
        activity = TimeActivity.from_xml(xml)
        assert activity.id == 9
        assert activity.hours == 2

    def test_from_xml_without_element(self) -> None:
        with pytest.raises(ValueError, match="TimeActivity"):
            TimeActivity.from_xml(f'<IntuitResponse xmlns="{QBO_NAMESPACE}"/>')

    def test_rejects_malformed_xml(self) -> None:
        with pytest.raises(etree.XMLSyntaxError):
            parse_xml(b"<TimeActivity>")

    def test_does_not_expand_entities(self) -> None:
        xml = (
            b'<!DOCTYPE r [<!ENTITY x SYSTEM "file:///etc/passwd">]>'
            b"<Description>&x;</Description>"
        )
        element = parse_xml(xml)
        assert "root:" not in (element.text or "")

    def test_find_first_ignores_namespace(self) -> None:
        root = etree.fromstring("<a><b><QueryResponse/></b></a>")
        assert find_first(root, "QueryResponse") is not None
        assert find_first(root, "Fault") is None

    def test_to_dict(self) -> None:
        activity = TimeActivity(hours=3, employee_ref=BaseReference(value="55"))
        result = activity.to_dict()
        assert result["hours"] == 3
        assert result["employee_ref"] == {"value": "55", "name": None, "type": None}
        assert result["id"] is None


class TestCollection:
    def test_sequence_behaviour(self) -> None:
        collection = Collection(entries=["a", "b"], total_count=10)
        assert collection.count == 2
        assert len(collection) == 2
        assert list(collection) == ["a", "b"]
        assert collection[1] == "b"
        assert Collection().count == 0
