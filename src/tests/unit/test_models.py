"""
Unit tests for the resource models beyond TimeActivity.

Tests cover:
- name-list rules shared by customers, vendors and employees
- item and invoice rules, including conditional ones
- parsing API responses and building references
"""

from decimal import Decimal
from typing import Any

import pytest
from lxml import etree

from qbo_client.model import (
    BaseReference,
    Customer,
    EmailAddress,
    Employee,
    FieldError,
    Invoice,
    Item,
    Line,
    Vendor,
)
from qbo_client.model.validations import (
    Custom,
    FormatOf,
    InclusionOf,
    LengthOf,
    PresenceOf,
    run_validations,
)

NS = {"q": "http://schema.intuit.com/finance/v3"}


class TestRules:
    class Thing:
        def __init__(self, **kwargs: Any) -> None:
            self.name = None
            self.kind = None
            self.code = None
            self.__dict__.update(kwargs)

    def test_presence_treats_whitespace_as_blank(self) -> None:
        assert PresenceOf("name").check(self.Thing(name="  ")) == [
            FieldError("name", "can't be blank")
        ]
        assert PresenceOf("name").check(self.Thing(name="x")) == []

    def test_inclusion_allow_none(self) -> None:
        rule = InclusionOf("kind", in_=("a", "b"), allow_none=True)
        assert rule.check(self.Thing()) == []
        assert rule.check(self.Thing(kind="c")) == [
            FieldError("kind", "is not included in the list")
        ]

    def test_length_messages(self) -> None:
        rule = LengthOf("name", minimum=2, maximum=4)
        assert rule.check(self.Thing(name="a")) == [
            FieldError("name", "is too short (minimum is 2 characters)")
        ]
        assert rule.check(self.Thing(name="abcde")) == [
            FieldError("name", "is too long (maximum is 4 characters)")
        ]
        assert rule.check(self.Thing()) == []

    def test_format(self) -> None:
        rule = FormatOf("code", pattern=r"^\d{3}$", message="must be three digits")
        assert rule.check(self.Thing(code="12a")) == [
            FieldError("code", "must be three digits")
        ]
        assert rule.check(self.Thing(code="123")) == []

    def test_conditions_skip_rules(self) -> None:
        rule = PresenceOf("name", if_=lambda t: t.kind == "named")
        assert rule.check(self.Thing(kind="anonymous")) == []
        assert len(rule.check(self.Thing(kind="named"))) == 1

    def test_errors_keep_rule_order(self) -> None:
        rules = (
            PresenceOf("name"),
            Custom("kind", lambda t: False, message="is wrong"),
        )
        errors = run_validations(self.Thing(), rules)
        assert [str(e) for e in errors] == ["name can't be blank", "kind is wrong"]


class TestNameEntities:
    @pytest.mark.parametrize("model_class", [Customer, Vendor, Employee])
    def test_display_name_cannot_contain_colon(self, model_class: Any) -> None:
        entity = model_class(display_name="Acme: West", given_name="Bob")
        assert FieldError(
            "display_name", "cannot contain a colon (:), tab or newline"
        ) in entity.validate_for_create()

    @pytest.mark.parametrize("model_class", [Customer, Vendor, Employee])
    def test_name_length_limits(self, model_class: Any) -> None:
        entity = model_class(given_name="x" * 26, display_name="ok")
        assert FieldError(
            "given_name", "is too long (maximum is 25 characters)"
        ) in entity.validate_for_create()

    def test_email_must_look_like_an_address(self) -> None:
        customer = Customer(
            display_name="Bobby", primary_email_address=EmailAddress(address="bobby")
        )
        assert customer.validate_for_create() == [
            FieldError("primary_email_address", "is not a valid email address")
        ]
        customer.primary_email_address.address = "bobby@acme.example"
        assert customer.valid_for_create()

    def test_unknown_attribute_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            Customer(nickname="Bob")

    def test_employee_needs_a_name(self) -> None:
        assert Employee().validate_for_create() == [
            FieldError("given_name", "or family_name is required")
        ]
        assert Employee(family_name="Platt").valid_for_create()

    def test_employee_gender_must_be_known(self) -> None:
        assert Employee(family_name="Platt", gender="Female").valid_for_create()
        assert Employee(family_name="Platt", gender="F").validate_for_create() == [
            FieldError("gender", "is not included in the list")
        ]

    def test_parses_customer(self, load_fixture: Any) -> None:
        customer = Customer.from_xml(load_fixture("customer.xml"))

        assert customer.id == 1
        assert customer.sync_token == 2
        assert customer.display_name == "Acme Enterprises"
        assert customer.active is True
        assert customer.primary_phone.free_form_number == "(415) 555-1212"
        assert customer.primary_email_address.address == "bobby@acme.example"
        assert customer.billing_address.city == "Half Moon Bay"
        assert customer.billing_address.id == 2
        assert customer.balance == Decimal("85.00")
        assert customer.shipping_address is None
        assert customer.valid_for_update()

    def test_customer_reference(self, load_fixture: Any) -> None:
        ref = Customer.from_xml(load_fixture("customer.xml")).to_ref()
        assert ref == BaseReference(value="1", name="Acme Enterprises")

    def test_vendor_1099_flag(self, load_fixture: Any) -> None:
        vendor = Vendor.from_xml(load_fixture("vendors.xml"))
        assert vendor.id == 30
        assert vendor.is_1099 is False
        assert vendor.balance == Decimal("0")


class TestItem:
    def service_item(self, **kwargs: Any) -> Item:
        values = dict(
            name="Gardening",
            type=Item.SERVICE_TYPE,
            income_account_ref=BaseReference(value="45", name="Landscaping Services"),
        )
        values.update(kwargs)
        return Item(**values)

    def test_valid_service_item(self) -> None:
        assert self.service_item().valid_for_create()

    def test_type_must_be_known(self) -> None:
        assert self.service_item(type="Bundle").validate_for_create() == [
            FieldError("type", "is not included in the list")
        ]

    def test_name_is_required_and_bounded(self) -> None:
        assert self.service_item(name=None).validate_for_create() == [
            FieldError("name", "can't be blank")
        ]
        assert self.service_item(name="x" * 101).validate_for_create() == [
            FieldError("name", "is too long (maximum is 100 characters)")
        ]

    def test_inventory_needs_stock_accounts(self) -> None:
        errors = self.service_item(type=Item.INVENTORY_TYPE).validate_for_create()
        assert [e.field for e in errors] == [
            "asset_account_ref",
            "expense_account_ref",
            "quantity_on_hand",
            "inventory_start_date",
        ]

    def test_reference_uses_item_name(self) -> None:
        ref = self.service_item(id=6).to_ref()
        assert ref.value == "6"
        assert ref.name == "Gardening"


class TestInvoice:
    def test_requires_customer_and_lines(self) -> None:
        assert Invoice().validate_for_create() == [
            FieldError("customer_ref", "can't be blank"),
            FieldError("line_items", "At least 1 line item is required"),
        ]

    def test_need_to_send_requires_bill_email(self) -> None:
        invoice = Invoice(
            customer_ref=BaseReference(value="24"),
            line_items=[Line.sales_item(BaseReference(value="5"), Decimal("275.00"))],
            email_status=Invoice.EMAIL_STATUS_NEED_TO_SEND,
        )
        assert invoice.validate_for_create() == [
            FieldError("bill_email", "must be set if EmailStatus is NeedToSend")
        ]
        invoice.bill_email = EmailAddress(address="Familiystore@intuit.com")
        assert invoice.valid_for_create()

    def test_statuses_must_be_known(self) -> None:
        invoice = Invoice(
            customer_ref=BaseReference(value="24"),
            line_items=[Line.sales_item(BaseReference(value="5"), Decimal("275.00"))],
            email_status="Queued",
            print_status="Printed",
        )
        assert invoice.validate_for_create() == [
            FieldError("email_status", "is not included in the list"),
            FieldError("print_status", "is not included in the list"),
        ]
        invoice.email_status = Invoice.EMAIL_STATUS_EMAIL_SENT
        invoice.print_status = "PrintComplete"
        assert invoice.valid_for_create()

    def test_parses_lines(self, load_fixture: Any) -> None:
        invoice = Invoice.from_xml(load_fixture("invoice.xml"))

        assert invoice.id == 130
        assert invoice.doc_number == "1037"
        assert len(invoice.line_items) == 2
        first = invoice.line_items[0]
        assert first.amount == Decimal("275.00")
        assert first.detail_type == Line.SALES_ITEM_LINE_DETAIL
        assert first.sales_item_line_detail.item_ref.name == "Rock Fountain"
        assert first.sales_item_line_detail.tax_code_ref.value == "TAX"
        assert invoice.line_items[1].description is None
        assert invoice.customer_ref.value == "24"
        assert invoice.total_amount == Decimal("287.75")
        assert invoice.bill_email.address == "Familiystore@intuit.com"
        assert invoice.valid_for_update()
        assert invoice.to_ref() == BaseReference(value="130", name="1037")

    def test_sales_item_line_serialization(self) -> None:
        invoice = Invoice(
            customer_ref=BaseReference(value="24"),
            line_items=[
                Line.sales_item(
                    BaseReference(value="5", name="Rock Fountain"),
                    Decimal("275.00"),
                    quantity=Decimal("1"),
                    description="Rock Fountain",
                )
            ],
        )
        element = invoice.to_xml()

        lines = element.findall("q:Line", NS)
        assert len(lines) == 1
        assert lines[0].findtext("q:Amount", namespaces=NS) == "275.00"
        assert lines[0].findtext("q:DetailType", namespaces=NS) == "SalesItemLineDetail"
        item_ref = lines[0].find("q:SalesItemLineDetail/q:ItemRef", NS)
        assert item_ref.text == "5"
        assert item_ref.get("name") == "Rock Fountain"
        assert lines[0].find("q:SalesItemLineDetail/q:UnitPrice", NS) is None
        assert etree.QName(element[0]).localname == "Line"
