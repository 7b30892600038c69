import datetime
from decimal import Decimal

from ..fields import Field
from .base import (
    ENTITY_FIELDS,
    BaseReference,
    EmailAddress,
    PhysicalAddress,
    QuickbooksEntity,
)
from .line import Line
from .validations import Custom, InclusionOf, PresenceOf


def _needs_bill_email(invoice: "Invoice") -> bool:
    return invoice.email_status == Invoice.EMAIL_STATUS_NEED_TO_SEND


class Invoice(QuickbooksEntity):
    XML_COLLECTION_NODE = "Invoice"
    XML_NODE = "Invoice"
    REST_RESOURCE = "invoice"

    EMAIL_STATUS_NOT_SET = "NotSet"
    EMAIL_STATUS_NEED_TO_SEND = "NeedToSend"
    EMAIL_STATUS_EMAIL_SENT = "EmailSent"
    EMAIL_STATUS_OPTIONS = (
        EMAIL_STATUS_NOT_SET,
        EMAIL_STATUS_NEED_TO_SEND,
        EMAIL_STATUS_EMAIL_SENT,
    )
    PRINT_STATUS_OPTIONS = ("NotSet", "NeedToPrint", "PrintComplete")

    ref_name_field = "doc_number"

    fields = ENTITY_FIELDS + (
        Field("doc_number", "DocNumber"),
        Field("txn_date", "TxnDate", datetime.date),
        Field("private_note", "PrivateNote"),
        Field("line_items", "Line", Line, many=True),
        Field("customer_ref", "CustomerRef", BaseReference),
        Field("customer_memo", "CustomerMemo"),
        Field("billing_address", "BillAddr", PhysicalAddress),
        Field("shipping_address", "ShipAddr", PhysicalAddress),
        Field("class_ref", "ClassRef", BaseReference),
        Field("sales_term_ref", "SalesTermRef", BaseReference),
        Field("due_date", "DueDate", datetime.date),
        Field("ship_date", "ShipDate", datetime.date),
        Field("tracking_num", "TrackingNum"),
        Field("total_amount", "TotalAmt", Decimal),
        Field("apply_tax_after_discount", "ApplyTaxAfterDiscount", bool),
        Field("print_status", "PrintStatus"),
        Field("email_status", "EmailStatus"),
        Field("bill_email", "BillEmail", EmailAddress),
        Field("balance", "Balance", Decimal),
        Field("deposit", "Deposit", Decimal),
        Field("allow_online_payment", "AllowOnlinePayment", bool),
        Field("allow_online_credit_card_payment", "AllowOnlineCreditCardPayment", bool),
        Field("allow_online_ach_payment", "AllowOnlineACHPayment", bool),
        Field("department_ref", "DepartmentRef", BaseReference),
    )

    validations = (
        PresenceOf("customer_ref"),
        Custom(
            "line_items",
            lambda inv: len(inv.line_items) > 0,
            message="At least 1 line item is required",
        ),
        Custom(
            "bill_email",
            lambda inv: inv.bill_email is not None and bool(inv.bill_email.address),
            message="must be set if EmailStatus is NeedToSend",
            if_=_needs_bill_email,
        ),
        InclusionOf("email_status", in_=EMAIL_STATUS_OPTIONS, allow_none=True),
        InclusionOf("print_status", in_=PRINT_STATUS_OPTIONS, allow_none=True),
    )
