import datetime
from decimal import Decimal

from ..fields import Field
from .base import ENTITY_FIELDS, BaseReference, QuickbooksEntity
from .validations import InclusionOf, PresenceOf


class TimeActivity(QuickbooksEntity):
    XML_COLLECTION_NODE = "TimeActivity"
    XML_NODE = "TimeActivity"
    REST_RESOURCE = "timeactivity"

    NAMEOF_OPTIONS = ("Employee", "Vendor")
    BILLABLE_STATUS_OPTIONS = ("Billable", "NotBillable", "HasBeenBilled")

    fields = ENTITY_FIELDS + (
        Field("txn_date", "TxnDate", datetime.date),
        Field("name_of", "NameOf"),
        Field("employee_ref", "EmployeeRef", BaseReference),
        Field("vendor_ref", "VendorRef", BaseReference),
        Field("customer_ref", "CustomerRef", BaseReference),
        Field("department_ref", "DepartmentRef", BaseReference),
        Field("item_ref", "ItemRef", BaseReference),
        Field("class_ref", "ClassRef", BaseReference),
        Field("billable_status", "BillableStatus"),
        Field("taxable", "Taxable", bool),
        Field("hourly_rate", "HourlyRate", Decimal),
        Field("hours", "Hours", int),
        Field("minutes", "Minutes", int),
        Field("break_hours", "BreakHours", int),
        Field("break_minutes", "BreakMinutes", int),
        Field("start_time", "StartTime", datetime.datetime),
        Field("end_time", "EndTime", datetime.datetime),
        Field("description", "Description"),
    )

    validations = (
        InclusionOf("name_of", in_=NAMEOF_OPTIONS),
        PresenceOf("employee_ref", if_=lambda ta: ta.name_of == "Employee"),
        PresenceOf("vendor_ref", if_=lambda ta: ta.name_of == "Vendor"),
        InclusionOf("billable_status", in_=BILLABLE_STATUS_OPTIONS, allow_none=True),
    )
