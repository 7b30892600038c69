import datetime

from ..fields import Field
from .base import (
    ENTITY_FIELDS,
    EmailAddress,
    PhysicalAddress,
    QuickbooksEntity,
    TelephoneNumber,
)
from .name_entity import name_entity_rules
from .validations import Custom, InclusionOf


class Employee(QuickbooksEntity):
    XML_COLLECTION_NODE = "Employee"
    XML_NODE = "Employee"
    REST_RESOURCE = "employee"

    GENDER_OPTIONS = ("Male", "Female")

    ref_name_field = "display_name"

    fields = ENTITY_FIELDS + (
        Field("title", "Title"),
        Field("given_name", "GivenName"),
        Field("middle_name", "MiddleName"),
        Field("family_name", "FamilyName"),
        Field("suffix", "Suffix"),
        Field("display_name", "DisplayName"),
        Field("print_on_check_name", "PrintOnCheckName"),
        Field("active", "Active", bool),
        Field("primary_phone", "PrimaryPhone", TelephoneNumber),
        Field("mobile_phone", "Mobile", TelephoneNumber),
        Field("primary_email_address", "PrimaryEmailAddr", EmailAddress),
        Field("employee_number", "EmployeeNumber"),
        Field("ssn", "SSN"),
        Field("address", "PrimaryAddr", PhysicalAddress),
        Field("billable_time", "BillableTime", bool),
        Field("hired_date", "HiredDate", datetime.date),
        Field("released_date", "ReleasedDate", datetime.date),
        Field("birth_date", "BirthDate", datetime.date),
        Field("gender", "Gender"),
    )

    validations = name_entity_rules() + (
        Custom(
            "given_name",
            lambda e: bool(e.given_name or e.family_name),
            message="or family_name is required",
        ),
        InclusionOf("gender", in_=GENDER_OPTIONS, allow_none=True),
    )
