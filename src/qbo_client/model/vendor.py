from decimal import Decimal

from ..fields import Field
from .base import (
    ENTITY_FIELDS,
    BaseReference,
    EmailAddress,
    PhysicalAddress,
    QuickbooksEntity,
    TelephoneNumber,
    WebSiteAddress,
)
from .name_entity import name_entity_rules


class Vendor(QuickbooksEntity):
    XML_COLLECTION_NODE = "Vendor"
    XML_NODE = "Vendor"
    REST_RESOURCE = "vendor"

    ref_name_field = "display_name"

    fields = ENTITY_FIELDS + (
        Field("title", "Title"),
        Field("given_name", "GivenName"),
        Field("middle_name", "MiddleName"),
        Field("family_name", "FamilyName"),
        Field("suffix", "Suffix"),
        Field("company_name", "CompanyName"),
        Field("display_name", "DisplayName"),
        Field("print_on_check_name", "PrintOnCheckName"),
        Field("active", "Active", bool),
        Field("primary_phone", "PrimaryPhone", TelephoneNumber),
        Field("alternate_phone", "AlternatePhone", TelephoneNumber),
        Field("mobile_phone", "Mobile", TelephoneNumber),
        Field("fax_phone", "Fax", TelephoneNumber),
        Field("primary_email_address", "PrimaryEmailAddr", EmailAddress),
        Field("web_site", "WebAddr", WebSiteAddress),
        Field("billing_address", "BillAddr", PhysicalAddress),
        Field("tax_identifier", "TaxIdentifier"),
        Field("term_ref", "TermRef", BaseReference),
        Field("balance", "Balance", Decimal),
        Field("account_number", "AcctNum"),
        Field("is_1099", "Vendor1099", bool),
    )

    validations = name_entity_rules()
