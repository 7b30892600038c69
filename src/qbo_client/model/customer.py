import datetime
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


class Customer(QuickbooksEntity):
    XML_COLLECTION_NODE = "Customer"
    XML_NODE = "Customer"
    REST_RESOURCE = "customer"

    ref_name_field = "display_name"

    fields = ENTITY_FIELDS + (
        Field("title", "Title"),
        Field("given_name", "GivenName"),
        Field("middle_name", "MiddleName"),
        Field("family_name", "FamilyName"),
        Field("suffix", "Suffix"),
        Field("fully_qualified_name", "FullyQualifiedName"),
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
        Field("default_tax_code_ref", "DefaultTaxCodeRef", BaseReference),
        Field("taxable", "Taxable", bool),
        Field("billing_address", "BillAddr", PhysicalAddress),
        Field("shipping_address", "ShipAddr", PhysicalAddress),
        Field("notes", "Notes"),
        Field("job", "Job", bool),
        Field("bill_with_parent", "BillWithParent", bool),
        Field("parent_ref", "ParentRef", BaseReference),
        Field("level", "Level", int),
        Field("sales_term_ref", "SalesTermRef", BaseReference),
        Field("payment_method_ref", "PaymentMethodRef", BaseReference),
        Field("balance", "Balance", Decimal),
        Field("open_balance_date", "OpenBalanceDate", datetime.date),
        Field("balance_with_jobs", "BalanceWithJobs", Decimal),
        Field("preferred_delivery_method", "PreferredDeliveryMethod"),
        Field("resale_number", "ResaleNum"),
    )

    validations = name_entity_rules()
