from .base import (
    BaseReference,
    Collection,
    EmailAddress,
    MetaData,
    PhysicalAddress,
    QuickbooksBaseObject,
    QuickbooksEntity,
    TelephoneNumber,
    WebSiteAddress,
)
from .customer import Customer
from .employee import Employee
from .invoice import Invoice
from .item import Item
from .line import Line, SalesItemLineDetail
from .time_activity import TimeActivity
from .validations import FieldError
from .vendor import Vendor

__all__ = [
    "BaseReference",
    "Collection",
    "Customer",
    "EmailAddress",
    "Employee",
    "FieldError",
    "Invoice",
    "Item",
    "Line",
    "MetaData",
    "PhysicalAddress",
    "QuickbooksBaseObject",
    "QuickbooksEntity",
    "SalesItemLineDetail",
    "TelephoneNumber",
    "TimeActivity",
    "Vendor",
    "WebSiteAddress",
]
