"""
Client library for the QuickBooks Online v3 XML API.

    from qbo_client import QboConfig, TimeActivity, TimeActivityService

    service = TimeActivityService(realm_id="9991111222", auth_client=auth_client)
    activity = TimeActivity(name_of="Employee", employee_ref=employee.to_ref(), hours=4)
    if activity.valid_for_create():
        activity = service.create(activity)
"""

from .config import QboConfig
from .exceptions import (
    AuthorizationFailure,
    Forbidden,
    IntuitRequestException,
    MissingRealmError,
    QuickbooksError,
    ServiceUnavailable,
)
from .model import (
    BaseReference,
    Collection,
    Customer,
    Employee,
    FieldError,
    Invoice,
    Item,
    Line,
    TimeActivity,
    Vendor,
)
from .service import (
    BaseService,
    CustomerService,
    EmployeeService,
    InvoiceService,
    ItemService,
    TimeActivityService,
    VendorService,
)

__version__ = "0.1.0"

__all__ = [
    "AuthorizationFailure",
    "BaseReference",
    "BaseService",
    "Collection",
    "Customer",
    "CustomerService",
    "Employee",
    "EmployeeService",
    "FieldError",
    "Forbidden",
    "IntuitRequestException",
    "Invoice",
    "InvoiceService",
    "Item",
    "ItemService",
    "Line",
    "MissingRealmError",
    "QboConfig",
    "QuickbooksError",
    "ServiceUnavailable",
    "TimeActivity",
    "TimeActivityService",
    "Vendor",
    "VendorService",
]
