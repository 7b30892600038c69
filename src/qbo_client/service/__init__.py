from .base_service import BaseService, format_xml, parse_intuit_error
from .customer import CustomerService
from .employee import EmployeeService
from .invoice import InvoiceService
from .item import ItemService
from .time_activity import TimeActivityService
from .vendor import VendorService

__all__ = [
    "BaseService",
    "CustomerService",
    "EmployeeService",
    "InvoiceService",
    "ItemService",
    "TimeActivityService",
    "VendorService",
    "format_xml",
    "parse_intuit_error",
]
