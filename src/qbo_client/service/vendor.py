from ..model.vendor import Vendor
from .base_service import BaseService


class VendorService(BaseService):
    model = Vendor
