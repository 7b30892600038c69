from ..model.customer import Customer
from .base_service import BaseService


class CustomerService(BaseService):
    model = Customer
