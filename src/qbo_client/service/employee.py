from ..model.employee import Employee
from .base_service import BaseService


class EmployeeService(BaseService):
    model = Employee
