"""
Store Errors

Raised by the application stores; the API layer maps them to HTTP status codes.
"""


class StoreError(Exception):
    """Base class for store failures."""


class EmployeeNotFoundError(StoreError):
    def __init__(self, employee_id: str):
        super().__init__(f"Employee not found: {employee_id}")
        self.employee_id = employee_id


class EmployeeFrozenError(StoreError):
    def __init__(self, employee_id: str):
        super().__init__(f"Employee {employee_id} is frozen")
        self.employee_id = employee_id


class EmptyUpdateError(StoreError):
    def __init__(self):
        super().__init__("No updates provided")
