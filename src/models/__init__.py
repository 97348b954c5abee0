"""
Models package for the application.
"""
from .base import Record, utc_timestamp  # noqa: F401
from .employee import Employee  # noqa: F401
from .payroll import Payroll  # noqa: F401
from .payslip import Payslip, PayslipEmployee  # noqa: F401
from .document import Document  # noqa: F401

__all__ = [
    'Record',
    'utc_timestamp',
    'Employee',
    'Payroll',
    'Payslip',
    'PayslipEmployee',
    'Document',
]
