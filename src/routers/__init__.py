"""
API routers.
"""
from . import employees, health, payrolls, payslips  # noqa: F401
