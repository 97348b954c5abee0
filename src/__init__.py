"""
Payroll Keeper: employee and payroll records in a single JSON document.
"""

__version__ = "0.1.0"
