"""
staff_admin – Employee records administration on a generic query filter engine.

Import path convention::

    from staff_admin.kernel.errors import ValidationError
    from staff_admin.application.search import EntitySchema, QueryFilterBuilder
    from staff_admin.application.employees import EmployeeService
    from staff_admin.adapters.fastapi import create_app
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
