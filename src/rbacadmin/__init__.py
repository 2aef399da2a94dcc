"""RBAC Admin - Group administration for role-based access control.

Manages groups that bundle roles and resources, exposed over a small
FastAPI application.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
