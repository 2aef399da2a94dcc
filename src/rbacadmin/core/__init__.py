"""Core RBAC Admin utilities.

This module exports configuration, logging and the error catalogue for use
throughout the application.
"""

from rbacadmin.core.config import Settings, get_settings
from rbacadmin.core.exceptions import (
    AdminError,
    EmptyCollectionError,
    ErrorType,
    NameRequiredError,
    NameTakenError,
    NotFoundByIdError,
    NotFoundByNameError,
    NotFoundError,
    ResourceNotFoundError,
    RoleNotFoundError,
)
from rbacadmin.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "AdminError",
    "EmptyCollectionError",
    "ErrorType",
    "NameRequiredError",
    "NameTakenError",
    "NotFoundByIdError",
    "NotFoundByNameError",
    "NotFoundError",
    "ResourceNotFoundError",
    "RoleNotFoundError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "bind_correlation_id",
    "clear_context",
]
