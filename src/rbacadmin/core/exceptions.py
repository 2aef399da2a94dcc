"""Error catalogue and exception hierarchy for admin operations.

Every failure an admin service can report has a stable code in
``ErrorType``. Services raise the matching ``AdminError`` subclass at the
point of detection; the HTTP layer turns it into a failure envelope.
"""

from collections.abc import Iterable
from enum import Enum


class ErrorType(Enum):
    """Stable error codes with their default descriptions."""

    SYS0001 = ("SYS0001", "Unknown error.")
    GRP0011 = ("GRP0011", "No group exists.")
    GRP0012 = ("GRP0012", "Cannot find any group by this id param.")
    GRP0013 = ("GRP0013", "Cannot find any group by this name param.")
    GRP0021 = ("GRP0021", "Group name is required.")
    GRP0031 = ("GRP0031", "Group already existing, name taken.")
    RSC0012 = ("RSC0012", "Cannot find any resource by this id param.")
    ROL0012 = ("ROL0012", "Cannot find any role by this id param.")

    def __init__(self, code: str, description: str) -> None:
        self.code = code
        self.description = description


class AdminError(Exception):
    """Base class for all admin service errors."""

    error_type: ErrorType = ErrorType.SYS0001

    def __init__(self, message: str | None = None, error_type: ErrorType | None = None) -> None:
        if error_type is not None:
            self.error_type = error_type
        self.message = message or self.error_type.description
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.error_type.code


class NotFoundError(AdminError):
    """Base class for lookup misses."""


class NotFoundByIdError(NotFoundError):
    """Raised when no group has the requested id."""

    error_type = ErrorType.GRP0012

    def __init__(self, entity_id: int | None, message: str | None = None) -> None:
        self.entity_id = entity_id
        super().__init__(message)


class NotFoundByNameError(NotFoundError):
    """Raised when no group has the requested name."""

    error_type = ErrorType.GRP0013

    def __init__(self, name: str | None, message: str | None = None) -> None:
        self.name = name
        super().__init__(message)


class _AssociationNotFoundError(NotFoundError):
    """Raised when some ids of an association list cannot be resolved."""

    def __init__(self, missing_ids: Iterable[int], message: str | None = None) -> None:
        self.missing_ids = sorted(set(missing_ids))
        if message is None:
            ids = ", ".join(str(i) for i in self.missing_ids)
            message = f"{self.error_type.description} Missing ids: {ids}"
        super().__init__(message)


class ResourceNotFoundError(_AssociationNotFoundError):
    error_type = ErrorType.RSC0012


class RoleNotFoundError(_AssociationNotFoundError):
    error_type = ErrorType.ROL0012


class NameTakenError(AdminError):
    """Raised when a group name is already in use."""

    error_type = ErrorType.GRP0031

    def __init__(self, name: str | None, message: str | None = None) -> None:
        self.name = name
        super().__init__(message)


class EmptyCollectionError(AdminError):
    """Raised when a listing finds no groups at all."""

    error_type = ErrorType.GRP0011


class NameRequiredError(AdminError):
    """Raised when a group write has no name."""

    error_type = ErrorType.GRP0021
