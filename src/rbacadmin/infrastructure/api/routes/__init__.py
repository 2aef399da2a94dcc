"""API Routes for RBAC Admin."""

from rbacadmin.infrastructure.api.routes.groups_router import router as groups_router

__all__ = [
    "groups_router",
]
