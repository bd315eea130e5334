from __future__ import annotations

from zcv.constants.roles import ROLE_CATALOG, RoleConfig, get_role, list_roles

__all__ = [
    "ROLE_CATALOG",
    "RoleConfig",
    "get_role",
    "list_roles",
]
