"""Role/permission table and screen allow-lists.

RBAC Matrix:
┌─────────────────────┬───────┬─────────┬───────┐
│ Permission          │ Admin │ Manager │ Staff │
├─────────────────────┼───────┼─────────┼───────┤
│ manage_users        │  ✓    │         │       │
│ manage_company      │  ✓    │         │       │
│ manage_items        │  ✓    │   ✓     │       │
│ view_reports        │  ✓    │   ✓     │       │
│ manage_sales        │  ✓    │   ✓     │       │
│ view_all_sales      │  ✓    │   ✓     │       │
│ manage_bulk_orders  │       │   ✓     │       │
│ make_sales          │       │         │   ✓   │
│ view_stock          │       │         │   ✓   │
│ view_own_sales      │       │         │   ✓   │
└─────────────────────┴───────┴─────────┴───────┘

A screen is visible when the account holds ANY permission of its allow-list.
"""

import enum

from bakery_pos.models.account import Account
from bakery_pos.models.role import Permission, Role

ROLE_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.ADMIN: frozenset({
        Permission.MANAGE_USERS,
        Permission.MANAGE_COMPANY,
        Permission.MANAGE_ITEMS,
        Permission.VIEW_REPORTS,
        Permission.MANAGE_SALES,
        Permission.VIEW_ALL_SALES,
    }),
    Role.MANAGER: frozenset({
        Permission.MANAGE_ITEMS,
        Permission.VIEW_REPORTS,
        Permission.MANAGE_SALES,
        Permission.VIEW_ALL_SALES,
        Permission.MANAGE_BULK_ORDERS,
    }),
    Role.STAFF: frozenset({
        Permission.MAKE_SALES,
        Permission.VIEW_STOCK,
        Permission.VIEW_OWN_SALES,
    }),
}


class Screen(str, enum.Enum):
    DASHBOARD = "dashboard"
    INVENTORY = "inventory"
    SALES = "sales"
    BULK_ORDERS = "bulk_orders"
    REPORTS = "reports"
    USERS = "users"
    COMPANY = "company"


SCREEN_PERMISSIONS: dict[Screen, tuple[Permission, ...]] = {
    Screen.DASHBOARD: (Permission.MANAGE_ITEMS, Permission.MAKE_SALES),
    Screen.INVENTORY: (Permission.MANAGE_ITEMS,),
    Screen.SALES: (Permission.MAKE_SALES, Permission.MANAGE_SALES),
    Screen.BULK_ORDERS: (Permission.MANAGE_BULK_ORDERS, Permission.MANAGE_SALES),
    Screen.REPORTS: (Permission.VIEW_REPORTS,),
    Screen.USERS: (Permission.MANAGE_USERS,),
    Screen.COMPANY: (Permission.MANAGE_COMPANY, Permission.MANAGE_ITEMS),
}


def permissions_for(role: Role) -> frozenset[Permission]:
    return ROLE_PERMISSIONS[role]


def has_permission(account: Account | None, permission: Permission | str) -> bool:
    """True if the account's role grants ``permission``; always False without an account."""
    if account is None:
        return False
    try:
        permission = Permission(permission)
    except ValueError:
        return False
    return permission in ROLE_PERMISSIONS[account.role]


def has_any_permission(account: Account | None, permissions) -> bool:
    return any(has_permission(account, p) for p in permissions)


def can_access(account: Account | None, screen: Screen) -> bool:
    return has_any_permission(account, SCREEN_PERMISSIONS[screen])


def accessible_screens(account: Account | None) -> list[Screen]:
    return [screen for screen in Screen if can_access(account, screen)]
