"""Roles and permission tokens."""

import enum


class Permission(str, enum.Enum):
    """All permission tokens checked by the dashboard screens."""
    # Administration
    MANAGE_USERS = "manage_users"
    MANAGE_COMPANY = "manage_company"
    # Catalogue
    MANAGE_ITEMS = "manage_items"
    VIEW_STOCK = "view_stock"
    # Reports
    VIEW_REPORTS = "view_reports"
    # Sales
    MANAGE_SALES = "manage_sales"
    MAKE_SALES = "make_sales"
    VIEW_ALL_SALES = "view_all_sales"
    VIEW_OWN_SALES = "view_own_sales"
    # Bulk orders
    MANAGE_BULK_ORDERS = "manage_bulk_orders"


class Role(str, enum.Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    STAFF = "staff"
