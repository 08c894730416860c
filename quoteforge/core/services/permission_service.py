"""
Role-based permission checks.

Permission records attached to a role are scanned in order and the first
record matching the resource and action decides.
"""

from quoteforge.core.entities.permission import Permission, PermissionDefinition, UserRole
from quoteforge.core.exceptions import PermissionDeniedError

SYSTEM_PERMISSIONS: tuple[PermissionDefinition, ...] = (
    # Invoices
    PermissionDefinition("invoice:create", "Create Invoices", "Create new invoices", "Invoices"),
    PermissionDefinition("invoice:read", "View Invoices", "View invoice details", "Invoices"),
    PermissionDefinition("invoice:update", "Edit Invoices", "Edit existing invoices", "Invoices"),
    PermissionDefinition("invoice:delete", "Delete Invoices", "Delete invoices", "Invoices"),
    PermissionDefinition("invoice:send", "Send Invoices", "Send invoices to clients", "Invoices"),
    # Quotes
    PermissionDefinition("quote:create", "Create Quotes", "Create new quotes", "Quotes"),
    PermissionDefinition("quote:read", "View Quotes", "View quote details", "Quotes"),
    PermissionDefinition("quote:update", "Edit Quotes", "Edit existing quotes", "Quotes"),
    PermissionDefinition("quote:delete", "Delete Quotes", "Delete quotes", "Quotes"),
    PermissionDefinition("quote:convert", "Convert Quotes", "Convert quotes to invoices", "Quotes"),
    # Customers
    PermissionDefinition("customer:create", "Create Customers", "Add new customers", "Customers"),
    PermissionDefinition("customer:read", "View Customers", "View customer details", "Customers"),
    PermissionDefinition(
        "customer:update", "Edit Customers", "Edit customer information", "Customers"
    ),
    PermissionDefinition("customer:delete", "Delete Customers", "Delete customers", "Customers"),
    # Payments
    PermissionDefinition(
        "payment:create", "Record Payments", "Record payment transactions", "Payments"
    ),
    PermissionDefinition("payment:read", "View Payments", "View payment history", "Payments"),
    PermissionDefinition("payment:update", "Edit Payments", "Edit payment records", "Payments"),
    PermissionDefinition("payment:delete", "Delete Payments", "Delete payment records", "Payments"),
    # Recurring invoices
    PermissionDefinition(
        "recurring:create", "Create Recurring Invoices", "Set up recurring invoices", "Recurring"
    ),
    PermissionDefinition(
        "recurring:read", "View Recurring Invoices", "View recurring invoice schedules", "Recurring"
    ),
    PermissionDefinition(
        "recurring:update", "Edit Recurring Invoices", "Edit recurring invoice settings", "Recurring"
    ),
    PermissionDefinition(
        "recurring:delete",
        "Delete Recurring Invoices",
        "Delete recurring invoice schedules",
        "Recurring",
    ),
    # Settings
    PermissionDefinition(
        "currency:manage", "Manage Currencies", "Add, edit, and remove currencies", "Settings"
    ),
    PermissionDefinition(
        "currency:rates", "Update Exchange Rates", "Update currency exchange rates", "Settings"
    ),
    # Reports
    PermissionDefinition("reports:view", "View Reports", "Access reports and analytics", "Reports"),
    PermissionDefinition(
        "reports:export", "Export Reports", "Export reports to various formats", "Reports"
    ),
    # Administration
    PermissionDefinition("admin:users", "Manage Users", "Add, edit, and remove users", "Administration"),
    PermissionDefinition("admin:roles", "Manage Roles", "Create and edit user roles", "Administration"),
    PermissionDefinition(
        "admin:settings", "System Settings", "Configure system settings", "Administration"
    ),
    PermissionDefinition("admin:backup", "Data Backup", "Backup and restore data", "Administration"),
)

PREDEFINED_ROLES: dict[str, dict] = {
    "Administrator": {
        "description": "Full system access with all permissions",
        "permissions": [p.id for p in SYSTEM_PERMISSIONS],
    },
    "Manager": {
        "description": "Management access with most permissions except system administration",
        "permissions": [p.id for p in SYSTEM_PERMISSIONS if p.category != "Administration"],
    },
    "Accountant": {
        "description": "Financial operations access",
        "permissions": [
            "invoice:create", "invoice:read", "invoice:update", "invoice:send",
            "quote:create", "quote:read", "quote:update", "quote:convert",
            "customer:read", "customer:update",
            "payment:create", "payment:read", "payment:update",
            "recurring:create", "recurring:read", "recurring:update",
            "currency:manage", "currency:rates",
            "reports:view", "reports:export",
        ],
    },
    "Sales Representative": {
        "description": "Sales-focused access for quotes and customer management",
        "permissions": [
            "quote:create", "quote:read", "quote:update", "quote:convert",
            "customer:create", "customer:read", "customer:update",
            "invoice:read",
            "reports:view",
        ],
    },
    "Viewer": {
        "description": "Read-only access to most data",
        "permissions": [
            "invoice:read", "quote:read", "customer:read",
            "payment:read", "recurring:read", "reports:view",
        ],
    },
}


def get_permissions_by_category() -> dict[str, list[PermissionDefinition]]:
    """Group the permission catalog by category, preserving catalog order."""
    grouped: dict[str, list[PermissionDefinition]] = {}
    for permission in SYSTEM_PERMISSIONS:
        grouped.setdefault(permission.category, []).append(permission)
    return grouped


def permissions_for_role(role_name: str) -> list[Permission]:
    """
    Expand a predefined role into allowed permission records.

    Raises:
        KeyError: If the role is not predefined.
    """
    template = PREDEFINED_ROLES[role_name]
    return [
        Permission(resource=resource, action=action)
        for resource, action in (pid.split(":", 1) for pid in template["permissions"])
    ]


class PermissionService:
    """Answers permission questions for one user role."""

    def __init__(self, user_role: UserRole | None):
        self._user_role = user_role

    @property
    def role(self) -> str | None:
        return self._user_role.role if self._user_role else None

    def has_permission(self, resource: str, action: str) -> bool:
        if self._user_role is None:
            return False
        for permission in self._user_role.permissions:
            if permission.resource == resource and permission.action == action:
                return permission.allowed
        return False

    def require(self, resource: str, action: str) -> None:
        """Raise PermissionDeniedError unless the action is allowed."""
        if not self.has_permission(resource, action):
            raise PermissionDeniedError(resource, action, self.role)

    def can_create(self, resource: str) -> bool:
        return self.has_permission(resource, "create")

    def can_read(self, resource: str) -> bool:
        return self.has_permission(resource, "read")

    def can_update(self, resource: str) -> bool:
        return self.has_permission(resource, "update")

    def can_delete(self, resource: str) -> bool:
        return self.has_permission(resource, "delete")

    def can_manage(self, resource: str) -> bool:
        return self.has_permission(resource, "manage")

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @property
    def is_manager(self) -> bool:
        return self.role == "manager" or self.is_admin
