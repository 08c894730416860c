"""
Role and permission entities.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PermissionDefinition:
    """Catalog entry describing a grantable permission."""

    id: str  # "<resource>:<action>"
    name: str
    description: str
    category: str

    @property
    def resource(self) -> str:
        return self.id.split(":", 1)[0]

    @property
    def action(self) -> str:
        return self.id.split(":", 1)[1]


@dataclass(frozen=True)
class Permission:
    """A permission record attached to a user role."""

    resource: str
    action: str
    allowed: bool = True


@dataclass
class UserRole:
    """The role assigned to a user together with its permission records."""

    role: str
    permissions: list[Permission] = field(default_factory=list)
    user_id: str | None = None
