from enum import Enum

from pydantic import BaseModel


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class RoleRead(BaseModel):
    role: UserRole


class RoleUpdate(BaseModel):
    role: UserRole
