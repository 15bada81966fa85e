"""Request-scoped store dependencies, all views over one key-value store."""

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.settings import get_settings
from backend.app.db.session import get_db
from backend.app.schemas.role import UserRole
from backend.app.services.institute_settings import InstituteSettingsStore
from backend.app.services.invoice_numbering import InvoiceNumberService
from backend.app.services.roles import RoleStore
from backend.app.services.storage import KeyValueStore, SqlKeyValueStore
from backend.app.services.student_records import StudentRecordStore


def get_kv_store(db: Session = Depends(get_db)) -> KeyValueStore:
    return SqlKeyValueStore(db)


def get_student_store(store: KeyValueStore = Depends(get_kv_store)) -> StudentRecordStore:
    settings = get_settings()
    numbering = InvoiceNumberService(store, settings.invoice_counter_key, settings.invoice_prefix)
    return StudentRecordStore(store, settings.students_key, numbering)


def get_institute_settings_store(store: KeyValueStore = Depends(get_kv_store)) -> InstituteSettingsStore:
    return InstituteSettingsStore(store, get_settings().settings_key)


def get_role_store(store: KeyValueStore = Depends(get_kv_store)) -> RoleStore:
    return RoleStore(store, get_settings().user_role_key)


def require_admin(roles: RoleStore = Depends(get_role_store)) -> UserRole:
    role = roles.get()
    if role != UserRole.ADMIN:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin mode required")
    return role
