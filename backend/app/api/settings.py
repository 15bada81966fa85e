from fastapi import APIRouter, Depends

from backend.app.dependencies.stores import get_institute_settings_store, require_admin
from backend.app.schemas.institute_settings import InstituteSettings
from backend.app.services.institute_settings import InstituteSettingsStore

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=InstituteSettings)
async def get_institute_settings(settings_store: InstituteSettingsStore = Depends(get_institute_settings_store)):
    return settings_store.get()


@router.put("", response_model=InstituteSettings, dependencies=[Depends(require_admin)])
async def update_institute_settings(
    payload: InstituteSettings,
    settings_store: InstituteSettingsStore = Depends(get_institute_settings_store),
):
    settings_store.set(payload)
    return settings_store.get()
