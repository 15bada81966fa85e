"""CSV export of the visible student list."""

import logging

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse

from backend.app.core.settings import get_settings
from backend.app.core.time import utc_today
from backend.app.dependencies.stores import get_student_store, require_admin
from backend.app.schemas.student import StatusFilter
from backend.app.services.formatting import build_students_csv, csv_export_filename
from backend.app.services.student_filters import filter_students
from backend.app.services.student_records import StudentRecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/exports", tags=["exports"], dependencies=[Depends(require_admin)])


@router.get("/students.csv", response_class=Response)
async def export_students_csv(
    search: str = "",
    status_filter: StatusFilter = Query("all", alias="status"),
    store: StudentRecordStore = Depends(get_student_store),
):
    records = filter_students(store.list(), search, status_filter)
    if not records:
        return JSONResponse({"message": "No data to export."})
    settings = get_settings()
    filename = csv_export_filename(settings.export_file_prefix, utc_today())
    logger.info("Exporting %d student records to %s", len(records), filename)
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}
    return Response(content=build_students_csv(records), media_type="text/csv; charset=utf-8", headers=headers)
