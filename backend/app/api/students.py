"""Student record endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from backend.app.dependencies.stores import get_institute_settings_store, get_student_store, require_admin
from backend.app.schemas.invoice import InvoicePreview
from backend.app.schemas.student import StatusFilter, StudentForm, StudentRead, StudentRecord
from backend.app.services.formatting import build_whatsapp_link
from backend.app.services.institute_settings import InstituteSettingsStore
from backend.app.services.invoice_document import build_invoice_text, invoice_document_filename, invoice_pdf_filename
from backend.app.services.student_filters import filter_students
from backend.app.services.student_records import StudentFormInvalid, StudentNotFound, StudentRecordStore

router = APIRouter(prefix="/students", tags=["students"])


def _to_read(record: StudentRecord) -> StudentRead:
    return StudentRead(**record.model_dump())


def _get_student(store: StudentRecordStore, student_id: str) -> StudentRecord:
    try:
        return store.get(student_id)
    except StudentNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")


def _invalid_form(exc: StudentFormInvalid) -> HTTPException:
    return HTTPException(status_code=422, detail={"errors": exc.errors})


@router.post("", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
async def create_student(form: StudentForm, store: StudentRecordStore = Depends(get_student_store)):
    try:
        record = store.create(form)
    except StudentFormInvalid as exc:
        raise _invalid_form(exc)
    return _to_read(record)


@router.get("", response_model=list[StudentRead], dependencies=[Depends(require_admin)])
async def list_students(
    search: str = "",
    status_filter: StatusFilter = Query("all", alias="status"),
    store: StudentRecordStore = Depends(get_student_store),
):
    return [_to_read(r) for r in filter_students(store.list(), search, status_filter)]


@router.get("/{student_id}", response_model=StudentRead, dependencies=[Depends(require_admin)])
async def get_student(student_id: str, store: StudentRecordStore = Depends(get_student_store)):
    return _to_read(_get_student(store, student_id))


@router.put("/{student_id}", response_model=StudentRead, dependencies=[Depends(require_admin)])
async def update_student(student_id: str, form: StudentForm, store: StudentRecordStore = Depends(get_student_store)):
    try:
        record = store.update(student_id, form)
    except StudentNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    except StudentFormInvalid as exc:
        raise _invalid_form(exc)
    return _to_read(record)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_admin)])
async def delete_student(student_id: str, store: StudentRecordStore = Depends(get_student_store)):
    try:
        store.delete(student_id)
    except StudentNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{student_id}/invoice", response_model=InvoicePreview)
async def get_student_invoice(
    student_id: str,
    store: StudentRecordStore = Depends(get_student_store),
    settings_store: InstituteSettingsStore = Depends(get_institute_settings_store),
):
    record = _get_student(store, student_id)
    settings = settings_store.get()
    return InvoicePreview(
        invoice=_to_read(record),
        settings=settings,
        whatsapp_link=build_whatsapp_link(record, settings),
        pdf_filename=invoice_pdf_filename(record),
        document_filename=invoice_document_filename(record),
    )


@router.get("/{student_id}/invoice/download", response_class=Response)
async def download_student_invoice(
    student_id: str,
    store: StudentRecordStore = Depends(get_student_store),
    settings_store: InstituteSettingsStore = Depends(get_institute_settings_store),
):
    record = _get_student(store, student_id)
    text = build_invoice_text(record, settings_store.get())
    headers = {
        "Content-Disposition": f'attachment; filename="{invoice_document_filename(record)}"'
    }
    return Response(content=text.encode("utf-8"), media_type="text/plain; charset=utf-8", headers=headers)
