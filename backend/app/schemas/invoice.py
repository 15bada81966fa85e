"""Invoice preview schema."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from backend.app.schemas.institute_settings import InstituteSettings
from backend.app.schemas.student import StudentRead


class InvoicePreview(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    invoice: StudentRead
    settings: InstituteSettings
    whatsapp_link: str
    pdf_filename: str
    document_filename: str
