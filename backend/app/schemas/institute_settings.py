"""Institute settings schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from backend.app.core.constants import DEFAULT_INSTITUTE_SETTINGS


class InstituteSettings(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    institute_name: str
    institute_address: str
    institute_contact: str
    logo_url: str
    signature_url: str
    terms_and_conditions: str


def default_institute_settings() -> InstituteSettings:
    return InstituteSettings(**DEFAULT_INSTITUTE_SETTINGS)
