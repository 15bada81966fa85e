# Swamy Academy billing backend entrypoint: a minimal FastAPI app.

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.core.logging import configure_logging
from backend.app.core.settings import get_settings
from backend.app.api import courses
from backend.app.api import exports
from backend.app.api import role
from backend.app.api import settings as institute_settings
from backend.app.api import students
from backend.app.db.base import Base
from backend.app.db.session import engine

configure_logging()

settings = get_settings()
app = FastAPI(title=settings.app_name, version=settings.api_version)

origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(courses.router)
app.include_router(role.router)
app.include_router(institute_settings.router)
app.include_router(students.router)
app.include_router(exports.router)


@app.get("/")
def read_root():
    return {"app": "Swamy Academy Billing backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def create_tables():
    Base.metadata.create_all(bind=engine)
