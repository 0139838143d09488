import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import (
    accounts,
    assignments,
    clearance,
    faculty,
    grade_levels,
    reports,
    sections,
    settings as settings_api,
    signatories,
    students,
    subjects,
)
from app.core.config import settings
from app.core.errors import ClearanceError
from app.db.init_db import init_db
from app.db.session import SessionLocal

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    db = SessionLocal()
    try:
        init_db(db)
    finally:
        db.close()
    logger.info("✅ Clearance service started")
    yield


app = FastAPI(title="School Clearance", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Every error leaves the service as {"error": "..."}
@app.exception_handler(ClearanceError)
async def clearance_error_handler(request: Request, exc: ClearanceError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return JSONResponse(status_code=422, content={"error": "; ".join(problems)})


app.include_router(grade_levels.router, prefix="/grade-levels", tags=["sections"])
app.include_router(sections.router, prefix="/sections", tags=["sections"])
app.include_router(students.router, prefix="/students", tags=["students"])
app.include_router(subjects.router, prefix="/subjects", tags=["requirements"])
app.include_router(accounts.router, prefix="/accounts", tags=["requirements"])
app.include_router(signatories.router, prefix="/signatories", tags=["signatories"])
app.include_router(faculty.router, prefix="/faculty", tags=["signatories"])
app.include_router(assignments.router, prefix="/assignments", tags=["assignments"])
app.include_router(clearance.router, prefix="/clearance", tags=["clearance"])
app.include_router(reports.router, prefix="/reports", tags=["reports"])
app.include_router(settings_api.router, prefix="/api/settings", tags=["settings"])


def run():
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)


if __name__ == "__main__":
    run()
