"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the student service. Controllers
are intentionally thin: they accept validated requests, delegate to
`StudentService`, and translate domain errors into status codes.

Endpoints implemented:
- POST /students
- GET /students/{student_id}
- GET /students
- DELETE /students/{student_id}
- GET /health
"""

import json
import time
import uuid
from typing import Annotated, List

from fastapi import Depends, FastAPI, Path, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from sqlmodel import Session

from . import __version__
from .config import settings
from .database import create_db_and_tables, get_session
from .exceptions import NoSuchIdError
from .logging_config import setup_logging
from .repositories import InMemoryStudentRepository, SqlStudentRepository, StudentRepository
from .schemas import INT32_MAX, INT32_MIN, StudentCreationIn, StudentDTO
from .services import StudentService

logger = setup_logging()

app = FastAPI(title="Student Service API", version=__version__)

if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

StudentId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]

_memory_repository = InMemoryStudentRepository()

if settings.STUDENT_STORE == "sql":
    create_db_and_tables()

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Student not found",
        "content": {"text/plain": {"example": "Could not find student with id 1"}},
    }
}
VALIDATION_RESPONSE = {
    400: {
        "description": "Invalid request, one message per failing field",
        "content": {"application/json": {"example": {"name": "name must not be empty"}}},
    }
}


def _request_log_payload(request: Request, req_id: str, started: float, **extra) -> str:
    payload = {
        "request_id": req_id,
        "path": request.url.path,
        "method": request.method,
        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
        "client": request.client.host if request.client else "unknown",
    }
    payload.update(extra)
    return json.dumps(payload, ensure_ascii=True)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("request_failed %s", _request_log_payload(request, req_id, started))
        raise
    response.headers["X-Request-ID"] = req_id
    logger.info(
        "request_done %s",
        _request_log_payload(request, req_id, started, status_code=response.status_code),
    )
    return response


@app.exception_handler(NoSuchIdError)
async def no_such_id_handler(request: Request, exc: NoSuchIdError):
    return PlainTextResponse(exc.message, status_code=404)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report every failing field as `{field: message}` with status 400."""
    errors = {}
    for error in exc.errors():
        if error["type"] == "json_invalid":
            errors.setdefault("body", error["msg"])
            continue
        loc = list(error["loc"])
        if loc and loc[0] in ("body", "path", "query"):
            loc = loc[1:]
        field = ".".join(str(x) for x in loc) or "body"
        errors.setdefault(field, error["msg"])
    logger.info("rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=400, content=errors)


def get_student_repository(db: Session = Depends(get_session)) -> StudentRepository:
    """Return the repository selected by `STUDENT_STORE`."""
    if settings.STUDENT_STORE == "memory":
        return _memory_repository
    return SqlStudentRepository(db)


def get_student_service(repository: StudentRepository = Depends(get_student_repository)) -> StudentService:
    return StudentService(repository)


@app.post(
    "/students",
    status_code=201,
    response_model=StudentDTO,
    summary="Add a new student",
    responses=VALIDATION_RESPONSE,
)
def add_new_student(student: StudentCreationIn, service: StudentService = Depends(get_student_service)):
    return service.add_new_student(student.name, student.age)


@app.get(
    "/students/{student_id}",
    response_model=StudentDTO,
    summary="Find student by id",
    responses=NOT_FOUND_RESPONSE,
)
def get_student_by_id(student_id: StudentId, service: StudentService = Depends(get_student_service)):
    return service.get_student_by_id(student_id)


@app.get("/students", response_model=List[StudentDTO], summary="Find all students")
def get_all_students(service: StudentService = Depends(get_student_service)):
    return service.get_all_students()


@app.delete(
    "/students/{student_id}",
    status_code=204,
    response_class=Response,
    summary="Delete student by id",
    responses=NOT_FOUND_RESPONSE,
)
def delete_student(student_id: StudentId, service: StudentService = Depends(get_student_service)):
    service.delete_student_by_id(student_id)
    return Response(status_code=204)


@app.get("/health")
def health():
    return {"status": "ok"}


def run():
    """Serve the app with uvicorn on `HOST`/`PORT`."""
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, reload=False)


if __name__ == "__main__":
    run()
