# lifttrack/main.py
import time
import logging
import uuid
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from lifttrack.errors import LiftTrackError, StoreFailure
from lifttrack.routers.auth import router as auth_router
from lifttrack.routers.exercises import router as exercises_router
from lifttrack.routers.session import router as session_router
from lifttrack.routers.sets import router as sets_router
from lifttrack.routers.workouts import router as workouts_router
from lifttrack.db import SessionLocal  # for healthz DB check
from lifttrack.settings import get_settings

log = logging.getLogger("uvicorn")

app = FastAPI(
    title="LiftTrack API",
    openapi_tags=[
        {"name": "auth", "description": "Registration & login"},
        {"name": "exercises", "description": "Per-exercise settings, progress and session entry"},
        {"name": "session", "description": "Lift card transitions on a client-held snapshot"},
        {"name": "sets", "description": "Logged sets"},
        {"name": "workouts", "description": "Workout days with their exercises and sets"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
ALLOW_ORIGINS = get_settings().ALLOW_ORIGINS.split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.exception_handler(LiftTrackError)
async def lifttrack_error_handler(request: Request, exc: LiftTrackError):
    body = {"detail": exc.detail}
    if isinstance(exc, StoreFailure) and exc.snapshot is not None:
        # Lets the client restore the row it optimistically marked
        body["snapshot"] = exc.snapshot.model_dump(mode="json")
    return JSONResponse(status_code=exc.status_code, content=body)

@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    log.error("database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=StoreFailure.status_code, content={"detail": "database unavailable"})

@app.get("/")
def root():
    return {"ok": True, "name": "LiftTrack API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": get_settings().API_VERSION}

# Routers
app.include_router(auth_router)
app.include_router(exercises_router)
app.include_router(session_router)
app.include_router(sets_router)
app.include_router(workouts_router)
