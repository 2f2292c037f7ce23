# fittrack/main.py
import os
import time
import logging
import uuid
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from fittrack.errors import DomainError, DependencyUnavailable
from fittrack.routers.auth import router as auth_router
from fittrack.routers.users import router as users_router
from fittrack.routers.catalog import categories_router, exercises_router
from fittrack.routers.workouts import router as workouts_router, items_router
from fittrack.routers.stats import router as stats_router
from fittrack.settings import get_settings
from fittrack.db import SessionLocal  # for healthz DB check

log = logging.getLogger("uvicorn")
logging.getLogger("fittrack").setLevel(get_settings().LOG_LEVEL.upper())

app = FastAPI(
    title="FitTrack API",
    openapi_tags=[
        {"name": "auth", "description": "Registration & login"},
        {"name": "users", "description": "Profile and password"},
        {"name": "catalog", "description": "Exercise categories and exercises"},
        {"name": "workouts", "description": "Workouts of the current user"},
        {"name": "workout exercises", "description": "Exercise line items per workout"},
        {"name": "stats", "description": "Totals and history"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
ALLOW_ORIGINS = os.getenv("ALLOW_ORIGINS", "*").split(",")
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

@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message, "kind": exc.kind})

@app.exception_handler(OperationalError)
async def db_unavailable_handler(request: Request, exc: OperationalError):
    log.error("database error on %s %s: %s", request.method, request.url.path, exc)
    return await domain_error_handler(request, DependencyUnavailable())

@app.get("/")
def root():
    return {"ok": True, "name": "FitTrack API"}

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
    return {"version": os.getenv("API_VERSION", "dev")}

# Routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(categories_router)
app.include_router(exercises_router)
app.include_router(workouts_router)
app.include_router(items_router)
app.include_router(stats_router)
