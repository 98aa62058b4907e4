"""
Placement Hub API.

Job seekers browse and apply to internship/volunteer postings, companies
publish postings and review applicants, administrators moderate.

Run: uvicorn app.main:app --reload
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core import config
from app.core.logging_config import setup_logging, sanitize_log_data
from app.services.exceptions import MarketplaceError
from app.api.routes import (
    auth,
    users,
    job_seekers,
    companies,
    jobs,
    applications,
    health,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL)
    settings = sanitize_log_data({
        "database_url": config.DATABASE_URL,
        "run_migrations": config.RUN_MIGRATIONS,
        "log_dir": config.LOG_DIR,
    })
    logger.info(f"Settings: {settings}")
    if config.RUN_MIGRATIONS:
        from app.db.migrate import run_migrations
        run_migrations()
    else:
        from app.db.init_db import init_db
        init_db()
    logger.info("Placement Hub API started")
    yield


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="Placement Hub", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)


# ============================================
# ✅ DOMAIN ERRORS -> HTTP
# ============================================

@app.exception_handler(MarketplaceError)
async def marketplace_error_handler(request: Request, exc: MarketplaceError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(job_seekers.router)
app.include_router(companies.router)
app.include_router(jobs.router)
app.include_router(applications.router)
app.include_router(health.router)


@app.get("/")
def root():
    return {"status": "Placement Hub API running"}
