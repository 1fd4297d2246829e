import logging
import sqlite3
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import init_db
from app.routers import match, resumes
from app.utils.filesystem import ensure_data_dir

logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.setLevel(settings.log_level)
    # Startup: create or migrate the saved-resume database, then integrity-check it
    try:
        ensure_data_dir()
        init_db(settings.db_path)
        conn = sqlite3.connect(str(settings.db_path))
        result = conn.execute("PRAGMA integrity_check").fetchone()
        conn.close()
        if result and result[0] == "ok":
            logger.info("Database integrity check passed.")
        else:
            logger.error("DATABASE INTEGRITY CHECK FAILED: %s; saved resumes may be corrupt.", result)
    except (OSError, sqlite3.Error) as exc:
        logger.error("Could not prepare database at %s: %s", settings.db_path, exc)
    yield


app = FastAPI(
    title="Resume Match",
    description="Keyword coverage scoring of resumes against job descriptions",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://127.0.0.1:5173",
        "http://localhost:5173",
    ],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(match.router, prefix=settings.api_prefix)
app.include_router(resumes.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}
