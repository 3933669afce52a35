# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Member Service
==============
Create, list, update and delete members of the ``member`` table.

Every write is validated (username/name length, email and phone shape,
age between 18 and 100) and checked for a duplicate username, email or
phone number before it reaches the database.

Port: 8005
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from member_service.controllers import form_controller, member_controller, system_controller
from member_service.core.config import settings
from member_service.core.dependencies import get_member_repo
from member_service.core.logging import get_logger
from member_service.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger("member-service")


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    repo = get_member_repo()
    if settings.AUTO_CREATE_SCHEMA:
        try:
            repo.create_schema()
            logger.info("member table ready")
        except Exception:
            logger.warning("Could not create schema — DB may not be ready yet")
    yield
    repo.dispose()
    logger.info("Shutting down — connection pool disposed")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Member Service",
    description="Validated CRUD over registered members.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")
    return JSONResponse(status_code=500, content={"error": "internal_server_error", "detail": str(exc)})


app.include_router(system_controller.router)
app.include_router(member_controller.router)
app.include_router(form_controller.router)


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
