# talentai/main.py
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from talentai.core.config import settings
from talentai.core.errors import RecruitmentError
from talentai.core.logging import configure_logging
from talentai.db.session import engine, SessionLocal
from talentai.db.base import Base

# Import models so SQLAlchemy knows about them (for create_all)
import talentai.models  # noqa: F401

# Routers
from talentai.api.routes import router as api_router
from talentai.api.user_routes import router as user_router
from talentai.api.job_routes import router as job_router
from talentai.api.cv_routes import router as cv_router
from talentai.api.application_routes import router as application_router
from talentai.api.interview_routes import router as interview_router
from talentai.api.notification_routes import router as notification_router
from talentai.api.report_routes import router as report_router
from talentai.api.dashboard_routes import router as dashboard_router

# Seeder
from talentai.db.seed import seed_demo_users

logger = logging.getLogger(__name__)


async def handle_recruitment_error(request: Request, exc: RecruitmentError) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.APP_NAME)

    # Root -> redirect to Swagger UI
    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/docs")

    # CORS
    origins = [o.strip() for o in settings.BACKEND_CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RecruitmentError, handle_recruitment_error)

    # Ensure tables exist (migrations are the source of truth outside dev)
    if settings.CREATE_TABLES_ON_STARTUP:
        Base.metadata.create_all(bind=engine)

    if settings.SEED_DEMO_DATA:
        with SessionLocal() as db:
            inserted = seed_demo_users(db)
            if inserted:
                logger.info("[seed] inserted %d demo users", inserted)

    # API routes
    app.include_router(api_router)           # /health
    app.include_router(user_router)          # /users
    app.include_router(job_router)           # /jobs
    app.include_router(cv_router)            # /cvs
    app.include_router(application_router)   # /applications
    app.include_router(interview_router)     # /interviews
    app.include_router(notification_router)  # /notifications
    app.include_router(report_router)        # /reports
    app.include_router(dashboard_router)     # /dashboards

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)
