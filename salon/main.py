from fastapi import FastAPI

from salon.api.v1.appointments import router as appointments_router
from salon.api.v1.calendar import router as calendar_router
from salon.core.config import settings
from salon.core.logging import init_logging


def create_app() -> FastAPI:
    init_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Salon Scheduling", version="1.0.0")
    app.include_router(appointments_router, prefix="/api/v1/appointments", tags=["appointments"])
    app.include_router(calendar_router, prefix="/api/v1/calendar", tags=["calendar"])

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
