import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from runova.api.dashboard import router as dashboard_router
from runova.api.plans import router as plans_router
from runova.api.profile import router as profile_router
from runova.api.workouts import router as workouts_router
from runova.core.config import settings
from runova.core.errors import register_exception_handlers
from runova.core.logging import setup_logging
from runova.db import Base, engine
from runova.models.profile import Profile  # noqa: F401  (import ensures table is registered)
from runova.models.training_plan import TrainingPlan  # noqa: F401
from runova.models.workout_log import WorkoutLog  # noqa: F401


setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Runova")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
        extra={
            "extra_fields": {
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "process_time_ms": round(elapsed_ms, 2),
            }
        },
    )
    return response


register_exception_handlers(app)

# Create DB tables on startup (deployed databases use the Alembic migrations)
Base.metadata.create_all(bind=engine)

app.include_router(plans_router)
app.include_router(workouts_router)
app.include_router(dashboard_router)
app.include_router(profile_router)


@app.get("/")
def root():
    return {"message": "Runova backend is running"}
