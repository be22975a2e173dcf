# sleep_coach/api/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from sleep_coach import __version__
from sleep_coach.api.dependencies import get_config_manager
from sleep_coach.api.routes import coach_routes, reminder_routes, settings_routes, sleep_routes
from sleep_coach.utils.data_validation import SleepCoachError

logging.basicConfig(
    level=get_config_manager().get('logging.level', 'INFO'),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Sleep Coach API",
    description="API for sleep-cycle calculations, sleep history and coaching insights",
    version=__version__
)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # For development - restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SleepCoachError)
async def sleep_coach_error_handler(request: Request, exc: SleepCoachError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.error_count()} validation error(s)")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# Include routers
app.include_router(sleep_routes.router)
app.include_router(coach_routes.router)
app.include_router(settings_routes.router)
app.include_router(reminder_routes.router)


@app.get("/")
async def root():
    return {
        "message": "Welcome to the Sleep Coach API",
        "version": __version__,
        "documentation": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
