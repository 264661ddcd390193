import logging

from fastapi import FastAPI

from app.core.firebase import init_firebase
from app.api.routes import analyze, auth, health_records, settings, studies
from app.services.logger import configure_logging

logger = logging.getLogger(__name__)

app = FastAPI(title="Longevity Tracker Backend")


@app.on_event("startup")
def startup():
    """Configure logging and initialize Firebase at app startup."""
    configure_logging()
    try:
        init_firebase()
    except RuntimeError:
        # Scoring and studies still work; stored-data routes will fail until configured.
        logger.warning("Firebase not initialized; check FIREBASE_CREDENTIALS")


@app.get("/")
async def root():
    return {"message": "Longevity Tracker Backend is running"}


@app.get("/health")
async def health_check():
    return {"status": "ok"}


# Include API routers
app.include_router(analyze.router)
app.include_router(auth.router)
app.include_router(health_records.router)
app.include_router(studies.router)
app.include_router(settings.router)
