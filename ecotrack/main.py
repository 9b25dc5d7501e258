import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes.activities import router as activities_router
from .routes.assistant import router as assistant_router
from .routes.dashboard import router as dashboard_router
from .routes.distance import router as distance_router
from .routes.goals import router as goals_router
from .settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="EcoTrack Carbon Footprint Tracker",
    version="0.3.0",
    description="Logs daily activities, estimates their CO₂e and reports weekly progress.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    return {"status": "ok", "service": "ecotrack"}


app.include_router(activities_router)
app.include_router(dashboard_router)
app.include_router(goals_router)
app.include_router(assistant_router)
app.include_router(distance_router)
