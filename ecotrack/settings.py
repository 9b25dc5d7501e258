import os
from typing import List

from pydantic import BaseModel, Field
from dotenv import load_dotenv

# load .env once at startup
load_dotenv()

DISTANCE_MATRIX_URL = "https://maps.googleapis.com/maps/api/distancematrix/json"


class Settings(BaseModel):
    gemini_api_key: str | None = Field(alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-2.5-flash", alias="GEMINI_MODEL")
    google_maps_api_key: str | None = Field(default=None, alias="GOOGLE_MAPS_API_KEY")
    google_maps_distance_url: str = Field(
        default=DISTANCE_MATRIX_URL, alias="GOOGLE_MAPS_DISTANCE_URL"
    )
    http_timeout_seconds: float = Field(default=15.0, alias="HTTP_TIMEOUT_SECONDS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")

    @classmethod
    def from_env(cls):
        origins = os.getenv("CORS_ORIGINS", "*")
        data = {
            "GEMINI_API_KEY": os.getenv("GEMINI_API_KEY"),
            "GEMINI_MODEL": os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
            "GOOGLE_MAPS_API_KEY": os.getenv("GOOGLE_MAPS_API_KEY"),
            "GOOGLE_MAPS_DISTANCE_URL": os.getenv(
                "GOOGLE_MAPS_DISTANCE_URL", DISTANCE_MATRIX_URL
            ),
            "HTTP_TIMEOUT_SECONDS": os.getenv("HTTP_TIMEOUT_SECONDS", "15"),
            "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO"),
            "CORS_ORIGINS": [o.strip() for o in origins.split(",") if o.strip()] or ["*"],
        }
        return cls.model_validate(data)


settings = Settings.from_env()
