# parcelplot/core/config.py
from __future__ import annotations
from typing import Annotated, Optional, List
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import Field, field_validator
from starlette.middleware.cors import CORSMiddleware


class Settings(BaseSettings):
    # Pydantic Settings
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",          # ignore unknown env keys safely
        case_sensitive=False,
    )

    # --- App ---
    app_name: str = "ParcelPlot"
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # --- Plotting ---
    closure_tolerance_ft: float = Field(1.0, alias="CLOSURE_TOLERANCE_FT")
    curve_min_steps: int = Field(10, alias="CURVE_MIN_STEPS")
    default_start_lat: float = Field(0.0, alias="DEFAULT_START_LAT")
    default_start_lng: float = Field(0.0, alias="DEFAULT_START_LNG")

    # --- Reference data ---
    # JSON object of "<township> <range>" -> county name, e.g. {"2S 19W": "Walton"}
    plss_county_table_path: Optional[str] = Field(None, alias="PLSS_COUNTY_TABLE_PATH")

    # --- CORS ---
    # Comma-separated in .env or leave default list
    allowed_origins: Annotated[List[str], NoDecode] = [
        "http://localhost",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, v):
        # Accept "a,b,c" or JSON array; pass lists through.
        if v is None:
            return []
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("curve_min_steps")
    @classmethod
    def _at_least_one_step(cls, v: int) -> int:
        return max(1, v)


settings = Settings()


def configure_cors(app):
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
