"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from maze_solver.core.directions import Orientation

# Project root directory (backend/)
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Maze Solver"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000,http://localhost:8080"

    # Rate limiting
    rate_limit_requests: int = 100  # solve requests per minute

    # Bundled mazes
    mazes_dir: Path = BASE_DIR / "mazes"

    # Solver
    solver_max_steps: Optional[int] = 1_000_000
    solver_detect_loops: bool = True
    solver_initial_orientation: str = "down"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("solver_max_steps")
    @classmethod
    def validate_max_steps(cls, v: Optional[int]) -> Optional[int]:
        """Unset or positive; 0 is accepted as 'no limit'."""
        if v is None or v == 0:
            return None
        if v < 0:
            raise ValueError("SOLVER_MAX_STEPS must not be negative")
        return v

    @field_validator("solver_initial_orientation")
    @classmethod
    def validate_initial_orientation(cls, v: str) -> str:
        return Orientation.from_name(v).value

    @property
    def initial_orientation(self) -> Orientation:
        return Orientation(self.solver_initial_orientation)

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        if self.debug:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
