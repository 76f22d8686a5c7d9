"""Application settings and configuration."""

from pathlib import Path
from dataclasses import dataclass, field
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

DEVELOPMENT_ENVIRONMENTS = {"development", "dev", "test"}


@dataclass
class ViewStateConfig:
    """Column-visibility persistence settings."""

    backend: str = field(
        default_factory=lambda: os.getenv("VIEW_STATE_BACKEND", "memory").lower()
    )
    db_path: Path = field(
        default_factory=lambda: Path(
            os.getenv(
                "VIEW_STATE_DB_PATH", str(PROJECT_ROOT / "data" / "view_state.duckdb")
            )
        )
    )

    @property
    def is_persistent(self) -> bool:
        """True when view state survives across sessions."""
        return self.backend == "duckdb"


@dataclass
class ExportConfig:
    """Export paths configuration."""

    exports_path: Path = field(
        default_factory=lambda: Path(
            os.getenv("EXPORTS_PATH", str(PROJECT_ROOT / "data" / "exports"))
        )
    )


@dataclass
class AppConfig:
    """Application configuration settings."""

    name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Field Operations"))
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_to_file: bool = field(
        default_factory=lambda: os.getenv("LOG_TO_FILE", "false").lower() in ("1", "true", "yes")
    )
    environment: str = field(
        default_factory=lambda: os.getenv("APP_ENV", "development").lower()
    )

    @property
    def is_development(self) -> bool:
        """Configuration errors fail fast in development builds."""
        return self.environment in DEVELOPMENT_ENVIRONMENTS


@dataclass
class Config:
    """Main configuration container."""

    app: AppConfig = field(default_factory=AppConfig)
    view_state: ViewStateConfig = field(default_factory=ViewStateConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    def ensure_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        self.export.exports_path.mkdir(parents=True, exist_ok=True)
        if self.view_state.is_persistent:
            self.view_state.db_path.parent.mkdir(parents=True, exist_ok=True)


# Global config instance
config = Config()
