"""Configuration management for the Field Analysis service"""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

from .analysis.config import GroupingConfig, ImportanceConfig
from .semantic.config import SemanticConfig

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Service Configuration
    SERVICE_HOST: str = "0.0.0.0"
    SERVICE_PORT: int = 8000
    SERVICE_NAME: str = "Field Analysis Service"

    # Optional JSON file with weight/threshold overrides
    ANALYSIS_CONFIG_FILE: Optional[str] = None

    # Logging Configuration
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


@dataclass
class AnalysisConfig:
    """All static tuning data for the classification core"""
    semantic: SemanticConfig = field(default_factory=SemanticConfig)
    importance: ImportanceConfig = field(default_factory=ImportanceConfig)
    grouping: GroupingConfig = field(default_factory=GroupingConfig)

    @classmethod
    def from_env(cls) -> 'AnalysisConfig':
        """Create configuration from environment variables"""
        return cls(
            semantic=SemanticConfig.from_env(),
            importance=ImportanceConfig.from_env(),
            grouping=GroupingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, path: str) -> 'AnalysisConfig':
        """
        Load overrides from a JSON file

        Top-level keys 'semantic', 'importance' and 'grouping' are optional;
        anything missing keeps its default. Invalid values raise ValueError.
        """
        with open(Path(path), 'r', encoding='utf-8') as f:
            data = json.load(f)

        logger.info(f"Loaded analysis config overrides from {path}")
        return cls(
            semantic=SemanticConfig.from_dict(data.get('semantic', {})),
            importance=ImportanceConfig.from_dict(data.get('importance', {})),
            grouping=GroupingConfig.from_dict(data.get('grouping', {})),
        )

    @classmethod
    def load(cls, settings: Optional[Settings] = None) -> 'AnalysisConfig':
        """File overrides when configured, environment otherwise"""
        settings = settings or Settings()
        if settings.ANALYSIS_CONFIG_FILE:
            return cls.from_file(settings.ANALYSIS_CONFIG_FILE)
        return cls.from_env()


# Global settings instance
settings = Settings()
