from typing import List, Optional
from pathlib import Path
import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, ValidationError, field_validator
from .exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class DatabaseConfig(BaseModel):
    alias: str
    type: str  # dialect identifier: mysql, postgresql, oracle, sqlite, ...
    connection_string: str

    # Tables that get a full column/index load; anything else is shape-only
    tables: List[str] = []
    read_only: bool = True

    # Oracle Specific Options
    oracle_thick_mode: bool = False
    oracle_lib_dir: Optional[str] = None

    def is_configured(self, table: str) -> bool:
        return table in self.tables

class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TABLEMETA_")

    databases: List[DatabaseConfig] = []
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{value}'")
        return level

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                raw_config = yaml.safe_load(f) or {}
            return cls(**raw_config)
        except (ValidationError, yaml.YAMLError, TypeError) as e:
            raise ConfigurationError(f"Invalid configuration format: {e}")

    def get_db_config(self, alias: str) -> DatabaseConfig:
        for db in self.databases:
            if db.alias == alias:
                return db
        raise ConfigurationError(f"Database alias '{alias}' not found in config")
