"""Configuration for the entity generator."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from .exceptions import ConfigurationError

ENV_PREFIX = "ENTITY_GEN_"


class ExitCodesConfig(BaseModel):
    """Configuration for exit codes."""

    success: int = 0
    error_file_not_found: int = 1
    error_invalid_workbook: int = 2
    error_write_failed: int = 3
    error_validation_failed: int = 4
    error_unexpected: int = 5


class Config(BaseSettings):
    """Main configuration class for the entity generator."""

    project_root: Path = Field(
        default=Path("."),
        description="Project root under which entity source files are written",
    )
    json_indent: int = Field(
        default=2, ge=0, description="Indentation used for the JSON export"
    )

    exit_codes: ExitCodesConfig = Field(default_factory=ExitCodesConfig)

    model_config = {
        "env_prefix": ENV_PREFIX,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def __init__(self, **data):
        """Initialize config, reporting bad environment values as ConfigurationError."""
        try:
            super().__init__(**data)
        except ValidationError as e:
            error = e.errors()[0]
            field_name = error["loc"][0] if error["loc"] else "unknown"
            raise ConfigurationError(
                variable_name=f"{ENV_PREFIX}{str(field_name).upper()}",
            ) from e


# Populate os.environ from .env (if present) before reading settings.
load_dotenv()
config = Config()
