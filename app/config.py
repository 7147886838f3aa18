"""Configuration management using Pydantic BaseSettings with JSON file support."""
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


def flatten_json_config(config: dict[str, Any]) -> dict[str, Any]:
    """Flatten nested JSON config into flat key-value pairs.

    Supports nested structures like:
    {
        "places_api": {"places_api_base_url": "http://localhost:3000"},
        "server": {"server_port": 8080}
    }

    Becomes:
    {"places_api_base_url": "http://localhost:3000", "server_port": 8080}

    Keys starting with "_" (like "_comment") are skipped.
    """
    result = {}

    for key, value in config.items():
        if key.startswith("_"):
            continue

        if isinstance(value, dict):
            result.update(flatten_json_config(value))
        else:
            result[key] = value

    return result


def load_json_config(config_file: Optional[str] = None) -> dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        config_file: Path to JSON config file. If None, checks CONFIG_FILE env var.

    Returns:
        Dictionary of configuration values (flattened), or empty dict if no file found.
    """
    file_path = config_file or os.getenv("CONFIG_FILE")

    if not file_path:
        return {}

    path = Path(file_path)
    if not path.exists():
        logger.warning(f"Config file not found: {file_path}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
            logger.info(f"Loaded configuration from: {file_path}")
            return flatten_json_config(config)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in config file {file_path}: {e}")
        return {}
    except OSError as e:
        logger.error(f"Error reading config file {file_path}: {e}")
        return {}


class Settings(BaseSettings):
    """Application configuration with JSON file and environment variable support.

    Configuration priority (highest to lowest):
    1. Environment variables
    2. JSON config file (specified via CONFIG_FILE env var)
    3. Default values
    """

    # Places data service
    places_api_base_url: str = "http://localhost:3000"
    # None disables the timeout (single attempt, wait for the answer)
    places_api_timeout_seconds: Optional[float] = None

    # Server Configuration
    server_port: int = 8080
    mock_api_port: int = 3000
    log_level: str = "INFO"

    # Project Paths
    project_root: str = ""
    public_path_prefix: str = "public"

    # Page templates (relative to public_path_prefix)
    home_template: str = "index.html"
    detail_template: str = "detalhe.html"

    # Seed files (relative to project_root)
    seed_source_file: str = "resources/places.json"
    seed_output_file: str = "db/db.json"

    # Localized messages
    highlights_error_message: str = (
        "Erro ao carregar destaques. Por favor, tente novamente mais tarde."
    )
    places_error_message: str = (
        "Erro ao carregar lugares. Por favor, tente novamente mais tarde."
    )
    detail_error_message: str = (
        "Erro ao carregar detalhes do lugar. Por favor, tente novamente mais tarde."
    )
    init_error_message: str = (
        "Erro ao inicializar a aplicação. Por favor, tente novamente mais tarde."
    )
    no_reviews_message: str = "Nenhuma avaliação ainda"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    def __init__(self, **kwargs):
        """Initialize settings from JSON file and environment variables.

        Priority: env vars > JSON config > defaults
        """
        # Init kwargs outrank env vars in BaseSettings, so JSON keys that are
        # also set in the environment are left for the env source
        env_keys = {key.upper() for key in os.environ}
        json_config = {
            key: value
            for key, value in load_json_config().items()
            if key.upper() not in env_keys
        }

        merged_kwargs = {**json_config, **kwargs}

        super().__init__(**merged_kwargs)

        if not self.project_root:
            self.project_root = os.getenv("PROJECT_ROOT", os.getcwd())

    @property
    def base_dir(self) -> Path:
        """Get the project root directory as a Path object."""
        return Path(self.project_root)

    @property
    def public_dir(self) -> Path:
        """Directory holding the page templates and static assets."""
        return self.base_dir / self.public_path_prefix

    def get_public_path(self, public_file: str) -> Path:
        """Get the full path to a file under the public directory."""
        return self.public_dir / public_file

    def get_resource_path(self, resource_file: str) -> Path:
        """Get the full path to a file relative to the project root."""
        return self.base_dir / resource_file
