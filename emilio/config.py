# emilio/config.py
"""
Configuration management for Emilio CLI.
Uses TOML format for configuration files.
"""
import os
import sys
from pathlib import Path
from typing import Optional

# Reader (tomllib for >= 3.11, tomli for < 3.11)
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import BaseModel, Field, ValidationError
from dotenv import load_dotenv

from emilio.constants import CONFIG_FILE, DATABASE_TYPES, OUTPUT_TYPES, PREVIEW_HOST, PREVIEW_PORT
from emilio.utils.logging import get_logger


# --- Configuration Models ---

class ApiConfig(BaseModel):
    """API configuration settings."""
    gemini_api_key: Optional[str] = Field(None, description="Google Gemini API Key")


class UserConfig(BaseModel):
    """User-specific configuration settings."""
    default_frontend: str = Field(OUTPUT_TYPES[0], description="Frontend stack used when none is given")
    default_backend: str = Field(DATABASE_TYPES[0], description="Backend/database used when none is given")
    output_dir: Optional[Path] = Field(None, description="Directory where exported archives are written")
    system_prompt: Optional[str] = Field(None, description="Custom system prompt; None uses the built-in one")


class PreviewConfig(BaseModel):
    """Settings for the local preview server."""
    host: str = Field(PREVIEW_HOST, description="Interface the preview server binds to")
    port: int = Field(PREVIEW_PORT, description="Port the preview server listens on")
    open_browser: bool = Field(True, description="Open the preview in a browser when it starts")


class AppConfig(BaseModel):
    """Application configuration settings."""
    api: ApiConfig = Field(default_factory=ApiConfig, description="API configuration")
    user: UserConfig = Field(default_factory=UserConfig, description="User configuration")
    preview: PreviewConfig = Field(default_factory=PreviewConfig, description="Preview server configuration")
    debug: bool = Field(False, description="Enable debug mode")


# --- Configuration Manager ---

class ConfigManager:
    """Manages the configuration for the Emilio CLI application using TOML."""

    def __init__(self, config_file: Path = CONFIG_FILE):
        self.config_file = Path(config_file)
        self.CONFIG_DIR = self.config_file.parent
        self._config: AppConfig = AppConfig()
        self._logger = get_logger(__name__)
        self._load_environment()

    def _load_environment(self) -> None:
        """Loads API keys from environment variables and .env file."""
        load_dotenv()
        gemini_api_key = os.getenv("GEMINI_API_KEY")
        if gemini_api_key:
            self._config.api.gemini_api_key = gemini_api_key

    def _reset(self) -> None:
        self._config = AppConfig()
        self._load_environment()

    def load_config(self) -> None:
        """Loads configuration from the TOML config file."""
        if not self.config_file.exists():
            self._logger.debug(f"Configuration file not found at '{self.config_file}'. Using defaults.")
            return

        try:
            self._logger.debug(f"Loading configuration from: {self.config_file}")
            with open(self.config_file, "rb") as f:  # TOML requires binary read mode
                config_data = tomllib.load(f)

            if "api" in config_data and isinstance(config_data["api"], dict):
                self._config.api = ApiConfig(**config_data["api"])

            if "user" in config_data and isinstance(config_data["user"], dict):
                self._config.user = UserConfig(**config_data["user"])

            if "preview" in config_data and isinstance(config_data["preview"], dict):
                self._config.preview = PreviewConfig(**config_data["preview"])

            if "debug" in config_data:
                if isinstance(config_data["debug"], bool):
                    self._config.debug = config_data["debug"]
                else:
                    self._logger.warning(
                        f"Invalid type for 'debug' in {self.config_file}. "
                        f"Expected boolean, got {type(config_data['debug'])}. Ignoring."
                    )

            # The environment wins over the file for secrets
            self._load_environment()

        except tomllib.TOMLDecodeError as e:
            self._logger.error(f"Error decoding TOML configuration file ({self.config_file}): {e}")
            self._logger.error("Using default configuration and environment variables.")
            self._reset()
        except ValidationError as e:
            self._logger.error(f"Invalid configuration in {self.config_file}: {e}")
            self._logger.error("Using default configuration and environment variables.")
            self._reset()
        except OSError as e:
            self._logger.error(f"I/O error accessing configuration file: {e}")
            self._logger.error("Using default configuration and environment variables.")
            self._reset()

    def save_config(self) -> Path:
        """Saves the current configuration to the config file (as TOML)."""
        # TOML has no null, so unset values are left out
        config_dict = self._config.model_dump(mode="json", exclude_none=True)

        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "wb") as f:
            tomli_w.dump(config_dict, f)

        self._logger.info(f"Configuration saved to {self.config_file}")
        return self.config_file

    @property
    def config(self) -> AppConfig:
        """Provides access to the current application configuration."""
        return self._config


# --- Global Instance ---

config_manager = ConfigManager()

# Load the configuration from file immediately when this module is imported.
config_manager.load_config()
