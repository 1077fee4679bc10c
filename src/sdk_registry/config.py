# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Application Configuration Loader

Single responsibility: Load registries and SDK repositories from TOML

Config file priority:
1. Path given on the command line
2. SDK_REGISTRY_CONFIG_PATH environment variable
3. sdkregistry.toml in the current directory
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .client import build_request_url
from .errors import ConfigurationError, NotFoundError
from .models import Credentials

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "SDK_REGISTRY_CONFIG_PATH"
DEFAULT_CONFIG_FILE = "sdkregistry.toml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")

# tomllib wording for a repeated key or table
_DUPLICATE_MARKERS = ("cannot overwrite", "cannot declare")


class GeneralConfig(BaseModel):
    """[general] section"""
    log_level: str = "INFO"
    log_format: str = "text"
    log_path: str = ""
    patterns_file: str = ""
    http_timeout: float = 30.0

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return v

    @field_validator("http_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout must be positive")
        return v


class RegistryConfig(BaseModel):
    """[registries.<name>] section"""
    type: str = "nexus"
    api_url: str
    username: str = ""
    password: str = Field(default="", repr=False)

    @property
    def credentials(self) -> Optional[Credentials]:
        """Credentials when both username and password are set"""
        creds = Credentials(self.username, self.password)
        return creds if creds.is_complete else None


class SDKTypeConfig(BaseModel):
    """[sdk_types.<name>] section"""
    type: str
    install_dir: str = ""


class SDKRepository(BaseModel):
    """[sdk_repositories.<name>] section: one distribution"""
    type: str
    registry: str
    repository: str = ""
    path: str = ""


class AppConfig(BaseModel):
    """Complete application configuration"""
    general: GeneralConfig = Field(default_factory=GeneralConfig)
    registries: Dict[str, RegistryConfig] = Field(default_factory=dict)
    sdk_types: Dict[str, SDKTypeConfig] = Field(default_factory=dict)
    sdk_repositories: Dict[str, SDKRepository] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_registry_references(self) -> "AppConfig":
        for name, repo in self.sdk_repositories.items():
            if repo.registry not in self.registries:
                raise ValueError(
                    f"sdk_repositories.{name} references unknown registry '{repo.registry}'"
                )
        return self

    def sdk_type_names(self) -> List[str]:
        return sorted(self.sdk_types)

    def distributions(self, sdk_type: str) -> List[str]:
        """Names of the distributions configured for *sdk_type*, sorted."""
        return sorted(
            name for name, repo in self.sdk_repositories.items()
            if repo.type == sdk_type
        )

    def get_repository(self, distribution: str) -> SDKRepository:
        if distribution not in self.sdk_repositories:
            raise NotFoundError("Distribution", distribution)
        return self.sdk_repositories[distribution]

    def get_registry(self, name: str) -> RegistryConfig:
        if name not in self.registries:
            raise NotFoundError("Registry", name)
        return self.registries[name]

    def request_url(self, distribution: str) -> str:
        """Listing URL for a distribution's repository"""
        repo = self.get_repository(distribution)
        return build_request_url(self.get_registry(repo.registry).api_url, repo.repository)


def get_config_path(cli_path: Optional[str] = None) -> Path:
    """
    Resolve the configuration file path.

    Args:
        cli_path: Path passed on the command line

    Returns:
        Path to the configuration file
    """
    if cli_path:
        return Path(cli_path)
    env_path = os.getenv(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)
    return Path(DEFAULT_CONFIG_FILE)


class ConfigLoader:
    """Loads AppConfig from a TOML file"""

    def __init__(self, config_path: Path):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to the TOML configuration file
        """
        self.config_path = Path(config_path)

    def load(self) -> AppConfig:
        """
        Load and validate the configuration.

        Returns:
            AppConfig

        Raises:
            ConfigurationError: If the file is missing, unparseable or invalid
        """
        logger.debug(f"Loading configuration from: {self.config_path}")

        try:
            with open(self.config_path, "rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read config file: {e}",
                config_file=str(self.config_path)
            ) from e
        except tomllib.TOMLDecodeError as e:
            message = f"Failed to parse config file '{self.config_path}': {e}"
            lowered = str(e).lower()
            if any(marker in lowered for marker in _DUPLICATE_MARKERS):
                message += (
                    ". Hint: each registry and repository name must be unique"
                )
            raise ConfigurationError(message, config_file=str(self.config_path)) from e

        try:
            config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {self.config_path}: {e}",
                config_file=str(self.config_path),
                details={"errors": e.errors(include_url=False, include_context=False)}
            ) from e

        logger.debug(
            f"Loaded {len(config.registries)} registries and "
            f"{len(config.sdk_repositories)} SDK repositories"
        )
        return config


def load_config(cli_path: Optional[str] = None) -> AppConfig:
    """Load the configuration from the resolved path."""
    return ConfigLoader(get_config_path(cli_path)).load()
