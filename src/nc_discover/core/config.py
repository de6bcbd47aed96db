"""
Configuration management for nc-discover.

Handles loading configuration from environment variables, .env files,
YAML config files, and CLI arguments with proper precedence.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from nc_discover.constants import DEFAULT_NETCONF_PORT, Timeouts
from nc_discover.core.exceptions import ConfigFileNotFoundError, ConfigurationError

# =============================================================================
# NETCONF Credentials
# =============================================================================


class NetconfCredentials(BaseModel):
    """
    NETCONF connection credentials.

    Attributes:
        username: NETCONF username
        password: NETCONF password
        port: NETCONF port (default: 830)
        command_timeout: Per-RPC timeout in seconds
        session_timeout: Upper bound on the session lifetime in seconds
        hostkey_verify: Whether to verify SSH host keys
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    username: Annotated[str, Field(min_length=1)]
    password: SecretStr
    port: Annotated[int, Field(default=DEFAULT_NETCONF_PORT, ge=1, le=65535)]
    command_timeout: Annotated[int, Field(default=Timeouts.COMMAND, ge=1, le=Timeouts.SESSION)]
    session_timeout: Annotated[
        int, Field(default=Timeouts.SESSION, ge=1, le=Timeouts.CONNECT_MAX)
    ]
    hostkey_verify: bool = False


# =============================================================================
# Main Settings
# =============================================================================


class DiscoverySettings(BaseSettings):
    """
    Main settings for nc-discover, loaded from environment and config files.

    Environment variables (prefix NCD_):
        NCD_DEFAULT_FAMILY, NCD_PORT
        NCD_COMMAND_TIMEOUT, NCD_SESSION_TIMEOUT, NCD_HOSTKEY_VERIFY
        NCD_DEBUG, NCD_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="NCD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_family: str = "nokia"
    port: Annotated[int, Field(default=DEFAULT_NETCONF_PORT, ge=1, le=65535)]
    command_timeout: Annotated[int, Field(default=Timeouts.COMMAND, ge=1, le=Timeouts.SESSION)]
    session_timeout: Annotated[
        int, Field(default=Timeouts.SESSION, ge=1, le=Timeouts.CONNECT_MAX)
    ]
    hostkey_verify: bool = False

    # Logging
    debug: bool = False
    log_level: Annotated[str, Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")]

    def credentials(
        self,
        username: str,
        password: str,
        port: int | None = None,
        command_timeout: int | None = None,
        session_timeout: int | None = None,
    ) -> NetconfCredentials:
        """Build credentials, falling back to these settings for unset values."""
        return NetconfCredentials(
            username=username,
            password=SecretStr(password),
            port=port if port is not None else self.port,
            command_timeout=command_timeout if command_timeout is not None else self.command_timeout,
            session_timeout=session_timeout if session_timeout is not None else self.session_timeout,
            hostkey_verify=self.hostkey_verify,
        )


# =============================================================================
# Singleton Settings Access
# =============================================================================

_settings: DiscoverySettings | None = None


def get_settings() -> DiscoverySettings:
    """
    Get the global settings instance.

    Creates a new instance on first call, returns cached instance thereafter.
    """
    global _settings
    if _settings is None:
        _settings = DiscoverySettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None


def load_settings(config_file: Path) -> DiscoverySettings:
    """
    Load settings from a YAML file on top of the environment.

    Values in the file take precedence over environment variables.
    The result replaces the global settings instance.

    Raises:
        ConfigFileNotFoundError: If the file does not exist
        ConfigurationError: If the file is not a valid settings mapping
    """
    global _settings

    if not config_file.exists():
        raise ConfigFileNotFoundError(str(config_file))

    try:
        with open(config_file) as f:
            data: Any = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file must contain a mapping, got {type(data).__name__}",
            context={"path": str(config_file)},
        )

    try:
        _settings = DiscoverySettings(**data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid settings in {config_file}: {e}", context={"path": str(config_file)}
        ) from e
    return _settings
