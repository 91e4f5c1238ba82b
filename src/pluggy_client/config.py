"""
Configuration management.

All configuration keys and defaults live here. Values come from an
optional YAML file and are overridden by environment variables, so the
API key never has to be written to disk.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.pluggy.ai"


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class PluggyConfig:
    """API connection settings.

    api_key: client API key (or connect token) sent as X-API-KEY
    base_url: API root, override to target a staging deployment
    webhook_url: default webhook for items created from the CLI
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: int = 30
    webhook_url: str | None = None


@dataclass
class SandboxConfig:
    """Sandbox walkthrough settings used by the `sync` and `credit-cards` commands."""

    # Pluggy Bank sandbox connector and its test credentials
    connector_id: int = 0
    user: str = "user-ok"
    password: str = "password-ok"
    # Value answered to MFA prompts
    mfa_value: str = "123456"
    # Item polling
    poll_interval_seconds: float = 3.0
    max_polls: int = 100

    def credentials(self, user: str | None = None) -> dict[str, str]:
        return {"user": user or self.user, "password": self.password}


@dataclass
class Config:
    """Application configuration."""

    pluggy: PluggyConfig
    sandbox: SandboxConfig = field(default_factory=SandboxConfig)

    def validate(self) -> list[str]:
        """Validate configuration completeness and consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors: list[str] = []

        if not self.pluggy.api_key:
            errors.append("pluggy.api_key is required (or set PLUGGY_API_KEY)")
        if not self.pluggy.base_url.startswith(("http://", "https://")):
            errors.append("pluggy.base_url must be an http(s) URL")
        if self.pluggy.timeout <= 0:
            errors.append("pluggy.timeout must be positive")
        if self.sandbox.poll_interval_seconds <= 0:
            errors.append("sandbox.poll_interval_seconds must be positive")
        if self.sandbox.max_polls <= 0:
            errors.append("sandbox.max_polls must be positive")

        return errors


def load_config(config_path: Path) -> Config:
    """
    Load configuration from YAML file.

    Environment variables override config values:
    - PLUGGY_API_KEY
    - PLUGGY_API_URL
    - PLUGGY_TIMEOUT (request timeout in seconds)
    - PLUGGY_WEBHOOK_URL
    """
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.debug("Config file %s not found, using defaults and environment", config_path)
        data = {}

    pluggy_data = data.get("pluggy", {}) or {}
    timeout = pluggy_data.get("timeout", 30)
    timeout_env = os.environ.get("PLUGGY_TIMEOUT", "")
    if timeout_env:
        try:
            timeout = int(timeout_env)
        except ValueError:
            logger.warning("Ignoring invalid PLUGGY_TIMEOUT: %s", timeout_env)

    pluggy = PluggyConfig(
        api_key=os.environ.get("PLUGGY_API_KEY", pluggy_data.get("api_key", "")),
        # An empty PLUGGY_API_URL means "use the default"
        base_url=os.environ.get("PLUGGY_API_URL")
        or pluggy_data.get("base_url")
        or DEFAULT_BASE_URL,
        timeout=timeout,
        webhook_url=os.environ.get("PLUGGY_WEBHOOK_URL", pluggy_data.get("webhook_url")),
    )

    sandbox_data = data.get("sandbox", {}) or {}
    sandbox = SandboxConfig(
        connector_id=sandbox_data.get("connector_id", 0),
        user=sandbox_data.get("user", "user-ok"),
        password=sandbox_data.get("password", "password-ok"),
        mfa_value=str(sandbox_data.get("mfa_value", "123456")),
        poll_interval_seconds=sandbox_data.get("poll_interval_seconds", 3.0),
        max_polls=sandbox_data.get("max_polls", 100),
    )

    return Config(pluggy=pluggy, sandbox=sandbox)


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    default_config = """# Pluggy API client configuration
#
# Environment variables take precedence over this file:
# PLUGGY_API_KEY, PLUGGY_API_URL, PLUGGY_TIMEOUT, PLUGGY_WEBHOOK_URL

pluggy:
  api_key: ""                         # Prefer PLUGGY_API_KEY over storing it here
  base_url: "https://api.pluggy.ai"
  timeout: 30                         # Request timeout (seconds)
  webhook_url: null                   # Item notifications webhook

# Sandbox walkthrough (sync / credit-cards commands)
sandbox:
  connector_id: 0                     # Pluggy Bank sandbox connector
  user: "user-ok"
  password: "password-ok"
  mfa_value: "123456"                 # Answer to MFA prompts (use user "user-mfa")
  poll_interval_seconds: 3
  max_polls: 100
"""

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        f.write(default_config)
