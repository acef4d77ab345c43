"""Configuration parsing and validation for shippy."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Protocol, Union

import yaml

from .errors import AuthenticationError, ConfigurationError

DEFAULT_CONFIG_FILE = "shippy.yml"
DEFAULT_TIMEOUT_SECONDS = 30.0


class TokenSource(Protocol):
    """Anything that can produce the GitLab API token on demand."""

    def resolve(self) -> str:
        ...


@dataclass(frozen=True)
class LiteralToken:
    """A token written directly into the config file."""

    value: str

    def resolve(self) -> str:
        return self.value


@dataclass(frozen=True)
class EnvironmentToken:
    """A token read from an environment variable when it is needed."""

    variable: str

    def resolve(self) -> str:
        """Read the token from the environment.

        Raises:
            AuthenticationError: If the variable is unset or blank.
        """
        token = os.getenv(self.variable, "").strip()
        if not token:
            raise AuthenticationError(
                "Missing required GitLab API token. "
                f"Set the '{self.variable}' environment variable before running shippy."
            )
        return token


@dataclass(frozen=True)
class Config:
    """Validated runtime settings for the GitLab project."""

    base_url: str
    project_id: int
    api_token: TokenSource
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def _token_source(value: Any, path: Path) -> TokenSource:
    if isinstance(value, str) and value.strip():
        return LiteralToken(value.strip())
    if isinstance(value, dict) and set(value) == {"env"}:
        variable = value["env"]
        if isinstance(variable, str) and variable.strip():
            return EnvironmentToken(variable.strip())
    raise ConfigurationError(
        f"Invalid value for 'api_token' in {path}: expected a token string "
        "or a mapping like '{env: GITLAB_API_TOKEN}'."
    )


def parse_config(data: Dict[str, Any], path: Path) -> Config:
    """Validate a decoded config mapping.

    Raises:
        ConfigurationError: If a required key is missing or has an invalid value.
    """
    for key in ("base_url", "project_id", "api_token"):
        if key not in data:
            raise ConfigurationError(f"Missing required key '{key}' in {path}.")

    base_url = data["base_url"]
    if not isinstance(base_url, str) or not base_url.strip():
        raise ConfigurationError(f"Invalid value for 'base_url' in {path}: expected a URL.")

    project_id = data["project_id"]
    if isinstance(project_id, bool) or not isinstance(project_id, int) or project_id <= 0:
        raise ConfigurationError(
            f"Invalid value for 'project_id' in {path}: expected an integer greater than 0."
        )

    timeout_seconds = data.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)
    if (
        isinstance(timeout_seconds, bool)
        or not isinstance(timeout_seconds, (int, float))
        or timeout_seconds <= 0
    ):
        raise ConfigurationError(
            f"Invalid value for 'timeout_seconds' in {path}: expected a number greater than 0."
        )

    return Config(
        base_url=base_url.strip().rstrip("/"),
        project_id=project_id,
        api_token=_token_source(data["api_token"], path),
        timeout_seconds=float(timeout_seconds),
    )


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_FILE) -> Config:
    """Load and validate the YAML config file at ``path``.

    Example file::

        base_url: https://gitlab.com
        project_id: 15148894
        api_token:
          env: GITLAB_API_TOKEN

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML, or
            does not contain a valid configuration.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except OSError as exc:
        raise ConfigurationError(f"Could not open config file {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Could not parse config file {path}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping of settings.")

    return parse_config(data, path)
