#!/usr/bin/env python3
"""
config.py
--------------------
Runtime settings for ingestion and notification.

Settings come from three layers, later layers winning:
    1. Dataclass defaults
    2. Optional YAML file (weekthemes.yaml at the project root by default)
    3. Environment variables

Environment variables:
    THEMES_SOURCE_URL       Theme list page to scrape
    THEMES_SITE_URL         Site opened when a notification is tapped
    ONESIGNAL_APP_ID        Push provider application id
    ONESIGNAL_REST_API_KEY  Push provider REST key

Usage:
    from weekthemes.core.config import load_settings

    settings = load_settings()
    settings.require_push_credentials()
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from weekthemes.core.exceptions import ConfigError
from weekthemes.core.paths import CONFIG_PATH, THEMES_JSON


DEFAULT_SOURCE_URL = (
    "https://crossexaminingcrime.wordpress.com/murdereverymonday-theme-list/"
)

ENV_OVERRIDES = {
    "THEMES_SOURCE_URL": "source_url",
    "THEMES_SITE_URL": "site_url",
    "ONESIGNAL_APP_ID": "onesignal_app_id",
    "ONESIGNAL_REST_API_KEY": "onesignal_api_key",
}


@dataclass(frozen=True)
class Settings:
    """
    Settings for the build and notify commands.

    Attributes:
        source_url: Page holding the theme list
        output_path: Where the canonical record set is written
        user_agent: User-Agent header sent when fetching the source
        timeout: HTTP timeout in seconds
        debug_lines: Raw lines echoed by the build trace mode
        onesignal_app_id: Push provider application id
        onesignal_api_key: Push provider REST key
        site_url: URL opened from the notification
        segment: Subscriber segment that receives the push
        delivery_time: Local delivery time passed to the provider
        heading: Notification title
    """

    source_url: str = DEFAULT_SOURCE_URL
    output_path: Path = THEMES_JSON
    user_agent: str = "weekthemes-bot"
    timeout: float = 30.0
    debug_lines: int = 30
    onesignal_app_id: Optional[str] = None
    onesignal_api_key: Optional[str] = None
    site_url: str = "https://example.org/"
    segment: str = "Subscribed Users"
    delivery_time: str = "9:00AM"
    heading: str = "#MurderEveryMonday"

    def require_push_credentials(self) -> None:
        """Raise ConfigError unless both push credentials are set."""
        if not self.onesignal_app_id or not self.onesignal_api_key:
            raise ConfigError("Missing ONESIGNAL_APP_ID or ONESIGNAL_REST_API_KEY")


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def _coerce(values: Dict[str, Any]) -> Dict[str, Any]:
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

    out = dict(values)
    if "output_path" in out:
        out["output_path"] = Path(out["output_path"])
    for key, cast in (("timeout", float), ("debug_lines", int)):
        if key in out:
            try:
                out[key] = cast(out[key])
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid value for {key}: {out[key]!r}") from e
    return out


def load_settings(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Build Settings from defaults, an optional YAML file and the environment.

    Args:
        path: Config file; defaults to CONFIG_PATH, which may be absent.
            An explicit path that does not exist is an error.
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Resolved Settings

    Raises:
        ConfigError: On unreadable files, unknown keys or bad values
    """
    environ = os.environ if environ is None else environ

    values: Dict[str, Any] = {}
    if path is not None:
        if not Path(path).is_file():
            raise ConfigError(f"Config file not found: {path}")
        values.update(_read_yaml(Path(path)))
    elif CONFIG_PATH.is_file():
        values.update(_read_yaml(CONFIG_PATH))

    for env_name, field_name in ENV_OVERRIDES.items():
        if environ.get(env_name):
            values[field_name] = environ[env_name]

    return replace(Settings(), **_coerce(values))
