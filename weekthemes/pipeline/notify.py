#!/usr/bin/env python3
"""
notify.py
---------
Schedule the weekly push notification through OneSignal.

The theme is chosen with the scheduler's UTC date; delivery at the
configured local time of each subscriber is left to the provider
(delayed_option="timezone").

Programmatic API:
    from weekthemes.pipeline.notify import notify_this_week
    notification_id = notify_this_week(calendar, settings, utc_today())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from typing import Any, Dict, Optional

# --- Third party imports ---
import requests

# --- Local imports ---
from weekthemes.core.config import Settings
from weekthemes.core.exceptions import NotifyError
from weekthemes.core.logging_manager import ThemesLogger, safe_logger
from weekthemes.dataclasses.theme_record import ThemeRecord
from weekthemes.pipeline.lookup import ThemeCalendar
from weekthemes.utils.weeks import week_key


ONESIGNAL_URL = "https://onesignal.com/api/v1/notifications"
FALLBACK_MESSAGE = "It’s #MurderEveryMonday! Check today’s theme."


def compose_message(record: Optional[ThemeRecord]) -> str:
    """Notification body for this week's record, or the generic fallback."""
    if record is None:
        return FALLBACK_MESSAGE
    return f"New #MurderEveryMonday theme: {record.theme}"


def build_payload(message: str, settings: Settings) -> Dict[str, Any]:
    """OneSignal create-notification body."""
    return {
        "app_id": settings.onesignal_app_id,
        "included_segments": [settings.segment],
        "contents": {"en": message},
        "headings": {"en": settings.heading},
        "url": settings.site_url,
        "delayed_option": "timezone",
        "delivery_time_of_day": settings.delivery_time,
    }


def send_push(
    payload: Dict[str, Any],
    api_key: str,
    timeout: float = 30.0,
) -> str:
    """
    POST the notification.

    Returns:
        Notification id assigned by the provider

    Raises:
        NotifyError: On transport errors, a non-2xx status or an error body
    """
    try:
        response = requests.post(
            ONESIGNAL_URL,
            json=payload,
            headers={"Authorization": f"Basic {api_key}"},
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise NotifyError(f"OneSignal request failed: {e}") from e

    try:
        body = response.json()
    except ValueError:
        body = {"raw": response.text}

    if not response.ok or body.get("errors"):
        raise NotifyError(f"OneSignal error {response.status_code}: {body}")
    return str(body.get("id", ""))


def notify_this_week(
    calendar: ThemeCalendar,
    settings: Settings,
    today: date,
    dry_run: bool = False,
    logger: Optional[ThemesLogger] = None,
) -> Dict[str, Any]:
    """
    Look up the week containing `today` and schedule its notification.

    Args:
        calendar: Loaded record set
        settings: Resolved settings; credentials are required unless dry_run
        today: Scheduler's calendar date (utc_today())
        dry_run: Build the payload without sending it
        logger: Optional logger

    Returns:
        Dict with week, record, payload and (unless dry_run) notification id

    Raises:
        ConfigError: If push credentials are missing
        NotifyError: If the provider rejects the request
    """
    log = safe_logger(logger)
    key = week_key(today)
    record = calendar.find_by_iso(key)
    if record is None:
        log.log_warning("No theme for this week", {"week": key})

    payload = build_payload(compose_message(record), settings)
    outcome: Dict[str, Any] = {"week": key, "record": record, "payload": payload}

    if dry_run:
        return outcome

    settings.require_push_credentials()
    outcome["id"] = send_push(payload, settings.onesignal_api_key, settings.timeout)
    log.log_operation("notify", {"week": key, "id": outcome["id"]})
    return outcome
