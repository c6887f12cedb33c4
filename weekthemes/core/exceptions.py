#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the weekthemes project.

Exception Hierarchy:
    Exception (built-in)
    └── WeekThemesError - Base for all project errors
        ├── FetchError - Source page could not be obtained or read
        ├── ExportError - Record set read/write failures
        ├── ValidationError - Malformed record data
        ├── ConfigError - Missing or invalid configuration
        └── NotifyError - Push provider rejected a notification

Line-level parse problems are never raised; the parser reports them
as skip reasons instead.

Usage:
    from weekthemes.core.exceptions import FetchError

    try:
        html = fetch_html(url)
    except FetchError as e:
        logger.log_error(e, {"url": url})
"""


class WeekThemesError(Exception):
    """
    Base exception for weekthemes errors.

    Catch this to handle any project error, or catch specific
    subclasses for more granular error handling.
    """

    pass


class FetchError(WeekThemesError):
    """
    Exception for failures obtaining the source text.

    Raised when the theme list cannot be ingested at all:
    - Network errors or non-2xx responses
    - Page without a recognisable article body

    This class is fatal to an ingestion run.

    Examples:
        >>> raise FetchError("Fetch failed 503")
        >>> raise FetchError("No .entry-content block found in page")
    """

    pass


class ExportError(WeekThemesError):
    """
    Exception for record set persistence failures.

    Examples:
        >>> raise ExportError("Cannot write public/themes.json: permission denied")
        >>> raise ExportError("themes.json is not a JSON array")
    """

    pass


class ValidationError(WeekThemesError):
    """
    Exception for malformed record data.

    Examples:
        >>> raise ValidationError("Missing required field: 'date'")
        >>> raise ValidationError("Invalid date format: expected YYYY-MM-DD")
    """

    pass


class ConfigError(WeekThemesError):
    """
    Exception for missing or invalid configuration.

    Examples:
        >>> raise ConfigError("Missing ONESIGNAL_APP_ID or ONESIGNAL_REST_API_KEY")
        >>> raise ConfigError("Unknown configuration key: 'sorce_url'")
    """

    pass


class NotifyError(WeekThemesError):
    """Exception for push notification requests rejected by the provider."""

    pass
