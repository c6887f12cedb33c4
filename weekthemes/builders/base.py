#!/usr/bin/env python3
"""
base.py
-------------------
Base classes for builders in the weekthemes project.

Provides:
- BuilderStats: Abstract base class for tracking build statistics
- BaseBuilder: Abstract base class for builder implementations
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from weekthemes.core.logging_manager import ThemesLogger, safe_logger


class BuilderStats(ABC):
    """
    Abstract base class for tracking builder statistics.

    Attributes:
        start_time: Timestamp when processing started
    """

    def __init__(self) -> None:
        self.start_time: datetime = datetime.now()

    def duration(self) -> float:
        """Elapsed time in seconds since initialization."""
        return (datetime.now() - self.start_time).total_seconds()

    @abstractmethod
    def summary(self) -> str:
        """Human-readable summary of the build."""
        pass


class BaseBuilder(ABC):
    """
    Abstract base class for builder implementations.

    Attributes:
        logger: Optional logger for operation tracking
    """

    def __init__(self, logger: Optional[ThemesLogger] = None):
        self.logger = logger

    @abstractmethod
    def build(self) -> BuilderStats:
        """Execute the build process and return its statistics."""
        pass

    def _log_operation(self, operation: str, details: Optional[dict] = None) -> None:
        safe_logger(self.logger).log_operation(operation, details or {})

    def _log_debug(self, message: str, details: Optional[dict] = None) -> None:
        safe_logger(self.logger).log_debug(message, details)

    def _log_warning(self, message: str) -> None:
        safe_logger(self.logger).log_warning(message)
