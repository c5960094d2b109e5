"""Config settings – Settings base class and the service settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from staff_admin.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class StaffAdminSettings(Settings):
    """Runtime settings, read from ``STAFF_*`` environment variables."""

    _prefix: ClassVar[str] = "STAFF"

    database_url: str = "sqlite+aiosqlite:///./staff_admin.db"
    echo_sql: bool = False
    log_level: str = "INFO"
    default_page_size: int = 10
    max_page_size: int = 100
    csv_bom: bool = False
    create_schema: bool = True

    def _validate(self) -> None:
        if not self.database_url:
            raise InvalidSettingValueError("database_url", self.database_url, "must not be empty")
        if self.default_page_size < 1:
            raise InvalidSettingValueError("default_page_size", self.default_page_size, "must be >= 1")
        if self.max_page_size < self.default_page_size:
            raise InvalidSettingValueError(
                "max_page_size", self.max_page_size, "must be >= default_page_size"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")


__all__ = ["Settings", "StaffAdminSettings"]
