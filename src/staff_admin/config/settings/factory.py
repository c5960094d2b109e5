"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from staff_admin.config.settings.base import Settings, StaffAdminSettings
from staff_admin.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader
from staff_admin.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Merge values read by several loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; later loaders override earlier ones for
    overlapping fields.  *overrides* (if provided) take the highest priority.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[EnvSettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        MissingRequiredSettingError
            When a required field (no default) is absent after all sources
            have been merged.
        InvalidSettingValueError
            When a value is present but cannot be coerced or fails validation.
        ConfigError
            On any other construction failure.
        """
        merged: dict[str, Any] = {}
        for loader in loaders or []:
            merged.update(loader.read(settings_cls))

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name in merged:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


def load_settings(env_file: str | None = ".env", **overrides: Any) -> StaffAdminSettings:
    """Settings from ``.env`` (when present) and the environment, plus overrides."""
    loaders: list[EnvSettingsLoader] = [DotenvSettingsLoader(env_file)] if env_file else [EnvSettingsLoader()]
    return SettingsFactory.create(StaffAdminSettings, loaders, overrides or None)


__all__ = ["SettingsFactory", "load_settings"]
