"""Settings-backed implementation of ConfigProvider."""

from pathlib import Path

from rootkeeper.core.settings import Settings, load_settings
from rootkeeper.providers.base import ConfigProvider


class SettingsConfigProvider(ConfigProvider):
    """Answers configuration lookups from the settings file.

    When constructed with a Settings instance that instance is used as is;
    otherwise the settings file is re-read on every lookup so edits made
    while the process is running take effect.

    Args:
        settings: Fixed settings to serve.
        settings_path: Settings file to read when no fixed settings are given.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        settings_path: Path | None = None,
    ) -> None:
        self._settings = settings
        self._settings_path = settings_path

    def _current(self) -> Settings:
        if self._settings is not None:
            return self._settings
        return load_settings(self._settings_path)

    def recycle_bin_path(self) -> str | None:
        return self._current().recycle_bin
