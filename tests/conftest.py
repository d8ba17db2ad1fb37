"""Pytest configuration for GT Theme tests.

Qt runs offscreen; ThemeService gets fake storage and platform sources
so tests never touch the real user settings or the OS color scheme.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QSettings

from gt_theme.core.exceptions import ThemeStorageError
from gt_theme.themes import Brightness, ThemeModeStore, ThemeService, reset_theme_service


# ============================================================================
# Fakes
# ============================================================================


class FakeThemeModeStore:
    """In-memory stand-in for ThemeModeStore"""

    def __init__(self, saved_mode=None, fail_load=False, fail_save=False):
        self.saved_mode = saved_mode
        self.fail_load = fail_load
        self.fail_save = fail_save
        self.load_calls = 0
        self.saves = []

    def load(self):
        self.load_calls += 1
        if self.fail_load:
            raise ThemeStorageError("Could not read theme mode", "AccessError")
        return self.saved_mode

    def save(self, mode):
        if self.fail_save:
            raise ThemeStorageError("Could not write theme mode", "AccessError")
        self.saves.append(mode)
        self.saved_mode = mode

    def clear(self):
        self.saved_mode = None


class FakePlatformBrightnessSource:
    """Platform source whose brightness the test controls"""

    def __init__(self, brightness=Brightness.LIGHT):
        self.brightness = brightness
        self.observers = []

    def current_brightness(self):
        return self.brightness

    def add_observer(self, callback):
        self.observers.append(callback)
        return True

    def remove_observer(self, callback):
        if callback in self.observers:
            self.observers.remove(callback)

    def change_brightness(self, brightness):
        """Simulate the OS switching color scheme"""
        self.brightness = brightness
        for callback in list(self.observers):
            callback()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def fake_store():
    return FakeThemeModeStore()


@pytest.fixture
def fake_platform():
    return FakePlatformBrightnessSource()


@pytest.fixture
def theme_service(qapp, fake_store, fake_platform):
    """ThemeService wired to fakes; disposed after the test"""
    service = ThemeService(store=fake_store, platform=fake_platform)
    yield service
    service.dispose()


@pytest.fixture
def ini_settings(tmp_path):
    """QSettings backed by a throwaway ini file"""
    return QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def settings_store(ini_settings):
    return ThemeModeStore(settings=ini_settings)


@pytest.fixture
def reset_singleton():
    """Forget the global ThemeService before and after the test"""
    reset_theme_service()
    yield
    reset_theme_service()
