"""Tests for ThemeService state, notifications, persistence and lifecycle."""

import logging

import pytest

from gt_theme.themes import (
    Brightness,
    CupertinoTheme,
    DesignSystem,
    MaterialTheme,
    ThemeMode,
    ThemeService,
    get_theme_service,
)

from .conftest import FakePlatformBrightnessSource, FakeThemeModeStore


def record(notifier):
    """Collect every value published on notifier"""
    events = []
    notifier.subscribe(events.append)
    return events


class TestSingleton:
    """Tests for the global service accessor."""

    def test_get_theme_service_returns_same_instance(self, qapp, reset_singleton):
        first = get_theme_service()
        second = get_theme_service()
        assert first is second
        assert isinstance(first, ThemeService)

    def test_reset_disposes_previous_instance(self, qapp, reset_singleton):
        from gt_theme.themes import reset_theme_service

        first = get_theme_service()
        reset_theme_service()
        assert first.is_disposed
        assert get_theme_service() is not first


class TestDefaults:
    """Tests for a freshly constructed service."""

    def test_default_theme_mode_is_system(self, theme_service):
        assert theme_service.current_theme_mode is ThemeMode.SYSTEM
        assert theme_service.theme_mode_notifier.value is ThemeMode.SYSTEM

    def test_default_system_brightness_is_light_before_listening(self, qapp):
        platform = FakePlatformBrightnessSource(Brightness.DARK)
        service = ThemeService(store=FakeThemeModeStore(), platform=platform)
        try:
            assert service.current_system_brightness is Brightness.LIGHT
            assert service.effective_brightness is Brightness.LIGHT
        finally:
            service.dispose()

    def test_set_theme_mode_works_before_listening(self, theme_service):
        theme_service.set_theme_mode(ThemeMode.DARK)
        assert theme_service.current_theme_mode is ThemeMode.DARK
        assert not theme_service.is_listening

    def test_repr_is_readable(self, theme_service):
        text = repr(theme_service)
        assert "ThemeService" in text
        assert "mode: system" in text
        assert "effective: light" in text


class TestSetThemeMode:
    """Tests for set_theme_mode()."""

    @pytest.mark.parametrize("mode", list(ThemeMode))
    def test_read_after_set_returns_mode(self, qapp, mode):
        service = ThemeService(store=FakeThemeModeStore(), platform=FakePlatformBrightnessSource())
        try:
            # Start from a different mode so every value is a real transition
            service.set_theme_mode(ThemeMode.LIGHT if mode is not ThemeMode.LIGHT else ThemeMode.DARK)
            service.set_theme_mode(mode)
            assert service.current_theme_mode is mode
            assert service.theme_mode_notifier.value is mode
        finally:
            service.dispose()

    def test_accepts_enum_value_strings(self, theme_service):
        theme_service.set_theme_mode("dark")
        assert theme_service.current_theme_mode is ThemeMode.DARK

    def test_rejects_unknown_mode(self, theme_service):
        with pytest.raises(ValueError):
            theme_service.set_theme_mode("sepia")

    def test_notifies_once_per_change(self, theme_service):
        events = record(theme_service.theme_mode_notifier)

        theme_service.set_theme_mode(ThemeMode.DARK)
        theme_service.set_theme_mode(ThemeMode.DARK)

        assert events == [ThemeMode.DARK]

    def test_same_mode_does_not_notify(self, theme_service):
        events = record(theme_service.theme_mode_notifier)
        theme_service.set_theme_mode(ThemeMode.SYSTEM)
        assert events == []

    def test_change_is_persisted_in_background(self, qtbot, theme_service, fake_store):
        theme_service.set_theme_mode(ThemeMode.DARK)

        # Write happens on a later event loop pass
        assert fake_store.saves == []
        qtbot.waitUntil(lambda: fake_store.saves == [ThemeMode.DARK])

    def test_rapid_changes_persist_last_value(self, qtbot, theme_service, fake_store):
        theme_service.set_theme_mode(ThemeMode.DARK)
        theme_service.set_theme_mode(ThemeMode.LIGHT)

        qtbot.waitUntil(lambda: len(fake_store.saves) == 2)
        assert fake_store.saved_mode is ThemeMode.LIGHT

    def test_save_failure_is_logged_and_kept_in_memory(self, qtbot, qapp, caplog):
        caplog.set_level(logging.WARNING)
        store = FakeThemeModeStore(fail_save=True)
        service = ThemeService(store=store, platform=FakePlatformBrightnessSource())
        try:
            service.set_theme_mode(ThemeMode.DARK)
            qtbot.waitUntil(lambda: "Error saving theme mode" in caplog.text)
            assert service.current_theme_mode is ThemeMode.DARK
        finally:
            service.dispose()


class TestEffectiveBrightness:
    """Tests for the effective_brightness derivation."""

    @pytest.mark.parametrize("system", list(Brightness))
    def test_light_mode_ignores_system(self, qapp, system):
        platform = FakePlatformBrightnessSource(system)
        service = ThemeService(store=FakeThemeModeStore(), platform=platform)
        try:
            service.start_listening()
            service.set_theme_mode(ThemeMode.LIGHT)
            assert service.effective_brightness is Brightness.LIGHT
        finally:
            service.dispose()

    @pytest.mark.parametrize("system", list(Brightness))
    def test_dark_mode_ignores_system(self, qapp, system):
        platform = FakePlatformBrightnessSource(system)
        service = ThemeService(store=FakeThemeModeStore(), platform=platform)
        try:
            service.start_listening()
            service.set_theme_mode(ThemeMode.DARK)
            assert service.effective_brightness is Brightness.DARK
        finally:
            service.dispose()

    @pytest.mark.parametrize("system", list(Brightness))
    def test_system_mode_follows_system(self, qapp, system):
        platform = FakePlatformBrightnessSource(system)
        service = ThemeService(store=FakeThemeModeStore(), platform=platform)
        try:
            service.start_listening()
            assert service.effective_brightness is system
        finally:
            service.dispose()


class TestStartListening:
    """Tests for start_listening() and platform brightness changes."""

    def test_reads_platform_brightness_synchronously(self, theme_service, fake_platform):
        fake_platform.brightness = Brightness.DARK
        events = record(theme_service.system_brightness_notifier)

        theme_service.start_listening()

        assert theme_service.current_system_brightness is Brightness.DARK
        assert events == [Brightness.DARK]
        assert theme_service.is_listening

    def test_is_idempotent(self, theme_service, fake_platform, fake_store, qtbot):
        theme_service.start_listening()
        theme_service.start_listening()

        assert len(fake_platform.observers) == 1
        qtbot.waitUntil(lambda: fake_store.load_calls >= 1)
        qtbot.wait(20)
        assert fake_store.load_calls == 1

    def test_platform_change_publishes_brightness(self, theme_service, fake_platform):
        theme_service.start_listening()
        events = record(theme_service.system_brightness_notifier)

        fake_platform.change_brightness(Brightness.DARK)

        assert events == [Brightness.DARK]
        assert theme_service.current_system_brightness is Brightness.DARK

    def test_unchanged_platform_brightness_does_not_notify(self, theme_service, fake_platform):
        theme_service.start_listening()
        events = record(theme_service.system_brightness_notifier)

        fake_platform.change_brightness(Brightness.LIGHT)

        assert events == []

    def test_persisted_mode_is_restored_after_event_loop_pass(self, qtbot, qapp):
        store = FakeThemeModeStore(saved_mode=ThemeMode.DARK)
        service = ThemeService(store=store, platform=FakePlatformBrightnessSource())
        try:
            events = record(service.theme_mode_notifier)
            service.start_listening()

            # Not yet: the read is deferred
            assert service.current_theme_mode is ThemeMode.SYSTEM

            qtbot.waitUntil(lambda: service.current_theme_mode is ThemeMode.DARK)
            assert events == [ThemeMode.DARK]
            assert store.saves == []
        finally:
            service.dispose()

    def test_persisted_mode_equal_to_current_does_not_notify(self, qtbot, qapp):
        store = FakeThemeModeStore(saved_mode=ThemeMode.SYSTEM)
        service = ThemeService(store=store, platform=FakePlatformBrightnessSource())
        try:
            events = record(service.theme_mode_notifier)
            service.start_listening()
            qtbot.waitUntil(lambda: store.load_calls == 1)
            assert events == []
        finally:
            service.dispose()

    def test_missing_persisted_mode_keeps_default(self, qtbot, theme_service, fake_store):
        theme_service.start_listening()
        qtbot.waitUntil(lambda: fake_store.load_calls == 1)
        assert theme_service.current_theme_mode is ThemeMode.SYSTEM

    def test_load_failure_is_logged_and_falls_back(self, qtbot, qapp, caplog):
        caplog.set_level(logging.WARNING)
        store = FakeThemeModeStore(saved_mode=ThemeMode.DARK, fail_load=True)
        service = ThemeService(store=store, platform=FakePlatformBrightnessSource())
        try:
            service.start_listening()
            qtbot.waitUntil(lambda: store.load_calls == 1)
            assert service.current_theme_mode is ThemeMode.SYSTEM
            assert "Error loading theme mode" in caplog.text
        finally:
            service.dispose()


class TestScenario:
    """End-to-end walk through mode and brightness changes."""

    def test_mode_and_brightness_scenario(self, theme_service, fake_platform):
        theme_service.start_listening()
        mode_events = record(theme_service.theme_mode_notifier)
        brightness_events = record(theme_service.system_brightness_notifier)

        assert theme_service.current_theme_mode is ThemeMode.SYSTEM
        assert theme_service.effective_brightness is fake_platform.brightness

        theme_service.set_theme_mode(ThemeMode.DARK)
        assert mode_events == [ThemeMode.DARK]
        assert theme_service.effective_brightness is Brightness.DARK

        theme_service.set_theme_mode(ThemeMode.DARK)
        assert mode_events == [ThemeMode.DARK]

        fake_platform.change_brightness(Brightness.DARK)
        assert brightness_events == [Brightness.DARK]
        fake_platform.change_brightness(Brightness.LIGHT)
        assert brightness_events == [Brightness.DARK, Brightness.LIGHT]
        assert theme_service.effective_brightness is Brightness.DARK


class TestStyleBundles:
    """Tests for get_style_bundle() and its wrappers."""

    @pytest.mark.parametrize("design_system", list(DesignSystem))
    def test_light_and_dark_bundles_are_distinct_and_stable(self, theme_service, design_system):
        light = theme_service.get_style_bundle(design_system, Brightness.LIGHT)
        dark = theme_service.get_style_bundle(design_system, Brightness.DARK)

        assert light is not dark
        assert light is theme_service.get_style_bundle(design_system, Brightness.LIGHT)
        assert dark is theme_service.get_style_bundle(design_system, Brightness.DARK)
        assert light.brightness is Brightness.LIGHT
        assert dark.brightness is Brightness.DARK
        assert light.design_system is design_system

    def test_wrappers_return_typed_bundles(self, theme_service):
        assert isinstance(theme_service.get_material_theme(Brightness.DARK), MaterialTheme)
        assert isinstance(theme_service.get_cupertino_theme(Brightness.LIGHT), CupertinoTheme)
        assert theme_service.get_material_theme("dark") is theme_service.get_style_bundle(
            DesignSystem.MATERIAL, Brightness.DARK
        )

    def test_mode_changes_do_not_rebuild_bundles(self, theme_service):
        before = theme_service.get_style_bundle(DesignSystem.MATERIAL, Brightness.DARK)
        theme_service.set_theme_mode(ThemeMode.DARK)
        theme_service.set_theme_mode(ThemeMode.LIGHT)
        assert theme_service.get_style_bundle(DesignSystem.MATERIAL, Brightness.DARK) is before

    def test_current_stylesheet_follows_effective_brightness(self, theme_service):
        theme_service.set_theme_mode(ThemeMode.DARK)
        expected = theme_service.get_material_theme(Brightness.DARK).get_stylesheet()
        assert theme_service.get_current_stylesheet() == expected

        cupertino = theme_service.get_cupertino_theme(Brightness.DARK).get_stylesheet()
        assert theme_service.get_current_stylesheet(DesignSystem.CUPERTINO) == cupertino


class TestDispose:
    """Tests for dispose()."""

    def test_dispose_unregisters_platform_observer(self, theme_service, fake_platform):
        theme_service.start_listening()
        theme_service.dispose()

        assert fake_platform.observers == []
        assert theme_service.is_disposed
        assert theme_service.theme_mode_notifier.is_closed
        assert theme_service.system_brightness_notifier.is_closed

    def test_mutations_after_dispose_are_ignored(self, theme_service, fake_platform):
        theme_service.start_listening()
        mode_events = record(theme_service.theme_mode_notifier)
        brightness_events = record(theme_service.system_brightness_notifier)

        theme_service.dispose()
        theme_service.set_theme_mode(ThemeMode.DARK)
        fake_platform.brightness = Brightness.DARK
        theme_service.on_platform_brightness_changed()

        assert theme_service.current_theme_mode is ThemeMode.SYSTEM
        assert theme_service.current_system_brightness is Brightness.LIGHT
        assert mode_events == []
        assert brightness_events == []

    def test_start_listening_after_dispose_is_noop(self, theme_service, fake_platform):
        theme_service.dispose()
        theme_service.start_listening()
        assert fake_platform.observers == []
        assert not theme_service.is_listening

    def test_dispose_is_idempotent(self, theme_service):
        theme_service.dispose()
        theme_service.dispose()
        assert theme_service.is_disposed

    def test_style_bundles_still_available_after_dispose(self, theme_service):
        theme_service.dispose()
        bundle = theme_service.get_style_bundle(DesignSystem.CUPERTINO, Brightness.LIGHT)
        assert bundle.design_system is DesignSystem.CUPERTINO
