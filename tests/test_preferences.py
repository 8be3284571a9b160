#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Tests for user preferences persistence."""

import json

import pytest

import _builders  # noqa: F401  (puts src on sys.path)

from localization_editor.utils import preferences


@pytest.fixture
def prefs_path(tmp_path, monkeypatch):
    path = tmp_path / "prefs.json"
    monkeypatch.setattr(preferences, "_PREFERENCES_PATH", path)
    return path


class TestLoadPreferences:
    """Stored values are merged over defaults."""

    def test_defaults_without_file(self, prefs_path):
        loaded = preferences.load_preferences()
        assert loaded == preferences.DEFAULT_PREFERENCES
        assert loaded is not preferences.DEFAULT_PREFERENCES

    def test_stored_values_take_precedence(self, prefs_path):
        prefs_path.write_text(json.dumps({"preferred_group": "Main.strings"}), encoding="utf-8")
        loaded = preferences.load_preferences()
        assert loaded["preferred_group"] == "Main.strings"
        assert loaded["last_folder"] == ""

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
    def test_malformed_file_gives_defaults(self, prefs_path, content):
        prefs_path.write_text(content, encoding="utf-8")
        assert preferences.load_preferences() == preferences.DEFAULT_PREFERENCES

    def test_save_then_load(self, prefs_path):
        stored = preferences.load_preferences()
        preferences.remember_folder(stored, "/projects/app")
        preferences.save_preferences(stored)

        assert json.loads(prefs_path.read_text(encoding="utf-8"))["last_folder"] == "/projects/app"
        assert preferences.load_preferences()["last_folder"] == "/projects/app"


class TestPreferredGroup:
    """The preferred group falls back to Localizable.strings."""

    def test_default(self):
        assert preferences.get_preferred_group({}) == "Localizable.strings"

    @pytest.mark.parametrize("value", ["", "   ", 42, None])
    def test_invalid_values(self, value):
        assert preferences.get_preferred_group({"preferred_group": value}) == "Localizable.strings"

    def test_stored(self):
        assert preferences.get_preferred_group({"preferred_group": "Main.strings"}) == "Main.strings"
