#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Tests for the in-memory localization provider."""

from _builders import make_group, scenario_a_group

from localization_editor.core import Localization, LocalizationString, LocalizationsDataSource
from localization_editor.providers import (
    InMemoryLocalizationProvider,
    LocalizationProvider,
    PersistedEdit,
)


class TestInMemoryLocalizationProvider:
    """Groups are served as copies and edits are applied to the originals."""

    def test_satisfies_protocol(self):
        assert isinstance(InMemoryLocalizationProvider(), LocalizationProvider)

    def test_serves_copies(self):
        provider = InMemoryLocalizationProvider([scenario_a_group()])
        first = provider.load_groups("/any")
        first[0].localizations[0].translations.clear()
        assert provider.load_groups("/any")[0].localizations[0].count == 3

    def test_groups_by_root(self):
        provider = InMemoryLocalizationProvider(
            {"/one": [scenario_a_group()], "/two": [make_group("Other.strings", {"en": ["x"]})]}
        )
        assert [g.name for g in provider.load_groups("/one")] == ["Localizable.strings"]
        assert [g.name for g in provider.load_groups("/two")] == ["Other.strings"]
        assert provider.load_groups("/three") == []

    def test_persist_records_and_applies(self):
        provider = InMemoryLocalizationProvider([scenario_a_group()])
        french = provider.load_groups("/any")[0].localization_for("French")

        provider.persist(french, "b", "A bientot", "new comment")

        assert provider.edits == [PersistedEdit("French", "b", "A bientot", "new comment")]
        reloaded = provider.load_groups("/any")[0].localization_for("French")
        assert reloaded.find("b") == LocalizationString("b", "A bientot", "new comment")

    def test_repeated_edits_through_same_copy(self):
        provider = InMemoryLocalizationProvider([scenario_a_group()])
        french = provider.load_groups("/any")[0].localization_for("French")

        provider.persist(french, "a", "first", None)
        provider.persist(french, "a", "second", None)

        reloaded = provider.load_groups("/any")[0].localization_for("French")
        assert reloaded.find("a").value == "second"

    def test_unknown_localization_is_only_recorded(self):
        provider = InMemoryLocalizationProvider([scenario_a_group()])
        provider.persist(Localization("German", []), "a", "Hallo", None)
        assert len(provider.edits) == 1
        assert provider.load_groups("/any")[0].localization_for("German") is None

    def test_served_copy_tracking_stays_bounded(self):
        provider = InMemoryLocalizationProvider([scenario_a_group()])
        source = LocalizationsDataSource(provider)
        source.load("/any")

        for _ in range(50):
            source.refresh()

        assert len(provider._origins) == 2

    def test_edit_through_newest_copy_after_reloads(self):
        provider = InMemoryLocalizationProvider([scenario_a_group()])
        for _ in range(3):
            provider.load_groups("/any")
        french = provider.load_groups("/any")[0].localization_for("French")

        provider.persist(french, "a", "Bonjour", None)

        reloaded = provider.load_groups("/any")[0].localization_for("French")
        assert reloaded.find("a") == LocalizationString("a", "Bonjour", "salutation")
