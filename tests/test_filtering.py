#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Tests for search normalization and key filtering."""

import pytest

from _builders import make_group, scenario_a_group

from localization_editor.core import build_index, filter_keys, normalize, normalized_contains


class TestNormalize:
    """Case and diacritics are folded away."""

    @pytest.mark.parametrize(
        "left, right",
        [
            ("Élan", "elan"),
            ("ÉLAN", "élan"),
            ("Straße", "STRASSE"),
            ("naïve café", "NAIVE CAFE"),
        ],
    )
    def test_equivalent_forms(self, left, right):
        assert normalize(left) == normalize(right)

    def test_contains(self):
        assert normalized_contains("Crème Brûlée", "brulee")
        assert not normalized_contains("Crème", "brulee")


class TestFilterKeys:
    """Keys match on their name or any translated value."""

    def setup_method(self):
        group = make_group(
            "Localizable.strings",
            {
                "en": [
                    ("Foo_Label", "Title"),
                    ("greeting", "Hello"),
                    ("cafe_name", "Coffee"),
                    ("bye", "Goodbye"),
                ],
                "fr": [
                    ("greeting", "Bonjour"),
                    ("cafe_name", "Café"),
                ],
            },
        )
        self.index = build_index(group)

    @pytest.mark.parametrize("search", [None, ""])
    def test_reset_returns_all_sorted(self, search):
        assert filter_keys(self.index, search) == sorted(self.index.keys())

    def test_matches_key_name_ignoring_case(self):
        assert filter_keys(self.index, "foo") == ["Foo_Label"]

    def test_matches_any_language_value(self):
        assert filter_keys(self.index, "bonjour") == ["greeting"]

    def test_matches_value_ignoring_accents(self):
        assert filter_keys(self.index, "CAFE") == ["cafe_name"]

    def test_matches_accented_search(self):
        assert filter_keys(self.index, "Café") == ["cafe_name"]

    def test_result_is_sorted(self):
        # "e" appears in every key or value
        assert filter_keys(self.index, "e") == sorted(filter_keys(self.index, "e"))
        assert filter_keys(self.index, "e") == ["Foo_Label", "bye", "cafe_name", "greeting"]

    def test_no_match(self):
        assert filter_keys(self.index, "zzz") == []

    def test_missing_cells_are_skipped(self):
        index = build_index(scenario_a_group())
        assert filter_keys(index, "thanks") == ["c"]

    def test_deterministic(self):
        assert filter_keys(self.index, "o") == filter_keys(self.index, "o")
