#!/usr/bin/env python3
"""Unit tests for the settings tree model."""

import pytest

from core import Entry, Section, SettingsTree


def _tree():
    return SettingsTree.from_raw(
        {
            "sections": [
                {
                    "name": "Preferences.HotKeys",
                    "order": 1,
                    "entries": [{"name": "Preferences.HotKeys.Exit", "value": "Ctrl+Q"}],
                },
                {
                    "name": "Preferences.General",
                    "order": 0,
                    "entries": [
                        {"name": "Preferences.General.Theme", "value": "Dark", "options": ["Light", "Dark", "System"]},
                        {"name": "Preferences.General.Title", "value": "Main"},
                    ],
                },
            ]
        }
    )


class TestEntry:
    def test_value_is_required(self):
        with pytest.raises(ValueError):
            Entry(name="X", value=None)

    def test_values_are_stringified(self):
        entry = Entry(name="X", value=5, options=[1, 2])
        assert entry.value == "5"
        assert entry.options == ["1", "2"]

    def test_empty_options_mean_free_text(self):
        assert not Entry("X", "a", options=[]).has_options
        assert not Entry("X", "a").has_options
        assert Entry("X", "a", options=["a"]).has_options

    def test_choices_insert_current_value_first_when_missing(self):
        entry = Entry("Theme", "Solarized", options=["Light", "Dark"])
        assert entry.choices() == ["Solarized", "Light", "Dark"]

    def test_choices_keep_order_when_current_present(self):
        entry = Entry("Theme", "Dark", options=["Light", "Dark"])
        assert entry.choices() == ["Light", "Dark"]

    def test_choices_skip_empty_current_value(self):
        entry = Entry("Theme", "", options=["Light", "Dark"])
        assert entry.choices() == ["Light", "Dark"]

    def test_accepts(self):
        entry = Entry("Theme", "Custom", options=["Light", "Dark"])
        assert entry.accepts("Light")
        assert entry.accepts("Custom")
        assert not entry.accepts("Blue")
        assert Entry("Title", "x").accepts("anything")

    def test_to_raw_omits_absent_options(self):
        assert Entry("A", "1").to_raw() == {"name": "A", "value": "1"}
        assert Entry("A", "1", options=[]).to_raw() == {"name": "A", "value": "1", "options": []}


class TestSettingsTree:
    def test_from_raw_accepts_pascal_case_keys(self):
        tree = SettingsTree.from_raw(
            {"Sections": [{"Name": "S", "Order": 2, "Entries": [{"Name": "E", "Value": "v", "Options": ["v"]}]}]}
        )
        section = tree.sections[0]
        assert (section.name, section.order) == ("S", 2)
        assert section.entries[0] == Entry("E", "v", ["v"])

    def test_from_raw_empty_and_invalid(self):
        assert SettingsTree.from_raw(None).sections == []
        assert SettingsTree.from_raw({}).sections == []
        with pytest.raises(ValueError):
            SettingsTree.from_raw(["not", "an", "object"])

    @pytest.mark.parametrize(
        "raw",
        [
            {"sections": ["oops"]},
            {"sections": "oops"},
            {"sections": [{"name": "S", "entries": ["oops"]}]},
            {"sections": [{"name": "S", "entries": {"name": "E"}}]},
        ],
    )
    def test_from_raw_rejects_non_object_items(self, raw):
        with pytest.raises(ValueError):
            SettingsTree.from_raw(raw)

    def test_from_raw_rejects_string_options(self):
        raw = {"sections": [{"name": "S", "entries": [{"name": "E", "value": "a", "options": "abc"}]}]}
        with pytest.raises(ValueError, match="options of 'E' must be a JSON array"):
            SettingsTree.from_raw(raw)

    def test_ordered_sections_sorts_by_order(self):
        names = [s.name for s in _tree().ordered_sections()]
        assert names == ["Preferences.General", "Preferences.HotKeys"]

    def test_ordered_sections_is_stable_for_equal_order(self):
        tree = SettingsTree(sections=[Section("B"), Section("A"), Section("C", order=-1)])
        assert [s.name for s in tree.ordered_sections()] == ["C", "B", "A"]

    def test_lookup_is_case_insensitive(self):
        tree = _tree()
        assert tree.find_section("preferences.general").name == "Preferences.General"
        assert tree.find_entry("Preferences.General", "preferences.general.theme").value == "Dark"
        assert tree.find_entry("Missing", "x") is None
        assert tree.find_entry("Preferences.General", "Missing") is None

    def test_iter_entries_uses_stored_order(self):
        names = [entry.name for _, entry in _tree().iter_entries()]
        assert names[0] == "Preferences.HotKeys.Exit"

    def test_restore_keeps_identity(self):
        tree = _tree()
        snapshot = tree.clone()
        tree.find_entry("Preferences.General", "Preferences.General.Theme").value = "Light"
        tree.restore(snapshot)
        assert tree.find_entry("Preferences.General", "Preferences.General.Theme").value == "Dark"
        assert tree.to_raw() == snapshot.to_raw()

    def test_clone_is_deep(self):
        tree = _tree()
        clone = tree.clone()
        clone.sections[0].entries[0].value = "Ctrl+X"
        assert tree.sections[0].entries[0].value == "Ctrl+Q"

    def test_changed_entries(self):
        tree = _tree()
        baseline = tree.clone()
        assert tree.changed_entries(baseline) == []
        tree.find_entry("Preferences.General", "Preferences.General.Title").value = "Other"
        assert tree.changed_entries(baseline) == ["Preferences.General.Title"]

    def test_to_raw_round_trip_shape(self):
        raw = _tree().to_raw()
        assert set(raw) == {"sections"}
        general = raw["sections"][1]
        assert general["entries"][0]["options"] == ["Light", "Dark", "System"]
        assert "options" not in general["entries"][1]
