"""
Opening hours model tests
=========================
Blank/hydrated state, per-boundary edits, text summary and the JSON codec.
"""

import json

import pytest

from bar_admin.domain.bar.opening_hours import (
    EMPTY_SUMMARY,
    WEEKDAYS,
    dump_opening_hours,
    format_opening_hours,
    hydrate,
    initialize_empty,
    load_opening_hours,
    set_boundary,
)


class TestInitializeEmpty:

    def test_seven_weekdays_in_order(self):
        hours = initialize_empty()
        assert list(hours) == [
            "monday",
            "tuesday",
            "wednesday",
            "thursday",
            "friday",
            "saturday",
            "sunday",
        ]
        assert all(interval == {"open": "", "close": ""} for interval in hours.values())

    def test_each_call_returns_fresh_intervals(self):
        first = initialize_empty()
        second = initialize_empty()
        assert first == second
        assert first["monday"] is not second["monday"]


class TestHydrate:

    def test_none_gives_empty_mapping(self):
        assert hydrate(None) == {}
        assert hydrate(None) != initialize_empty()

    def test_keeps_stored_days_and_order(self):
        stored = {
            "sunday": {"open": "12:00", "close": "20:00"},
            "friday": {"open": "16:00", "close": "02:00"},
        }
        hours = hydrate(stored)
        assert list(hours) == ["sunday", "friday"]
        assert hours["friday"] == {"open": "16:00", "close": "02:00"}

    def test_missing_and_null_fields_become_empty(self):
        hours = hydrate({"monday": {"open": "09:00"}, "tuesday": {"open": None, "close": None}})
        assert hours == {
            "monday": {"open": "09:00", "close": ""},
            "tuesday": {"open": "", "close": ""},
        }

    def test_malformed_entries_degrade(self):
        hours = hydrate({"monday": "closed", "tuesday": None, "wednesday": {"open": 9, "close": 17}})
        assert hours == {
            "monday": {"open": "", "close": ""},
            "tuesday": {"open": "", "close": ""},
            "wednesday": {"open": "9", "close": "17"},
        }

    @pytest.mark.parametrize("value", ["monday", 42, ["monday"]])
    def test_non_mapping_input_gives_empty_mapping(self, value):
        assert hydrate(value) == {}

    def test_unknown_day_keys_are_kept(self):
        hours = hydrate({"Holiday": {"open": "10:00", "close": "14:00"}})
        assert hours == {"Holiday": {"open": "10:00", "close": "14:00"}}

    def test_does_not_mutate_input(self):
        stored = {"monday": {"open": "09:00"}}
        hydrate(stored)
        assert stored == {"monday": {"open": "09:00"}}


class TestSetBoundary:

    def test_replaces_only_target_boundary(self):
        hours = initialize_empty()
        updated = set_boundary(hours, "monday", "open", "09:00")
        assert updated["monday"] == {"open": "09:00", "close": ""}
        for day in WEEKDAYS[1:]:
            assert updated[day] == hours[day]
            assert updated[day] is hours[day]

    def test_does_not_mutate_input(self):
        hours = initialize_empty()
        monday = hours["monday"]
        set_boundary(hours, "monday", "close", "17:00")
        assert hours["monday"] is monday
        assert monday == {"open": "", "close": ""}

    def test_unknown_day_is_appended(self):
        hours = {"monday": {"open": "09:00", "close": "17:00"}}
        updated = set_boundary(hours, "holiday", "open", "10:00")
        assert list(updated) == ["monday", "holiday"]
        assert updated["holiday"] == {"open": "10:00", "close": ""}
        assert "holiday" not in hours

    def test_invalid_time_is_stored_as_is(self):
        updated = set_boundary({}, "monday", "close", "25:99")
        assert updated == {"monday": {"open": "", "close": "25:99"}}

    def test_inverted_range_is_accepted(self):
        hours = set_boundary(initialize_empty(), "friday", "open", "22:00")
        hours = set_boundary(hours, "friday", "close", "02:00")
        assert hours["friday"] == {"open": "22:00", "close": "02:00"}

    def test_idempotent(self):
        hours = initialize_empty()
        once = set_boundary(hours, "tuesday", "open", "11:00")
        twice = set_boundary(once, "tuesday", "open", "11:00")
        assert once == twice

    def test_keeps_day_position(self):
        hours = set_boundary(initialize_empty(), "wednesday", "open", "10:00")
        assert list(hours) == list(WEEKDAYS)

    def test_rejects_unknown_boundary(self):
        with pytest.raises(ValueError):
            set_boundary(initialize_empty(), "monday", "middle", "12:00")


class TestFormatOpeningHours:

    def test_none_is_not_available(self):
        assert format_opening_hours(None) == "N/A"
        assert EMPTY_SUMMARY == "N/A"

    def test_empty_mapping_is_empty_string(self):
        assert format_opening_hours({}) == ""

    def test_single_day(self):
        assert format_opening_hours({"tuesday": {"open": "10:00", "close": "22:00"}}) == "Tuesday 10:00-22:00"

    def test_only_first_character_is_capitalized(self):
        hours = {
            "FRIDAY": {"open": "16:00", "close": "02:00"},
            "saturDAY": {"open": "12:00", "close": "03:00"},
        }
        assert format_opening_hours(hours) == "FRIDAY 16:00-02:00\nSaturDAY 12:00-03:00"

    def test_empty_values_are_emitted_verbatim(self):
        assert format_opening_hours({"monday": {"open": "", "close": ""}}) == "Monday -"
        assert format_opening_hours({"monday": {"open": "09:00", "close": ""}}) == "Monday 09:00-"

    def test_uses_insertion_order(self):
        hours = {
            "sunday": {"open": "12:00", "close": "18:00"},
            "monday": {"open": "09:00", "close": "17:00"},
        }
        assert format_opening_hours(hours).splitlines() == ["Sunday 12:00-18:00", "Monday 09:00-17:00"]

    def test_no_trailing_newline(self):
        assert not format_opening_hours(initialize_empty()).endswith("\n")

    def test_open_then_close_edit(self):
        hours = set_boundary(initialize_empty(), "monday", "open", "09:00")
        hours = set_boundary(hours, "monday", "close", "17:00")
        assert "Monday 09:00-17:00" in format_opening_hours(hours).split("\n")

    def test_new_bar_with_one_day_filled(self):
        hours = set_boundary(initialize_empty(), "monday", "open", "08:00")
        hours = set_boundary(hours, "monday", "close", "16:00")
        assert format_opening_hours(hours).split("\n") == [
            "Monday 08:00-16:00",
            "Tuesday -",
            "Wednesday -",
            "Thursday -",
            "Friday -",
            "Saturday -",
            "Sunday -",
        ]


class TestOpeningHoursCodec:

    def test_load_null_and_garbage(self):
        assert load_opening_hours(None) == {}
        assert load_opening_hours("") == {}
        assert load_opening_hours("not json") == {}
        assert load_opening_hours("null") == {}
        assert load_opening_hours("[1, 2]") == {}

    def test_round_trip_keeps_key_order(self):
        hours = {
            "sunday": {"open": "12:00", "close": "18:00"},
            "monday": {"open": "09:00", "close": "17:00"},
        }
        raw = dump_opening_hours(hours)
        assert list(json.loads(raw)) == ["sunday", "monday"]
        assert load_opening_hours(raw) == hours

    def test_dump_none(self):
        assert dump_opening_hours(None) is None

    def test_dump_empty_mapping(self):
        assert dump_opening_hours({}) == "{}"
