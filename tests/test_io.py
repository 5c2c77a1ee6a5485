"""Tests for configuration loading."""
import logging
from datetime import date

import pytest

from carerota.errors import ConfigMalformedError, ConfigMissingError, RotaError
from carerota.io.config_loader import load_config, parse_config
from carerota.models.config import WeekKey

BASE = {"startdate": "2024-01-01", "caretakers": ["Alice", "Bob"]}


def doc(**changes):
    d = dict(BASE)
    d.update(changes)
    return d


class TestLoadConfig:
    """Tests for reading the JSON file."""

    def test_load_sample_file(self, sample_config_path):
        cfg = load_config(sample_config_path)
        assert cfg.start_date == date(2024, 12, 23)
        assert cfg.caretakers == ("Alice", "Bob", "Charlie")
        assert dict(cfg.reschedule) == {WeekKey(2025, 2): "Bob"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigMissingError, match="not found"):
            load_config(tmp_path / "nope.json")

    def test_directory_is_unreadable(self, tmp_path):
        with pytest.raises(ConfigMissingError):
            load_config(tmp_path)

    def test_invalid_json(self, write_config):
        path = write_config('{"startdate": "2024-01-01", ')
        with pytest.raises(ConfigMalformedError, match="invalid JSON"):
            load_config(path)

    def test_top_level_must_be_object(self, write_config):
        with pytest.raises(ConfigMalformedError, match="JSON object"):
            load_config(write_config(["Alice", "Bob"]))

    def test_errors_share_a_base_class(self, tmp_path):
        with pytest.raises(RotaError):
            load_config(tmp_path / "nope.json")

    def test_undecodable_file_is_malformed(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_bytes(b'{"startdate": "2024-01-01", "caretakers": ["\xff"]}')
        with pytest.raises(ConfigMalformedError, match="UTF-8"):
            load_config(path)

    def test_byte_order_mark_is_accepted(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_bytes(b"\xef\xbb\xbf" + b'{"startdate": "2024-01-01", "caretakers": ["Alice"]}')
        assert load_config(path).caretakers == ("Alice",)


class TestParseConfig:
    """Tests for document validation."""

    def test_minimal_document(self):
        cfg = parse_config(BASE)
        assert cfg.start_date == date(2024, 1, 1)
        assert cfg.caretakers == ("Alice", "Bob")
        assert len(cfg.reschedule) == 0

    def test_names_are_stripped(self):
        cfg = parse_config(doc(caretakers=[" Alice ", "Bob"]))
        assert cfg.caretakers == ("Alice", "Bob")

    def test_empty_caretakers_is_loaded(self):
        # The engine, not the loader, rejects an empty rotation
        cfg = parse_config(doc(caretakers=[]))
        assert cfg.caretakers == ()

    @pytest.mark.parametrize("startdate", ["2024-13-01", "01/01/2024", "2024-01-01T00:00:00", 20240101, None])
    def test_bad_startdate(self, startdate):
        with pytest.raises(ConfigMalformedError, match="startdate"):
            parse_config(doc(startdate=startdate))

    def test_missing_startdate(self):
        with pytest.raises(ConfigMalformedError, match="startdate"):
            parse_config({"caretakers": ["Alice"]})

    def test_legacy_startweek_document_is_rejected(self):
        with pytest.raises(ConfigMalformedError, match="startdate"):
            parse_config({"startweek": 12, "caretakers": ["Alice"]})

    @pytest.mark.parametrize("caretakers", ["Alice", [1, 2], ["Alice", None], ["Alice", "  "]])
    def test_bad_caretakers(self, caretakers):
        with pytest.raises(ConfigMalformedError, match="caretakers"):
            parse_config(doc(caretakers=caretakers))

    def test_unknown_fields_ignored(self):
        cfg = parse_config(doc(note="hello"))
        assert cfg.caretakers == ("Alice", "Bob")


class TestRescheduleShapes:
    """Tests for the accepted reschedule encodings."""

    def test_mapping(self):
        cfg = parse_config(doc(reschedule={"2024-05": "Bob", "2024-W06": "Alice"}))
        assert dict(cfg.reschedule) == {WeekKey(2024, 5): "Bob", WeekKey(2024, 6): "Alice"}

    def test_list_of_pairs(self):
        cfg = parse_config(doc(reschedule=[["2024-05", "Bob"]]))
        assert dict(cfg.reschedule) == {WeekKey(2024, 5): "Bob"}

    def test_list_of_objects(self):
        cfg = parse_config(doc(reschedule=[{"week": "2024-05", "caretaker": "Bob"}]))
        assert dict(cfg.reschedule) == {WeekKey(2024, 5): "Bob"}

    def test_null_reschedule(self):
        assert len(parse_config(doc(reschedule=None)).reschedule) == 0

    def test_bare_week_number_key_rejected(self):
        # Bare week numbers repeat every year; only "YYYY-WW" keys are accepted
        with pytest.raises(ConfigMalformedError, match="reschedule"):
            parse_config(doc(reschedule={"52": "Bob"}))
        with pytest.raises(ConfigMalformedError, match="reschedule"):
            parse_config(doc(reschedule=[[52, "Bob"]]))

    def test_nonexistent_week_rejected(self):
        with pytest.raises(ConfigMalformedError, match="no week 53"):
            parse_config(doc(reschedule={"2025-53": "Bob"}))

    def test_duplicate_week_rejected(self):
        with pytest.raises(ConfigMalformedError, match="more than once"):
            parse_config(doc(reschedule={"2024-05": "Bob", "2024-W05": "Alice"}))
        with pytest.raises(ConfigMalformedError, match="more than once"):
            parse_config(doc(reschedule=[["2024-05", "Bob"], ["2024-05", "Alice"]]))

    def test_repeated_literal_key_in_file_rejected(self, write_config):
        path = write_config(
            '{"startdate": "2024-01-01", "caretakers": ["Alice"], '
            '"reschedule": {"2024-05": "Alice", "2024-05": "Bob"}}'
        )
        with pytest.raises(ConfigMalformedError, match="duplicate key '2024-05'"):
            load_config(path)

    @pytest.mark.parametrize("reschedule", [
        "2024-05",
        [["2024-05"]],
        [{"week": "2024-05"}],
        {"2024-05": 7},
        {"2024-05": ""},
    ])
    def test_malformed_entries(self, reschedule):
        with pytest.raises(ConfigMalformedError, match="reschedule"):
            parse_config(doc(reschedule=reschedule))


class TestLoaderLogging:
    """Tests for warnings on suspicious but valid input."""

    def test_duplicate_caretaker_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="carerota"):
            parse_config(doc(caretakers=["Alice", "Bob", "Alice"]))
        assert "more than once" in caplog.text
        assert "Alice" in caplog.text

    def test_stand_in_caretaker_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="carerota"):
            cfg = parse_config(doc(reschedule={"2024-05": "Grandma"}))
        assert cfg.override_for(WeekKey(2024, 5)) == "Grandma"
        assert "Grandma" in caplog.text

    def test_load_logs_summary(self, caplog, sample_config_path):
        with caplog.at_level(logging.INFO, logger="carerota"):
            load_config(sample_config_path)
        assert "3 caretaker(s), 1 reschedule(s)" in caplog.text
