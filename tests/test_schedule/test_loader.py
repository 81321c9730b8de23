"""Tests for building fee schedules from config."""

import pytest
from fee_estimator.core.errors import ScheduleError
from fee_estimator.schedule.loader import (
    DEFAULT_SCHEDULE,
    load_schedule,
    schedule_from_config,
)


class TestDefaultSchedule:
    def test_floor_and_cap(self):
        assert DEFAULT_SCHEDULE.floor == 2_000_000
        assert DEFAULT_SCHEDULE.cap == 50_000_000

    def test_fixed_fees_never_fall_between_bands(self):
        totals = [band.fixed_fee_total for band in DEFAULT_SCHEDULE]
        assert totals == sorted(totals)

    def test_matches_shipped_yaml(self):
        from pathlib import Path

        path = Path(__file__).parent.parent.parent / "config" / "fee_schedule.yaml"
        assert load_schedule(str(path)) == DEFAULT_SCHEDULE


class TestScheduleFromConfig:
    def test_load_schedule_sorts_bands(self, schedule_yaml):
        schedule = load_schedule(str(schedule_yaml))
        assert [b.min_ev for b in schedule] == [2_000_000, 5_000_000]
        assert schedule.bands[0].sliding_scale_rate == pytest.approx(0.035)
        assert dict(schedule.bands[1].fixed_fee_components) == {
            "terms_agreed": 30_000,
            "completion": 270_000,
        }

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_schedule(str(tmp_path / "missing.yaml"))

    def test_no_bands_raises(self):
        with pytest.raises(ScheduleError):
            schedule_from_config({"fee_schedule": {"bands": []}})

    def test_missing_field_raises(self):
        config = {"fee_schedule": {"bands": [{"min_ev": 0, "max_ev": 10}]}}
        with pytest.raises(ScheduleError, match="sliding_scale_rate"):
            schedule_from_config(config)

    def test_non_numeric_field_raises(self):
        config = {
            "fee_schedule": {
                "bands": [{"min_ev": "two", "max_ev": 10, "sliding_scale_rate": 0.1}]
            }
        }
        with pytest.raises(ScheduleError):
            schedule_from_config(config)

    def test_components_inferred_and_missing_ones_zeroed(self):
        config = {
            "fee_schedule": {
                "bands": [
                    {
                        "min_ev": 0,
                        "max_ev": 10,
                        "sliding_scale_rate": 0.1,
                        "fixed_fees": {"terms_agreed": 1},
                    },
                    {
                        "min_ev": 10,
                        "max_ev": 20,
                        "sliding_scale_rate": 0.1,
                        "fixed_fees": {"completion": 2},
                    },
                ]
            }
        }
        schedule = schedule_from_config(config)
        assert schedule.component_names == ("terms_agreed", "completion")
        assert dict(schedule.bands[0].fixed_fee_components) == {
            "terms_agreed": 1,
            "completion": 0,
        }

    def test_unknown_component_raises(self):
        config = {
            "fee_schedule": {
                "components": ["completion"],
                "bands": [
                    {
                        "min_ev": 0,
                        "max_ev": 10,
                        "sliding_scale_rate": 0.1,
                        "fixed_fees": {"retainer": 5},
                    }
                ],
            }
        }
        with pytest.raises(ScheduleError, match="retainer"):
            schedule_from_config(config)

    def test_default_label(self):
        config = {
            "fee_schedule": {
                "bands": [{"min_ev": 0, "max_ev": 1000000, "sliding_scale_rate": 0.1}]
            }
        }
        assert schedule_from_config(config).bands[0].label == "0 - 1,000,000"

    @pytest.mark.parametrize("bad_fee", ["abc", None, [1], float("nan"), float("inf")])
    def test_bad_fixed_fee_raises(self, bad_fee):
        config = {
            "fee_schedule": {
                "components": ["completion"],
                "bands": [
                    {
                        "min_ev": 0,
                        "max_ev": 10,
                        "sliding_scale_rate": 0.1,
                        "fixed_fees": {"completion": bad_fee},
                    }
                ],
            }
        }
        with pytest.raises(ScheduleError, match="completion"):
            schedule_from_config(config)

    def test_numeric_text_fixed_fee_accepted(self):
        config = {
            "fee_schedule": {
                "bands": [
                    {
                        "min_ev": 0,
                        "max_ev": 10,
                        "sliding_scale_rate": 0.1,
                        "fixed_fees": {"completion": "2500.5"},
                    }
                ]
            }
        }
        band = schedule_from_config(config).bands[0]
        assert band.fixed_fee_components["completion"] == 2501
