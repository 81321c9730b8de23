"""Shared fixtures for fee estimator tests."""

import pytest

from fee_estimator.schedule.bands import FeeBand, FeeSchedule


@pytest.fixture
def first_band() -> FeeBand:
    """$2M - $5M band: 20k terms agreed + 125k completion, 3.5% sliding scale."""
    return FeeBand(
        label="$2M - $5M",
        min_ev=2_000_000,
        max_ev=5_000_000,
        sliding_scale_rate=0.035,
        fixed_fee_components={"terms_agreed": 20_000, "completion": 125_000},
    )


@pytest.fixture
def second_band() -> FeeBand:
    """$5M - $10M band: 30k terms agreed + 270k completion, 2.5% sliding scale."""
    return FeeBand(
        label="$5M - $10M",
        min_ev=5_000_000,
        max_ev=10_000_000,
        sliding_scale_rate=0.025,
        fixed_fee_components={"terms_agreed": 30_000, "completion": 270_000},
    )


@pytest.fixture
def single_band_schedule(first_band) -> FeeSchedule:
    return FeeSchedule(bands=(first_band,))


@pytest.fixture
def two_band_schedule(first_band, second_band) -> FeeSchedule:
    return FeeSchedule(bands=(first_band, second_band))


@pytest.fixture
def schedule_yaml(tmp_path):
    """Two-band schedule written to a YAML file, bands deliberately unsorted."""
    path = tmp_path / "fee_schedule.yaml"
    path.write_text(
        """
fee_schedule:
  components: [terms_agreed, completion]
  bands:
    - label: "$5M - $10M"
      min_ev: 5000000
      max_ev: 10000000
      sliding_scale_rate: 0.025
      fixed_fees: {terms_agreed: 30000, completion: 270000}
    - label: "$2M - $5M"
      min_ev: 2000000
      max_ev: 5000000
      sliding_scale_rate: 0.035
      fixed_fees: {terms_agreed: 20000, completion: 125000}
""",
        encoding="utf-8",
    )
    return path
