import pytest

from interview_validator.clock import FixedClock


NOW = 1_700_000_000_000
MINUTE = 60_000


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config.yml"
