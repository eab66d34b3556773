import datetime

import pytest

from windowseat.geo import Bearing
from windowseat.solar import SolarPosition, SolarPositionEngine


def pytest_addoption(parser):
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run tests marked as integration",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--integration"):
        return

    for item in items:
        if "integration" in item.keywords:
            item.add_marker(
                pytest.mark.skip(
                    reason="need --integration option to run integration tests"
                )
            )


class ScriptedSolarEngine(SolarPositionEngine):
    """Returns canned (azimuth, elevation) pairs in call order."""

    name = "scripted"

    def __init__(self, positions):
        self._positions = list(positions)
        self._index = 0

    def position(self, instant, latitude_deg, longitude_deg):
        if self._index >= len(self._positions):
            azimuth, elevation = self._positions[-1]
        else:
            azimuth, elevation = self._positions[self._index]
        self._index += 1
        return SolarPosition(azimuth=Bearing.from_north(azimuth), elevation_deg=elevation)

    def is_available(self):
        return {"ok": True, "detail": "scripted"}


@pytest.fixture
def scripted_engine():
    return ScriptedSolarEngine


@pytest.fixture
def departure():
    return datetime.datetime(2025, 8, 1, 18, 0, tzinfo=datetime.timezone.utc)
