from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import tomli as tomllib
else:
    try:
        import tomllib
    except ModuleNotFoundError:  # Python < 3.11
        import tomli as tomllib

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "windowseat" / "config.toml"


class Config:
    def __init__(self, data: dict):
        self._data = data

    @property
    def solar_backend(self):
        return self._data.get("solar", {}).get("backend", "builtin")

    @property
    def path_spacing_km(self):
        return float(self._data.get("path", {}).get("spacing_km", 50.0))

    @property
    def path_min_segments(self):
        return int(self._data.get("path", {}).get("min_segments", 5))

    @property
    def path_cruise_speed_kmh(self):
        return float(self._data.get("path", {}).get("cruise_speed_kmh", 800.0))

    @property
    def analysis_interval_min(self):
        return int(self._data.get("analysis", {}).get("interval_min", 15))

    @property
    def analysis_classifier(self):
        return self._data.get("analysis", {}).get("classifier", "elevation")

    @property
    def analysis_clock_basis(self):
        return self._data.get("analysis", {}).get("clock_basis", "utc")

    @property
    def mountain_view_distance_km(self):
        return float(self._data.get("mountains", {}).get("view_distance_km", 200.0))


def load_config(path: Path | None = None) -> Config:
    explicit_path = path
    path = path or DEFAULT_CONFIG_PATH

    if not path.exists():
        if explicit_path is not None:
            raise FileNotFoundError(f"Config file not found: {path}")
        # Return default config if default file missing
        return Config({})

    with open(path, "rb") as f:
        data = tomllib.load(f)

    return Config(data)
