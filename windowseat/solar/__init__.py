from .astropy_engine import AstropySolarEngine
from .base import SolarPosition, SolarPositionEngine
from .builtin import BuiltinSolarEngine


def get_solar_engine(config=None) -> SolarPositionEngine:
    backend = getattr(config, "solar_backend", None) or "builtin"
    if backend == "builtin":
        return BuiltinSolarEngine()
    if backend == "astropy":
        return AstropySolarEngine()
    raise ValueError(f"Unknown solar backend: {backend}")


__all__ = [
    "AstropySolarEngine",
    "BuiltinSolarEngine",
    "SolarPosition",
    "SolarPositionEngine",
    "get_solar_engine",
]
