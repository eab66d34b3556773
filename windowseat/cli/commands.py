import datetime
import json
import logging
import sys
from pathlib import Path

from windowseat.airports import list_airports
from windowseat.analysis import analyze_route, parse_route_query
from windowseat.analysis.conditions import get_classifier
from windowseat.analysis.formatters import format_text, to_wire
from windowseat.config import load_config
from windowseat.errors import WindowSeatError
from windowseat.solar import get_solar_engine

logger = logging.getLogger(__name__)


def _json_envelope(command: str, ok: bool, data=None, error=None) -> dict:
    return {
        "ok": ok,
        "command": command,
        "timestamp_utc": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        "data": data,
        "error": error,
    }


def _init_logging(level: str | None) -> None:
    if not level:
        return
    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warn": logging.WARNING,
        "error": logging.ERROR,
    }
    logging.basicConfig(level=level_map.get(level, logging.INFO))


def _config_path_from_args(args) -> Path | None:
    if args is None:
        return None
    path = getattr(args, "config", None)
    return Path(path) if path else None


def _report_error(command: str, args, code: str, exc: Exception) -> None:
    if args is not None and getattr(args, "json", False):
        details = None
        codes = getattr(exc, "codes", None)
        if codes:
            details = {"codes": list(codes)}
        payload = _json_envelope(
            command=command,
            ok=False,
            data=None,
            error={"code": code, "message": str(exc), "details": details},
        )
        print(json.dumps(payload, indent=2))
    else:
        print(str(exc), file=sys.stderr)


def _load_route_setup(args):
    """Load the config and build what it selects, before any user input is read."""
    config = load_config(_config_path_from_args(args))
    engine = get_solar_engine(config)
    get_classifier(config.analysis_classifier, config.analysis_clock_basis)
    return config, engine


def run_route(args) -> int:
    _init_logging(getattr(args, "log_level", None))
    try:
        config, engine = _load_route_setup(args)
    except (ValueError, FileNotFoundError, WindowSeatError) as e:
        logger.debug("route setup failed", exc_info=True)
        _report_error("route", args, "route_failed", e)
        return 1

    try:
        query = parse_route_query(
            args.from_code,
            args.to_code,
            args.depart,
            getattr(args, "duration", None),
        )
        result = analyze_route(query, config=config, engine=engine)
    except ValueError as e:
        _report_error("route", args, "invalid_input", e)
        return 2
    except WindowSeatError as e:
        logger.debug("route failed", exc_info=True)
        _report_error("route", args, "route_failed", e)
        return 1

    if getattr(args, "json", False):
        payload = _json_envelope(command="route", ok=True, data=to_wire(result), error=None)
        print(json.dumps(payload, indent=2))
    else:
        print(format_text(result, verbose=getattr(args, "verbose", False)))
    return 0


def run_airports(args) -> int:
    _init_logging(getattr(args, "log_level", None))
    airports = list_airports()
    if getattr(args, "json", False):
        data = [
            {
                "code": a.code,
                "name": a.name,
                "lat": a.coordinate.latitude_deg,
                "lon": a.coordinate.longitude_deg,
            }
            for a in airports
        ]
        payload = _json_envelope(command="airports", ok=True, data=data, error=None)
        print(json.dumps(payload, indent=2))
    else:
        for a in airports:
            print(f"{a.code}  {a.name:28} {a.coordinate.label}")
    return 0


def run_doctor(args=None) -> int:
    _init_logging(getattr(args, "log_level", None))

    def check_config():
        try:
            load_config(_config_path_from_args(args))
            return {"ok": True, "detail": "loaded (defaults applied if missing)"}
        except Exception as e:
            return {"ok": False, "detail": f"invalid config: {e}"}

    def check_engine():
        try:
            config = load_config(_config_path_from_args(args))
            engine = get_solar_engine(config)
        except Exception as e:
            return {"ok": False, "detail": f"invalid solar backend: {e}"}
        return engine.is_available()

    checks = {
        "config": check_config(),
        "solar_engine": check_engine(),
        "airport_table": {"ok": bool(list_airports()), "detail": f"{len(list_airports())} airports"},
    }

    ok = all(c["ok"] for c in checks.values())

    if args is not None and getattr(args, "json", False):
        payload = _json_envelope(
            command="doctor",
            ok=ok,
            data={"checks": checks},
            error=None
            if ok
            else {
                "code": "doctor_failed",
                "message": "one or more checks failed",
                "details": None,
            },
        )
        print(json.dumps(payload, indent=2))
    else:
        print("Windowseat Doctor Report")
        print("========================")

        for name, result in checks.items():
            status = "OK" if result["ok"] else "MISSING"
            print(f"{name:20} : {status} ({result['detail']})")

        if ok:
            print("\nSystem ready.")
        else:
            print("\nSome components are missing or not configured.")

    return 0 if ok else 1
