import json

from windowseat.util.format import format_clock, format_degrees, format_iso_millis
from .types import (
    FlightSunReport,
    RouteResult,
    SideVisibility,
    SolarSample,
    SunEvent,
    Waypoint,
)


def _waypoint_wire(w: Waypoint) -> dict:
    return {
        "lat": w.latitude_deg,
        "lon": w.longitude_deg,
        "time": format_iso_millis(w.time_utc),
    }


def _sun_position_wire(s: SolarSample) -> dict:
    return {
        "lat": s.waypoint.latitude_deg,
        "lon": s.waypoint.longitude_deg,
        "time": format_iso_millis(s.time_utc),
        "azimuth": s.azimuth.degrees,
        "elevation": s.elevation_deg,
    }


def _timeline_wire(s: SolarSample) -> dict:
    return {
        "time": format_iso_millis(s.time_utc),
        "timeString": format_clock(s.time_utc),
        "lat": s.waypoint.latitude_deg,
        "lon": s.waypoint.longitude_deg,
        "sunElevation": s.elevation_deg,
        "sunAzimuth": s.azimuth.degrees,
        "condition": s.condition.value,
        "progressPercent": s.progress * 100.0,
    }


def _event_wire(event: SunEvent | None) -> dict | None:
    if event is None:
        return None
    return {
        "time": format_iso_millis(event.time_utc),
        "timeString": format_clock(event.time_utc),
        "location": event.location,
        "lat": event.coordinate.latitude_deg,
        "lon": event.coordinate.longitude_deg,
        "progressPercent": event.progress * 100.0,
    }


def _views_wire(views: SideVisibility | None) -> dict | None:
    if views is None:
        return None
    return {"sunrise": views.sunrise, "sunset": views.sunset, "night": views.night}


def report_to_wire(report: FlightSunReport) -> dict:
    payload = {
        "willSeeSunrise": report.will_see_sunrise,
        "willSeeSunset": report.will_see_sunset,
        "willSeeNight": report.will_see_night,
        "willSeeGoldenHour": report.will_see_golden_hour,
        "summary": list(report.summary),
        "recommendations": list(report.recommendations),
        "seatSuggestion": report.seat_suggestion.value,
        "timeline": [_timeline_wire(s) for s in report.timeline],
    }
    # The fallback payload carries only the fields above.
    if report.night_minutes_source is None:
        return payload
    payload.update(
        {
            "sunrise": _event_wire(report.sunrise),
            "sunset": _event_wire(report.sunset),
            "nightDuration": report.night_minutes,
            "dayDuration": report.day_minutes,
            "goldenHourDuration": report.golden_hour_minutes,
            "nightDurationSource": report.night_minutes_source,
            "mountains": list(report.mountains),
            "mountainCount": report.mountain_count,
            "leftViews": _views_wire(report.left_views),
            "rightViews": _views_wire(report.right_views),
        }
    )
    return payload


def to_wire(result: RouteResult) -> dict:
    return {
        "path": [_waypoint_wire(w) for w in result.path],
        "sunPositions": [_sun_position_wire(s) for s in result.sun_positions],
        "recommendation": result.recommendation.value,
        "enhancedAnalysis": report_to_wire(result.enhanced_analysis),
    }


def format_json(result: RouteResult) -> str:
    return json.dumps(to_wire(result), indent=2)


def format_text(result: RouteResult, verbose: bool = False) -> str:
    lines: list[str] = []
    query = result.query
    report = result.enhanced_analysis
    lines.append("Window Seat Advisor")
    lines.append("===================")
    lines.append(f"Route: {query.from_code} → {query.to_code}")
    lines.append(f"Departure (UTC): {query.departure_utc.strftime('%Y-%m-%d %H:%M')}")
    if query.duration_minutes is not None:
        lines.append(f"Duration: {query.duration_minutes:.0f} min")
    if result.distance_km is not None:
        lines.append(f"Distance: {result.distance_km:.0f} km")
    if result.flight_bearing is not None:
        lines.append(f"Heading: {format_degrees(result.flight_bearing.degrees)}")

    lines.append("")
    rec = result.recommendation
    if rec.side is None:
        lines.append(f"Recommendation: {rec.message}")
    else:
        lines.append(f"Recommendation: {rec.side.value.upper()} window")
        if verbose and rec.mean_azimuth is not None:
            lines.append(
                f"  mean sun azimuth {format_degrees(rec.mean_azimuth.degrees)}, "
                f"relative {format_degrees(rec.relative_bearing_deg)}, "
                f"{rec.visible_samples} visible samples"
            )

    lines.append("")
    lines.append("Sun report")
    lines.append("----------")
    for line in report.summary:
        lines.append(f"- {line}")
    if report.night_minutes_source is not None:
        lines.append(f"Seat suggestion: {report.seat_suggestion.value}")
    for line in report.recommendations:
        lines.append(f"* {line}")

    if verbose and report.timeline:
        lines.append("")
        lines.append("Timeline")
        lines.append("--------")
        for s in report.timeline:
            lines.append(
                f"{format_clock(s.time_utc)}  {s.progress * 100.0:5.1f}%  "
                f"el {s.elevation_deg:6.1f}°  az {s.azimuth.degrees:6.1f}°  "
                f"{s.condition.value}"
            )
    return "\n".join(lines)
