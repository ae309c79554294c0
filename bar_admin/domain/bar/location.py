from __future__ import annotations

from decimal import Decimal, InvalidOperation

LAT_RANGE = (-90.0, 90.0)
LON_RANGE = (-180.0, 180.0)


def parse_coordinate(value: str | float | int | None, *, kind: str) -> float | None:
    """Parse a latitude/longitude field coming from a number input.

    Empty input means "not set". Values are rounded to the six decimals the
    column stores.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return None
    try:
        number = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Invalid {kind}") from exc
    if not number.is_finite():
        raise ValueError(f"Invalid {kind}")
    low, high = LAT_RANGE if kind == "lat" else LON_RANGE
    result = round(float(number), 6)
    if result < low or result > high:
        raise ValueError(f"{kind} out of range")
    return result


def location_wkt(lat: float | None, lon: float | None) -> str | None:
    if lat is None or lon is None:
        return None
    # WKT puts longitude first
    return f"POINT({float(lon)} {float(lat)})"
