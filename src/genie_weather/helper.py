def clamp(raw: float, min_val: float, max_val: float) -> float:
    lower = min(min_val, max_val)
    upper = max(min_val, max_val)
    clamped = max(lower, min(upper, raw))

    return clamped


def temperature_gauge_value(temperature: int) -> int:
    """Map [-10, 40] degrees onto the [0, 100] range of a history gauge."""
    return int(clamp(temperature + 10, 0, 50)) * 2


def thermometer_value(temperature: int) -> int:
    # Thermometers are configured with a 0..50 range, starting at -10
    return int(clamp(temperature + 10, 0, 50))


def pressure_gauge_value(pressure: int) -> int:
    """Live pressure relative to the 940 hPa baseline, 0..120."""
    return int(clamp(pressure - 940, 0, 120))


def pressure_history_value(pressure: int) -> int:
    # History gauges use a 0..100 range
    return pressure_gauge_value(pressure) * 100 // 120
