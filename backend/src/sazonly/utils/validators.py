def safe_float(x) -> float:
    try:
        return float(x)
    except (TypeError, ValueError):
        return 0.0
