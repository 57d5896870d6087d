import time


def calculate_ms(t0: float) -> float:
    """Calculate milliseconds elapsed since t0."""
    return round((time.perf_counter() - t0) * 1000.0, 2)
