from dataclasses import dataclass


@dataclass(frozen=True)
class ChartPoint:
    """One labeled bar of a chart"""
    label: str
    value: float
    fill: str
