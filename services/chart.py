"""Line chart configuration for the daily averages window."""

from __future__ import annotations

from typing import Any, Dict, List

from services.aggregator import SeriesOutput

CHART_TITLE = "Soil Moisture, Temperature, and Humidity Over Time"

# (series attribute, legend label, line colour, fill colour)
_DATASETS = (
    ("soil_moisture", "Soil Moisture (%)", "rgba(75, 192, 192, 1)", "rgba(75, 192, 192, 0.2)"),
    ("temperature", "Soil Temperature (°C)", "rgba(255, 99, 132, 1)", "rgba(255, 99, 132, 0.2)"),
    ("humidity", "Soil Humidity (%)", "rgba(153, 102, 255, 1)", "rgba(153, 102, 255, 0.2)"),
)


def build_datasets(series: SeriesOutput) -> List[Dict[str, Any]]:
    return [
        {
            "label": label,
            "data": list(getattr(series, attribute)),
            "borderColor": border,
            "backgroundColor": background,
        }
        for attribute, label, border, background in _DATASETS
    ]


def build_chart_config(series: SeriesOutput) -> Dict[str, Any]:
    """Chart.js ``line`` configuration sharing one category axis across series."""
    return {
        "type": "line",
        "data": {
            "labels": list(series.labels),
            "datasets": build_datasets(series),
        },
        "options": {
            "responsive": True,
            "plugins": {
                "legend": {"position": "top"},
                "title": {"display": True, "text": CHART_TITLE},
            },
            "scales": {
                "y": {
                    "type": "linear",
                    "display": False,
                    "position": "left",
                    "title": {"display": True, "text": "Value"},
                }
            },
        },
    }
