"""ECharts candlestick option for a fortune payload."""

from typing import TYPE_CHECKING, Any

from ..config.defaults import ChartParams

if TYPE_CHECKING:
    from .base import ChartPayload


def _rgba(hex_color: str, alpha: float) -> str:
    """Convert #rrggbb to an rgba() string."""
    value = hex_color.lstrip("#")
    r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r}, {g}, {b}, {alpha})"


def build_option(payload: "ChartPayload", params: ChartParams) -> dict[str, Any]:
    """
    Build the dark-theme candlestick option.

    Candles use [open, close, low, high] rows on a category axis of month
    labels, with inside and slider zoom, peak/trough mark points and an
    average mark line.
    """
    accent = params.accent_color
    grid_line = _rgba(accent, 0.1)

    return {
        "backgroundColor": "transparent",
        "title": {
            "text": params.title,
            "left": "center",
            "textStyle": {"color": accent, "fontFamily": "monospace"},
        },
        "tooltip": {
            "trigger": "axis",
            "axisPointer": {"type": "cross", "label": {"backgroundColor": params.trough_color}},
            "backgroundColor": "rgba(20, 20, 30, 0.9)",
            "borderColor": accent,
            "textStyle": {"color": "#fff"},
        },
        "grid": {
            "left": "5%",
            "right": "5%",
            "bottom": "15%",
            "top": "10%",
            "containLabel": True,
            "borderColor": "#333",
        },
        "xAxis": {
            "type": "category",
            "data": list(payload.category_data),
            "scale": True,
            "boundaryGap": False,
            "axisLine": {"onZero": False, "lineStyle": {"color": accent}},
            "splitLine": {"show": True, "lineStyle": {"color": grid_line, "type": "dashed"}},
            "axisLabel": {"color": "#a0a0a0"},
            "min": "dataMin",
            "max": "dataMax",
        },
        "yAxis": {
            "scale": True,
            "splitArea": {"show": False},
            "splitLine": {"show": True, "lineStyle": {"color": grid_line}},
            "axisLine": {"lineStyle": {"color": accent}},
            "axisLabel": {"color": "#a0a0a0"},
        },
        "dataZoom": [
            {"type": "inside", "start": 0, "end": 100},
            {
                "show": True,
                "type": "slider",
                "top": "90%",
                "start": 0,
                "end": 100,
                "borderColor": _rgba(accent, 0.2),
                "fillerColor": _rgba(accent, 0.2),
                "textStyle": {"color": accent},
                "handleStyle": {
                    "color": accent,
                    "shadowBlur": 3,
                    "shadowColor": "rgba(0, 0, 0, 0.6)",
                    "shadowOffsetX": 2,
                    "shadowOffsetY": 2,
                },
            },
        ],
        "series": [
            {
                "name": params.series_name,
                "type": "candlestick",
                "data": [list(row) for row in payload.values],
                "itemStyle": {
                    "color": params.up_color,
                    "color0": params.down_color,
                    "borderColor": params.up_color,
                    "borderColor0": params.down_color,
                },
                "markPoint": {
                    "data": [
                        {"type": "max", "name": "Peak", "itemStyle": {"color": params.peak_color}},
                        {"type": "min", "name": "Trough", "itemStyle": {"color": params.trough_color}},
                    ],
                    "label": {"color": "#fff"},
                },
                "markLine": {
                    "symbol": ["none", "none"],
                    "data": [
                        {
                            "type": "average",
                            "name": "Average",
                            "lineStyle": {"color": params.peak_color, "type": "dashed"},
                        }
                    ],
                    "label": {"color": params.peak_color, "position": "end"},
                },
            }
        ],
    }
