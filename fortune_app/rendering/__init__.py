"""Chart rendering boundary: payload contract, renderers and session ownership."""

from .base import BaseChartRenderer, ChartHandle, ChartPayload
from .echarts import EChartsRenderer
from .option import build_option
from .file_renderer import FileChartRenderer
from .session import ChartSession

__all__ = [
    "BaseChartRenderer",
    "ChartHandle",
    "ChartPayload",
    "EChartsRenderer",
    "build_option",
    "FileChartRenderer",
    "ChartSession",
]
