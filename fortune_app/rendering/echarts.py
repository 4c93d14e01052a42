"""In-memory ECharts renderer."""

from .base import BaseChartRenderer, ChartHandle


class EChartsRenderer(BaseChartRenderer):
    """
    Keeps rendered options in memory.

    Suits callers that ship the option to a browser themselves, and tests.
    """

    def __init__(self, name: str = "echarts", params=None):
        super().__init__(name, params)

    def _render(self, handle: ChartHandle) -> None:
        self.logger.debug("Option built", handle_id=handle.handle_id, series=len(handle.option["series"]))

    def _dispose(self, handle: ChartHandle) -> None:
        handle.option = {}

    def health_check(self) -> bool:
        return True
