"""Single live chart ownership."""

from collections.abc import Callable
from typing import Optional

from ..data.models import Series
from ..logging.config import get_session_logger
from .base import BaseChartRenderer, ChartHandle


class ChartSession:
    """
    Owns at most one live chart handle.

    ``show`` releases the current chart before building and acquiring the
    next one, so two handles are never live at once.
    """

    def __init__(self, renderer: BaseChartRenderer):
        self.renderer = renderer
        self.current: Optional[ChartHandle] = None
        self.logger = get_session_logger(__name__)

    def release_current(self) -> None:
        """Release the displayed chart, if any."""
        if self.current is None:
            return
        handle, self.current = self.current, None
        self.renderer.release(handle)
        self.logger.debug("Session chart released", handle_id=handle.handle_id)

    def show(self, build: Callable[[], Series]) -> tuple[Series, ChartHandle]:
        """
        Replace the displayed chart.

        Args:
            build: Produces the new series; called after the old chart is released

        Returns:
            The new series and its live handle
        """
        self.release_current()
        series = build()
        self.current = self.renderer.acquire(series)
        self.logger.debug("Session chart acquired", handle_id=self.current.handle_id)
        return series, self.current

    def close(self) -> None:
        self.release_current()

    def __enter__(self) -> "ChartSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
