"""Base classes for chart rendering targets."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import structlog

from ..config.defaults import ChartParams
from ..data.models import Series
from ..errors import RenderingError
from .option import build_option


@dataclass(frozen=True)
class ChartPayload:
    """Data contract handed to the charting engine."""
    category_data: list[str]
    values: list[list[float]]

    @classmethod
    def from_series(cls, series: Series) -> "ChartPayload":
        return cls(category_data=series.labels, values=series.values)

    def to_dict(self) -> dict[str, Any]:
        return {"categoryData": self.category_data, "values": self.values}

    def __len__(self) -> int:
        return len(self.values)


@dataclass
class ChartHandle:
    """A live rendered chart. Valid until released."""
    handle_id: str
    renderer: str
    payload: ChartPayload
    option: dict[str, Any] = field(default_factory=dict)
    target: Optional[Path] = None
    released: bool = False


class BaseChartRenderer(ABC):
    """
    Base class for chart rendering targets.

    Subclasses render an option dict in ``_render`` and free whatever they
    created in ``_dispose``. The base class tracks live handles and rejects
    double releases.
    """

    def __init__(self, name: str, params: Optional[ChartParams] = None):
        self.name = name
        self.params = params or ChartParams()
        self.logger = structlog.get_logger(f"chart.renderer.{name}")
        self.live_handles: dict[str, ChartHandle] = {}
        self._acquire_count = 0
        self._release_count = 0

    @abstractmethod
    def _render(self, handle: ChartHandle) -> None:
        """Render a freshly built handle."""
        pass

    @abstractmethod
    def _dispose(self, handle: ChartHandle) -> None:
        """Free resources held by a handle."""
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """Check if the rendering target is usable."""
        pass

    def build_option(self, payload: ChartPayload) -> dict[str, Any]:
        """Chart option for a payload. Defaults to the ECharts candlestick layout."""
        return build_option(payload, self.params)

    def acquire(self, series: Series) -> ChartHandle:
        """
        Render a series and return its handle.

        Raises:
            RenderingError: If the rendering target fails
        """
        self._acquire_count += 1
        payload = ChartPayload.from_series(series)
        handle = ChartHandle(
            handle_id=f"{self.name}-{self._acquire_count}",
            renderer=self.name,
            payload=payload,
            option=self.build_option(payload),
        )

        try:
            self._render(handle)
        except OSError as e:
            raise RenderingError(
                f"Failed to render chart: {e}",
                renderer=self.name,
                handle_id=handle.handle_id
            ) from e

        self.live_handles[handle.handle_id] = handle
        self.logger.info(
            "Chart acquired",
            renderer=self.name,
            handle_id=handle.handle_id,
            points=len(payload)
        )
        return handle

    def release(self, handle: ChartHandle) -> None:
        """
        Dispose a live handle.

        Raises:
            RenderingError: If the handle is unknown or already released
        """
        if handle.released or handle.handle_id not in self.live_handles:
            raise RenderingError(
                "Chart handle is not live",
                renderer=self.name,
                handle_id=handle.handle_id
            )

        try:
            self._dispose(handle)
        except OSError as e:
            raise RenderingError(
                f"Failed to dispose chart: {e}",
                renderer=self.name,
                handle_id=handle.handle_id
            ) from e
        finally:
            handle.released = True
            del self.live_handles[handle.handle_id]

        self._release_count += 1
        self.logger.info("Chart released", renderer=self.name, handle_id=handle.handle_id)

    def get_stats(self) -> dict[str, Any]:
        """Get rendering statistics."""
        return {
            "name": self.name,
            "acquire_count": self._acquire_count,
            "release_count": self._release_count,
            "live_count": len(self.live_handles),
        }
