"""File-based chart renderer writing ECharts options as JSON or HTML."""

import html
import re
from pathlib import Path
from typing import Optional

import orjson

from ..config.defaults import ChartParams
from ..errors import RenderingError
from .base import BaseChartRenderer, ChartHandle

SUPPORTED_FORMATS = ("json", "html")

PLACEHOLDER = re.compile(r"__(TITLE|CDN|UP|DOWN|OPTION)__")

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>__TITLE__</title>
<script src="__CDN__"></script>
<style>
  body { margin: 0; background: #0a0a14; }
  #klineChart { width: 100vw; height: 100vh; }
</style>
</head>
<body>
<div id="klineChart"></div>
<script>
  const option = __OPTION__;
  option.tooltip.formatter = function (params) {
    const p = params[0];
    const [open, close, low, high] = p.value.slice(1);
    const color = close > open ? __UP__ : __DOWN__;
    return `<div style="font-family: monospace;">${p.name}<br/>` +
      `<span style="color:${color}">Open: ${open}<br/>Close: ${close}<br/>` +
      `Low: ${low}<br/>High: ${high}</span></div>`;
  };
  const chart = echarts.init(document.getElementById("klineChart"));
  chart.setOption(option);
  window.addEventListener("resize", () => chart.resize());
</script>
</body>
</html>
"""


class FileChartRenderer(BaseChartRenderer):
    """Writes each acquired chart to a file and removes it on release."""

    def __init__(self, output_path: str, name: str = "file",
                 params: Optional[ChartParams] = None, output_format: Optional[str] = None,
                 create_dirs: bool = True):
        super().__init__(name, params)
        self.output_path = Path(output_path)
        self.output_format = output_format or self.params.output_format
        self.create_dirs = create_dirs

        if self.output_format not in SUPPORTED_FORMATS:
            raise RenderingError(f"Unsupported format: {self.output_format}", renderer=name)

    def _render(self, handle: ChartHandle) -> None:
        if self.create_dirs:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)

        if self.output_format == "json":
            content = orjson.dumps(
                {"payload": handle.payload.to_dict(), "option": handle.option},
                option=orjson.OPT_INDENT_2,
            )
        else:
            content = self._render_html(handle).encode("utf-8")

        self.output_path.write_bytes(content)
        handle.target = self.output_path

        self.logger.info(
            "Chart written to file",
            handle_id=handle.handle_id,
            output_path=str(self.output_path),
            format=self.output_format
        )

    def _render_html(self, handle: ChartHandle) -> str:
        values = {
            "TITLE": html.escape(self.params.title),
            "CDN": html.escape(self.params.echarts_cdn),
            "UP": _script_literal(self.params.up_color),
            "DOWN": _script_literal(self.params.down_color),
            "OPTION": _script_literal(handle.option),
        }
        # Substituted text is never rescanned for placeholders
        return PLACEHOLDER.sub(lambda m: values[m.group(1)], HTML_TEMPLATE)

    def _dispose(self, handle: ChartHandle) -> None:
        if handle.target is not None:
            handle.target.unlink(missing_ok=True)

    def health_check(self) -> bool:
        """Check if the output directory is writable."""
        parent = self.output_path.parent
        if parent.exists():
            return parent.is_dir()
        return self.create_dirs


def _script_literal(value) -> str:
    """JSON literal safe to embed inside a <script> element."""
    return orjson.dumps(value).decode("utf-8").replace("</", "<\\/")
