#!/usr/bin/env python3
"""Generate a ten-year fortune chart and first-year narrative for a birth date."""

import argparse
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fortune_app.config.defaults import chart_params_from_dict
from fortune_app.config.loader import ConfigLoader
from fortune_app.engine import FortuneEngine
from fortune_app.errors import InputError, SystemFailureError
from fortune_app.logging import configure_logging
from fortune_app.rendering import FileChartRenderer
from fortune_app.synthesis import seeded_source


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("birth_date", help="Gregorian birth date, YYYY-MM-DD")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    parser.add_argument("--output", default="output/fortune.html", help="Chart output path")
    parser.add_argument("--format", choices=["html", "json"], default=None,
                        help="Chart file format (defaults to the configured format)")
    parser.add_argument("--config-dir", default=None, help="Directory holding fortune.yaml")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(level=args.log_level, format_json=args.json_logs)

    try:
        config = ConfigLoader.create(args.config_dir).load_validated()
        renderer = FileChartRenderer(
            args.output,
            params=chart_params_from_dict(config["chart"]),
            output_format=args.format
        )
        engine = FortuneEngine(
            config_dir=args.config_dir,
            renderer=renderer,
            random_source=seeded_source(args.seed),
        )
        report = engine.generate(args.birth_date)
    except InputError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2
    except SystemFailureError as e:
        print(f"❌ Generation failed: {e}", file=sys.stderr)
        return 1

    for line in report.narrative.lines():
        print(line)
    print(f"\n📈 Chart written to {report.chart.target} ({len(report.series)} months)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
