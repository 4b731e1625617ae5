from __future__ import annotations

import argparse
import sys

from profile_chart_studio.utils.log import log_event, set_log_path
from profile_chart_studio.version import APP_TITLE, BUILD_VERSION


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="profile-chart-studio", description=f"{APP_TITLE} web UI")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8050)
    parser.add_argument("--debug", dest="debug", action="store_true", default=False)
    parser.add_argument("--no-debug", dest="debug", action="store_false")
    parser.add_argument("--reloader", dest="use_reloader", action="store_true", default=False)
    parser.add_argument("--no-reloader", dest="use_reloader", action="store_false")
    parser.add_argument("--log-file", default="", help="Diagnostics log path (default: ~/ProfileChartStudio_error.log)")
    parser.add_argument("--version", action="version", version=f"{APP_TITLE} {BUILD_VERSION}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    log_path = set_log_path(args.log_file)
    log_event("startup", f"{APP_TITLE} {BUILD_VERSION} on {args.host}:{args.port} (log: {log_path})")

    from profile_chart_studio.ui.dash_app import main as dash_main

    dash_main(host=args.host, port=args.port, debug=args.debug, use_reloader=args.use_reloader)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
