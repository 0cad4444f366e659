#!/usr/bin/env python
"""Entry point for the vizlab Dash app.

Usage
-----
    python run_app.py [--data path/to/iris.csv] [--seed 42]

Export the strip plot as a standalone HTML page instead of serving:
    python run_app.py --export-strip stripplot.html
"""

from __future__ import annotations

import argparse
import os

from vizlab.io import load_dataset
from vizlab.visualization import build_strip_figure, build_strip_layout


def main() -> None:
    parser = argparse.ArgumentParser(description="Launch the vizlab web app")
    parser.add_argument(
        "--data", default=None,
        help="CSV with 'species' and 'sepalWidth' columns (default: bundled iris.csv)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the strip plot jitter (default: random)",
    )
    parser.add_argument(
        "--export-strip", default=None, metavar="HTML",
        help="Write the strip plot to this HTML file and exit",
    )
    parser.add_argument(
        "--host", default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port", type=int, default=8050,
        help="Port to serve on (default: 8050)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Run Dash in debug mode",
    )
    args = parser.parse_args()

    print(f"Loading data from {args.data or 'bundled iris.csv'}...")
    df = load_dataset(args.data)
    print(f"  Loaded {len(df):,} rows, {df['species'].nunique()} species")

    if args.export_strip:
        layout = build_strip_layout(df, random_state=args.seed)
        out_dir = os.path.dirname(os.path.abspath(args.export_strip))
        os.makedirs(out_dir, exist_ok=True)
        build_strip_figure(layout).write_html(args.export_strip, include_plotlyjs="cdn")
        print(f"Strip plot saved to {args.export_strip}")
        return

    print(f"Starting Dash app on http://{args.host}:{args.port}/")

    from vizlab.app import create_app
    app = create_app(df, random_state=args.seed)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
