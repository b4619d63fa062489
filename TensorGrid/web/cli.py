#!/usr/bin/env python3
"""Console-script entry point for the TensorGrid web app.

Commands
--------
tensorgrid          tensorgrid [port] [--max-cells N] [--dim-order ORDER]
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path
from typing import Optional

from TensorGrid.core.axes import DIM_ORDERS
from TensorGrid.core.config import (
    DEFAULT_PORT, ENV_DIM_ORDER, ENV_MAX_CELLS, MAX_CELLS_RANGE,
)


def _launch_streamlit(port: int, env: Optional[dict] = None) -> int:
    app_path = Path(__file__).resolve().parent / "app.py"
    return subprocess.call(
        [
            sys.executable,
            "-m",
            "streamlit",
            "run",
            str(app_path),
            "--server.headless",
            "true",
            "--server.port",
            str(port),
        ],
        env=env,
    )


def _validate_port(port: int) -> int:
    if not (1 <= port <= 65535):
        raise ValueError("Port must be between 1 and 65535.")
    return port


def _validate_max_cells(value: int) -> int:
    low, high = MAX_CELLS_RANGE
    if not (low <= value <= high):
        raise ValueError(f"Max cells must be between {low} and {high}.")
    return value


def main():
    """Launch the TensorGrid web app via `tensorgrid [port]`."""
    parser = argparse.ArgumentParser(
        prog="tensorgrid",
        description="Launch the TensorGrid tensor-shape viewer.",
    )
    parser.add_argument(
        "port",
        nargs="?",
        type=int,
        default=DEFAULT_PORT,
        help=f"Streamlit port (default: {DEFAULT_PORT})",
    )
    parser.add_argument(
        "--max-cells",
        type=int,
        default=None,
        help="Initial max cells per dimension",
    )
    parser.add_argument(
        "--dim-order",
        choices=DIM_ORDERS,
        default=None,
        help="Initial dimension order",
    )

    args = parser.parse_args()

    try:
        port = _validate_port(args.port)
        if args.max_cells is not None:
            _validate_max_cells(args.max_cells)
    except ValueError as exc:
        parser.error(str(exc))

    env = os.environ.copy()
    if args.max_cells is not None:
        env[ENV_MAX_CELLS] = str(args.max_cells)
    if args.dim_order is not None:
        env[ENV_DIM_ORDER] = args.dim_order

    sys.exit(_launch_streamlit(port, env=env))


if __name__ == "__main__":
    main()
