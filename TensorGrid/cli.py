#!/usr/bin/env python3
"""Console-script entry point: ``tensorgrid-layout``.

Compute a layout without the web app and write it as CSV or JSON.

Examples
--------
    tensorgrid-layout "2, 3, 4, 5" --labels "B, C, H, W" -o cells.csv
    tensorgrid-layout "2,3,4,5" --mode slicing --slice 3=4 --format json
    tensorgrid-layout --data tensor.json --settings settings.json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

from TensorGrid.core.axes import DIM_ORDERS, MODES, TILING
from TensorGrid.core.session import ViewSession
from TensorGrid.core.settings import save_settings
from TensorGrid.core.utils import layout_to_dataframe

FORMATS = ("csv", "json")


def _parse_slices(items: List[str]) -> Dict[int, int]:
    """Turn ``["3=4", "0=1"]`` into ``{3: 4, 0: 1}``."""
    slices = {}
    for item in items:
        dim, sep, index = item.partition("=")
        if not sep:
            raise ValueError(f"Slice must look like DIM=INDEX, got {item!r}")
        slices[int(dim)] = int(index)
    return slices


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tensorgrid-layout",
        description="Lay out a tensor shape as 3D cubes and export the cells.",
    )
    parser.add_argument("shape", nargs="?", default="",
                        help='Shape text, e.g. "2, 3, 4, 5" or "B: 2, C: 3"')
    parser.add_argument("--data", type=Path,
                        help="JSON file with a nested array; overrides SHAPE")
    parser.add_argument("--labels", default="",
                        help='Comma-separated dim labels, e.g. "B, C, H, W"')
    parser.add_argument("--mode", choices=MODES, default=TILING)
    parser.add_argument("--dim-order", choices=DIM_ORDERS, default=None)
    parser.add_argument("--max-cells", type=int, default=None,
                        help="Max cells per dimension (2-20)")
    parser.add_argument("--slice", action="append", default=[], metavar="DIM=INDEX",
                        help="Index to show for a sliced dim (repeatable)")
    parser.add_argument("--format", choices=FORMATS, default=None,
                        help="Output format (default: from -o suffix, else csv)")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Output file (default: stdout)")
    parser.add_argument("--settings", type=Path, default=None,
                        help="Also write the layout settings JSON here")
    return parser


def _output_format(args) -> str:
    if args.format:
        return args.format
    if args.output is not None and args.output.suffix.lower() == ".json":
        return "json"
    return "csv"


def main(argv: Optional[List[str]] = None) -> int:
    """Compute a layout from command-line arguments and export it."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        slices = _parse_slices(args.slice)
    except ValueError as exc:
        parser.error(str(exc))

    data_text = ""
    if args.data is not None:
        try:
            data_text = args.data.read_text(encoding="utf-8")
        except OSError as exc:
            parser.error(f"Cannot read data file: {exc}")

    if not args.shape and not data_text:
        parser.error("Give a SHAPE or --data.")

    session = ViewSession(
        shape_text=args.shape,
        labels_text=args.labels,
        data_text=data_text,
        mode=args.mode,
        dim_order=args.dim_order,
        max_cells=args.max_cells,
    )
    if data_text and session.tensor is None:
        parser.error(f"{args.data} does not contain a JSON array.")
    for dim, index in slices.items():
        session.set_slice_index(dim, index)

    instances = session.layout()

    if _output_format(args) == "json":
        text = json.dumps([inst.to_dict() for inst in instances], indent=2)
    else:
        text = layout_to_dataframe(instances, session.labels).to_csv(index=False)

    if args.output is None:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text, encoding="utf-8")
        print(f"  ✓ Saved {len(instances)} cells to: {args.output}")

    if args.settings is not None:
        save_settings(session.settings(), args.settings)

    return 0


if __name__ == "__main__":
    sys.exit(main())
