from __future__ import annotations
import argparse
import logging
import math
import sys
from typing import List, Optional, Sequence

from .config import QuantizeOptions
from .errors import InvalidDimensionalityError, MedianCutError
from .median_cut import median_cut
from .point import VectorPoint

logger = logging.getLogger(__name__)


def _parse_number(s: str) -> float:
    try:
        value = float(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {s}")
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"not a finite number: {s}")
    return int(value) if value.is_integer() else value


def build_points(values: Sequence[float], options: QuantizeOptions) -> List[VectorPoint]:
    d = options.dimensions
    if len(values) % d != 0:
        raise InvalidDimensionalityError(
            f"{len(values)} values cannot be grouped into {d}-D points")
    return [VectorPoint(values[i:i + d], dtype=options.dtype, dimensions=d)
            for i in range(0, len(values), d)]


def _format_point(point) -> str:
    return " ".join(str(point.get(d)) for d in range(point.dimensions()))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Median-cut quantization of points given as a flat list of values."
    )
    ap.add_argument("values", nargs="*", type=_parse_number,
                    help="Point coordinates, D values per point.")
    ap.add_argument("--levels", "-k", type=int, required=True,
                    help="Desired number of clusters (<= 1 gives the global mean).")
    ap.add_argument("--dimensions", "-d", type=int, default=1,
                    help="Values per point (default: 1).")
    ap.add_argument("--dtype", default="float32",
                    help="numpy dtype of the point values, e.g. int8, uint8, float32 (default: float32).")
    ap.add_argument("--log-level", default="INFO",
                    help="DEBUG|INFO|WARNING|ERROR (default: INFO).")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        options = QuantizeOptions.from_args(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=options.numeric_log_level,
        format="%(asctime)s [%(relativeCreated).0fms] %(levelname)s %(name)s: %(message)s",
    )

    try:
        points = build_points(args.values, options)
        representatives = median_cut(points, options.levels, options.factory())
    except MedianCutError as exc:
        logger.error("%s", exc)
        return 2
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        return 2

    for point in representatives:
        print(_format_point(point))
    logger.info("Wrote %d representatives.", len(representatives))
    return 0


if __name__ == "__main__":
    sys.exit(main())
