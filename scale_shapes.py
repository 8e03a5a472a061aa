from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Iterator, List, Optional, Sequence, TextIO, Tuple

from shapes import ShapeError
from composition import DriverConfig, PlotConfig, ReportConfig, default_scene, format_report
from composition.config import LOG_LEVEL, PLOT_COLS, REPORT_PRECISION
from composition.logging_config import setup_logging
from plotting.renderer import render_history_grid


logger = logging.getLogger("scale_shapes")


class InputFormatError(ValueError):
    pass


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Scale a set of shapes about points read from stdin as 'x y k' triples."
    )
    p.add_argument("--precision", type=int, default=REPORT_PRECISION, help="decimals in the report (default: 1)")
    p.add_argument("--plot", type=str, default=None, help="write a grid of every step to this .png/.svg file")
    p.add_argument("--cols", type=int, default=PLOT_COLS, help="columns in the plot grid")
    p.add_argument("--log-level", type=str, default=LOG_LEVEL, help="logging level (default: WARNING)")
    p.add_argument("--log-file", type=str, default=None, help="also write logs to this file")
    return p.parse_args(argv)


def iter_triples(stream: TextIO) -> Iterator[Tuple[float, float, float]]:
    """
    Yields (x, y, k) from whitespace-separated numbers.
    Raises InputFormatError on a token that is not a finite number or on
    a trailing incomplete triple.
    """
    pending: List[float] = []
    for line in stream:
        for tok in line.split():
            try:
                v = float(tok)
            except ValueError:
                raise InputFormatError(f"not a number: {tok!r}") from None
            if not math.isfinite(v):
                raise InputFormatError(f"not a finite number: {tok!r}")
            pending.append(v)
            if len(pending) == 3:
                yield pending[0], pending[1], pending[2]
                pending = []
    if pending:
        raise InputFormatError(f"incomplete triple at end of input: {pending}")


def main(argv: Optional[Sequence[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    args = parse_args(argv)
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    cfg = DriverConfig(
        report=ReportConfig(precision=args.precision),
        plot=PlotConfig(cols=args.cols),
        log_level=args.log_level,
    )
    setup_logging(cfg.log_level, args.log_file)

    scene = default_scene()
    history = [scene.snapshot()]
    titles = ["initial"]
    print(format_report(scene, cfg.report), file=stdout)

    status = 0
    steps = 0
    try:
        for x, y, k in iter_triples(stdin):
            scene.scale_about((x, y), k)
            steps += 1
            logger.debug("Step %d: scaled by %s about (%s, %s)", steps, k, x, y)
            history.append(scene.snapshot())
            titles.append(f"({x:g}, {y:g}) x{k:g}")
            print(format_report(scene, cfg.report), file=stdout)
    except InputFormatError as e:
        logger.error("Malformed input: %s", e)
        status = 1
    except ShapeError as e:
        logger.error("Cannot scale: %s", e)
        status = 1

    if status == 0 and steps == 0:
        logger.error("No 'x y k' triple was read")
        status = 1

    if args.plot:
        render_history_grid(history, args.plot, cfg.plot, titles=titles)

    return status


if __name__ == "__main__":
    sys.exit(main())
