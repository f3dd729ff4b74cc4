import argparse
import logging
import sys

from collinear_exhaustive import ExhaustiveDetector
from collinear_fast import FastDetector
from points_io import read_points
from settings import DEFAULT_ALGORITHM, DEFAULT_WORKERS, LOGGING_CONFIG

logger = logging.getLogger(__name__)

ALGORITHMS = {
    "fast": FastDetector,
    "exhaustive": ExhaustiveDetector,
}

# algorithms accepting a `workers` argument
THREADED_ALGORITHMS = {"fast"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find line segments through 4 or more collinear points.",
    )
    parser.add_argument("input", help="file with a point count followed by x y pairs")
    parser.add_argument("--algorithm", choices=sorted(ALGORITHMS), default=DEFAULT_ALGORITHM)
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS,
                        help="threads scanning origins (fast algorithm only)")
    parser.add_argument("--plot", action="store_true", help="draw points and segments")
    parser.add_argument("--log-level", default=logging.getLevelName(LOGGING_CONFIG["level"]),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def run(args: argparse.Namespace) -> int:
    try:
        points = read_points(args.input)
        options = {"workers": args.workers} if args.algorithm in THREADED_ALGORITHMS else {}
        detector = ALGORITHMS[args.algorithm](points, **options)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to detect segments in {args.input}: {e}")
        return 1

    segments = detector.segments()
    for segment in segments:
        print(segment)
    print(detector.number_of_segments())

    if args.plot:
        import matplotlib.pyplot as plt
        from visualization import plot_detection

        plot_detection(points, segments)
        plt.show()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.workers != DEFAULT_WORKERS and args.algorithm not in THREADED_ALGORITHMS:
        parser.error(f"--workers is not supported by the {args.algorithm} algorithm")
    logging.basicConfig(**{**LOGGING_CONFIG, "level": args.log_level})
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
