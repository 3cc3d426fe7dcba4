import argparse
from collections.abc import Sequence

from pydantic import ValidationError

from itempipe.config.settings import Settings
from itempipe.logging.logger import Log
from itempipe.processor.engine import build_engine
from itempipe.worker.batch_worker import BatchWorker
from itempipe.worker.models import SourceResult
from itempipe.worker.source_runner import SourceRunner

DEMO_SOURCES: tuple[str, ...] = (
    "file://example.zip",
    "http://example.jpg",
    "https://example.json",
    "bundle://example.zip",
    "ftp://example.jpg",
    "file://example.exe",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="itempipe",
        description="Acquire sources and dispatch them through type-specific handlers.",
    )
    parser.add_argument(
        "sources",
        nargs="*",
        help="Source identifiers (file://, http(s)://, bundle://). Defaults to a demo set.",
    )
    parser.add_argument("--workers", type=int, help="Thread pool size for the batch")
    parser.add_argument("--seed", type=int, help="Seed for decompress extension choice")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command-line overrides applied.

    Raises:
        ValidationError: if an override or environment value is invalid.
    """
    overrides: dict[str, object] = {}
    if args.workers is not None:
        overrides["batch_max_workers"] = args.workers
    if args.seed is not None:
        overrides["random_seed"] = args.seed
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return Settings(**overrides)


def describe_validation_error(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )


def format_result(result: SourceResult) -> str:
    lines = [f"Processing: {result.source_id}"]
    if result.record is not None:
        record = result.record
        lines.append(f"Source: {record.source_id}")
        lines.append(f"Origin: {record.origin}")
        lines.append(f"Content: {record.description}")
        lines.append("Metadata:")
        lines.extend(f" - {key}: {value}" for key, value in sorted(record.annotations.items()))
    if result.error is not None:
        lines.append(f"Failed: {result.error}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> engine -> batch -> print results."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = load_settings(args)
    except ValidationError as exc:
        parser.error(describe_validation_error(exc))
    Log.configure(settings.log_level)

    engine = build_engine(settings)
    runner = SourceRunner(engine, settings)
    worker = BatchWorker(runner, settings)
    results = worker.run(args.sources or DEMO_SOURCES)

    for result in results:
        print(format_result(result))
        print()
    return 0 if all(result.succeeded for result in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
