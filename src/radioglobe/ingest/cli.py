from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from .config import load_settings
from .pipeline import load_population
from .recorder import write_snapshot

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fetch, normalize and sample radio stations for the globe."
    )
    parser.add_argument(
        "--output", type=Path, default=None, help="Write the population as JSON."
    )
    parser.add_argument("--log-level", default="INFO")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    snapshot = asyncio.run(load_population(load_settings()))
    health = snapshot.health()
    log.info(
        "source=%s stations=%d rejected=%d failed_endpoints=%d",
        health.source,
        health.population_size,
        health.rejected_records,
        len(health.failed_endpoints),
    )
    if args.output is not None:
        path = write_snapshot(args.output, snapshot)
        log.info("Wrote snapshot to %s", path)


if __name__ == "__main__":
    main()
