from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from drawengine.store import JsonResultStore
from drawengine.types import DrawResultRecord, EngineState

from .config import load_settings
from .schemas import PoolSetupRequest
from .services.draw_session import DrawSession


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def load_pool(path: str) -> PoolSetupRequest:
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return PoolSetupRequest.model_validate(payload)


def render(records: List[DrawResultRecord]) -> str:
    width = max((len(record.participant_name) for record in records), default=0)
    lines = [
        f"{position:>3}. {record.participant_name:<{width}}  {record.month:<16} {record.amount}"
        for position, record in enumerate(records, start=1)
    ]
    return "\n".join(lines)


def run(args: argparse.Namespace) -> int:
    settings = load_settings(args.env_file)
    configure_logging(args.verbose)
    logger = logging.getLogger("goldpool.cli")

    try:
        request = load_pool(args.pool_file)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Cannot read pool file %s: %s", args.pool_file, exc)
        return 2
    except ValidationError as exc:
        for error in exc.errors():
            logger.error("Invalid pool: %s", error.get("msg"))
        return 2

    rng = random.Random(args.seed) if args.seed is not None else None
    session = DrawSession(settings.wheel, args.language or settings.language, rng=rng)
    session.start(request.to_config())

    while session.snapshot().status is not EngineState.COMPLETE:
        angle, declared = session.spin()
        logger.debug("Wheel stopped at %.2f -> %s", angle, ", ".join(declared))

    records = session.results()
    print(render(records))

    if args.output:
        store = JsonResultStore(args.output)
        if not store.save(records):
            return 1
        logger.info("Results written to %s", store.path)
    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a gold-day pool draw from a JSON pool file")
    parser.add_argument("pool_file", help="JSON file with participants and pool settings")
    parser.add_argument("--output", type=str, default=None, help="Write the results to this JSON file.")
    parser.add_argument("--language", choices=("tr", "en"), default=None, help="Label language.")
    parser.add_argument("--seed", type=int, default=None, help="Seed the wheel for a repeatable draw.")
    parser.add_argument("--env-file", type=str, default=None, help="Path to .env file with settings")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging (default INFO)."
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    try:
        code = run(args)
    except KeyboardInterrupt:
        print("Draw cancelled by user.")
        code = 130
    raise SystemExit(code)


if __name__ == "__main__":
    main()
