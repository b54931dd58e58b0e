#!/usr/bin/env python3
"""Smoke runner for a live server.

Steps:
- wait for server health
- load scenario fixtures (see tools/fixtures.py)
- post every scenario concurrently and check status + fields
- emit a compact summary and exit code
"""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import httpx

from provider_mocks.logging_conf import get_logger, setup_logging
from smoke_runner.cli import parse_args
from smoke_runner.client import run_all, wait_for_health
from smoke_runner.scenarios import load_scenarios
from smoke_runner.utils import summarize

logger = get_logger("smoke_runner")


async def run_smoke(
    *, client: httpx.AsyncClient, fixtures_dir: Path, timeout_s: float = 20.0
) -> int:
    await wait_for_health(client, timeout_s=timeout_s)
    scenarios = load_scenarios(fixtures_dir)
    results = await run_all(client, scenarios)
    summary, exit_code = summarize(results)
    logger.info("runner.summary", extra=summary)
    return exit_code


async def _main(base_url: str, fixtures_dir: Path, timeout_s: float) -> int:
    async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
        return await run_smoke(client=client, fixtures_dir=fixtures_dir, timeout_s=timeout_s)


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    args = parse_args(argv if argv is not None else sys.argv[1:])
    code = asyncio.run(_main(args.base_url, Path(args.fixtures), args.timeout))
    raise SystemExit(code)


if __name__ == "__main__":
    main()
