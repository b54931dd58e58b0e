#!/usr/bin/env python3
"""Write the built-in smoke scenarios to ./fixtures (run from the repo root)."""
from __future__ import annotations

from pathlib import Path

from smoke_runner.scenarios import write_fixtures

ROOT = Path(__file__).resolve().parents[1]
FX = ROOT / "fixtures"


def main() -> None:
    written = write_fixtures(FX)
    print("Created fixtures:")
    for path in written:
        print(" -", path.relative_to(ROOT))


if __name__ == "__main__":
    main()
