"""
@file: ms_passport/cli.py
@description: Reports whether each Passport entity is native or a stand-in.
@dependencies: argparse, ms_passport.surface, ms_passport.logger
@created: 2025-10-03
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

from ms_passport.config import get_settings
from ms_passport.logger import configure_logging
from ms_passport.surface import get_surface


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ms-passport-surface",
        description="Show which Passport entities come from the native module.",
    )
    parser.add_argument("--json", action="store_true", help="emit a JSON report")
    parser.add_argument(
        "--require-native",
        action="store_true",
        help="exit with status 1 when any entity is a stand-in",
    )
    return parser


def surface_report() -> dict[str, Any]:
    surface = get_surface()
    entities: dict[str, Any] = {}
    for name, record in surface.records.items():
        error = record.error
        entities[name] = {
            "source": "dummy" if record.is_dummy else "native",
            "members": list(record.descriptor.members),
            "error": None if error is None else f"{type(error).__name__}: {error}",
        }
    return {
        "native_module": get_settings().native_module,
        "native_available": surface.native_available,
        "entities": entities,
    }


def _print_text(report: dict[str, Any]) -> None:
    print(f"native module: {report['native_module']}")
    for name, info in report["entities"].items():
        line = f"[{info['source'].upper()}] {name}"
        if info["error"]:
            line = f"{line}: {info['error']}"
        print(line)
    status = "OK" if report["native_available"] else "UNAVAILABLE"
    print(f"SURFACE: {status}")


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(get_settings())

    report = surface_report()
    if args.json:
        print(json.dumps(report, ensure_ascii=False, indent=2))
    else:
        _print_text(report)

    if args.require_native and not report["native_available"]:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
