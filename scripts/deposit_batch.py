"""Run a batch of check deposits through the orchestrator.

Usage:
    python scripts/deposit_batch.py 12345678=123.45 87654321=200000
    python scripts/deposit_batch.py            # runs the demo batch
"""

from __future__ import annotations

import argparse

from checkdesk.agents.orchestrator.batch_runner import run_batch
from checkdesk.agents.orchestrator.deposit_orchestrator import create_orchestrator
from checkdesk.core.config import AppSettings
from checkdesk.core.logging_config import configure_logging

DEMO_DEPOSITS = [
    ("12345678", "0"),
    ("12345678", "123.45"),
    ("12345678", "200000"),
    ("12345678", "2000000"),
]


def parse_deposit(text: str) -> tuple[str, str]:
    """Split a ``CHECK=AMOUNT`` argument. The amount is validated later."""
    check_number, sep, amount = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected CHECK=AMOUNT, got {text!r}")
    return check_number, amount


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Deposit checks and report each outcome")
    parser.add_argument("deposits", nargs="*", type=parse_deposit, metavar="CHECK=AMOUNT",
                        help="Deposits to process (default: demo batch)")
    parser.add_argument("--log-level", default=None, help="Override CHECKDESK_LOG_LEVEL")
    args = parser.parse_args(argv)

    settings = AppSettings()
    configure_logging(args.log_level or settings.log_level)

    orchestrator = create_orchestrator(settings)
    outcomes = run_batch(orchestrator, args.deposits or DEMO_DEPOSITS)

    for outcome in outcomes:
        detail = outcome.token or outcome.error
        print(f"  {outcome.check_number}: {outcome.status} {detail}")

    print(f"Specialist review queue: {len(orchestrator.specialist_registry)}")
    print(f"Regulatory review queue: {len(orchestrator.regulatory_registry)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
