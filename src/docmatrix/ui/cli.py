from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from docmatrix.adapters.snapshot import SnapshotError
from docmatrix.app import run_candidate_comparison, run_vacancy_ranking
from docmatrix.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from docmatrix.domain.comparison import CandidateComparison

log = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compare candidate documents against vacancy matrices"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    candidate = subparsers.add_parser(
        "candidate",
        help="Compare candidates of a snapshot against its matrix",
    )
    candidate.add_argument("snapshot", type=str, help="Path to the JSON snapshot")
    candidate.add_argument(
        "--candidate-id",
        type=str,
        help="Only compare this candidate (defaults to every candidate)",
    )
    candidate.add_argument(
        "--csv",
        type=str,
        help="Write the verdicts to this CSV file",
    )

    vacancy = subparsers.add_parser("vacancy", help="Rank the candidates of a vacancy")
    vacancy.add_argument("snapshot", type=str, help="Path to the JSON snapshot")

    return parser.parse_args(list(argv))


def _log_comparison(comparison: CandidateComparison) -> None:
    for verdict in comparison.verdicts:
        log.info(
            "%s | %s | %s | %s",
            verdict.requirement.name if verdict.requirement else "?",
            verdict.status,
            verdict.validity_status,
            verdict.observations,
        )
    summary = comparison.summary
    log.info(
        "%s: %s%% adherence (satisfied=%s, partial=%s, pending=%s)",
        comparison.candidate.name,
        summary.adherence_percentage,
        summary.satisfied,
        summary.partial,
        summary.pending,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=parsed_args.log_level)

    try:
        if parsed_args.command == "candidate":
            comparisons = run_candidate_comparison(
                parsed_args.snapshot,
                candidate_id=parsed_args.candidate_id,
                csv_path=parsed_args.csv,
            )
            for comparison in comparisons:
                _log_comparison(comparison)
        elif parsed_args.command == "vacancy":
            result = run_vacancy_ranking(parsed_args.snapshot)
            for position, comparison in enumerate(result.ranking(), start=1):
                log.info(
                    "%s. %s: %s%% (satisfied=%s/%s)",
                    position,
                    comparison.candidate.name,
                    comparison.summary.adherence_percentage,
                    comparison.summary.satisfied,
                    comparison.summary.total,
                )
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except SnapshotError:
        log.exception("Snapshot validation error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during comparison")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
