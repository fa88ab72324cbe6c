import argparse
import logging
from typing import Optional

from .constants.constants import *
from .settings import settings
from .core import report_templates as templates
from .core.analysis_pipeline import AnalysisPipeline
from .core.report_generator import ReportGenerator
from .tools.io.fasta_reader import read_fasta_sequences

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seqmetrics",
        description="Translate FASTA nucleotide sequences, weigh the proteins and flag palindromes.",
    )
    parser.add_argument("fasta", nargs="+", help="FASTA file(s) to analyze")

    verbosity_group = parser.add_mutually_exclusive_group()
    verbosity_group.add_argument(
        "-q", "--quiet", help="silence logging except errors", action="store_true"
    )
    verbosity_group.add_argument(
        "-v", "--verbose", help="increase output verbosity", action="store_true"
    )

    parser.add_argument(
        "-j", "--jobs", type=_positive_int, default=None,
        help=f"worker threads per file (default: {settings.max_workers})",
    )
    parser.add_argument(
        "--no-summary", action="store_true", help="omit the batch summary after each file"
    )
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = settings.log_level
    if args.verbose:
        level = "DEBUG"
    elif args.quiet:
        level = "ERROR"
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args)

    pipeline = AnalysisPipeline(max_workers=args.jobs)
    report_generator = ReportGenerator()
    exit_code = 0

    for path in args.fasta:
        print(templates.SELECTED_FILE_TEMPLATE.format(path=path))

        read_result = read_fasta_sequences(path)
        if not read_result.success:
            print(templates.ERROR_TEMPLATE.format(message=read_result.error))
            exit_code = 1
            continue

        print(templates.ANALYZING_MESSAGE)
        outcomes = pipeline.analyze(read_result.sequences)
        if any(not outcome.success for outcome in outcomes):
            exit_code = 1

        print(report_generator.generate_report(outcomes, include_summary=not args.no_summary))
        print()

    return exit_code
