"""Command line front end: score a resume, analyze a skills gap or estimate salary."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from .config import load_config
from .domain import InvalidArgumentError, format_ats_report, format_gap_report, format_salary_report
from .evaluations import evaluate_gap, evaluate_salary, evaluate_score
from .observability import ScoringObserver, configure_logging

console = Console()
error_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-scorer",
        description="Resume Scorer - deterministic ATS scoring, skills-gap and salary estimates",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to configuration file (default: $RESUME_SCORER_CONFIG or config/config.yaml)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log each evaluation",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("score", "Score a resume against a job analysis"),
        ("gap", "Analyze the skills gap between a job and a resume"),
        ("salary", "Estimate a salary range for a job"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--job", "-j", required=True, help="Job analysis JSON file")
        sub.add_argument("--resume", "-r", required=True, help="Resume content JSON file")
        if name != "score":
            sub.add_argument("--answers", "-a", help="Questionnaire answers JSON file")
        sub.add_argument("--json", action="store_true", help="Print the raw report as JSON")
    return parser


def load_json_file(path: str) -> Any:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with open(file_path, encoding="utf-8") as f:
        return json.load(f)


def run(args: argparse.Namespace, observer: Optional[ScoringObserver] = None) -> int:
    """Execute a parsed command; returns the process exit code."""
    try:
        job = load_json_file(args.job)
        resume = load_json_file(args.resume)
        answers = load_json_file(args.answers) if getattr(args, "answers", None) else None

        if args.command == "score":
            report = evaluate_score(job, resume, observer=observer)
            markdown = format_ats_report(report)
        elif args.command == "gap":
            report = evaluate_gap(job, resume, answers, observer=observer)
            markdown = format_gap_report(report)
        else:
            report = evaluate_salary(job, resume, user_answers=answers, observer=observer)
            markdown = format_salary_report(report)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, InvalidArgumentError) as e:
        error_console.print(Panel(str(e), title="Error", border_style="red"))
        return 1

    if args.json:
        console.print_json(data=report.to_dict())
    else:
        console.print(Markdown(markdown))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging("INFO" if args.verbose else config.log_level)
    observer = ScoringObserver(source="cli") if args.verbose else None

    return run(args, observer)


if __name__ == "__main__":
    sys.exit(main())
