"""Command-line interface for rate estimates and full deal quotes.

Provides an argparse-based tool with two subcommands.  Output formats:
table (default) or JSON.

Usage::

    ratecard quick --followers 25000 --platform instagram --format reel
    ratecard price --profile profile.json --brief brief.json --output json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from ratecard.config import Settings, get_settings
from ratecard.domain.errors import RateCardError
from ratecard.domain.models import CreatorProfile, DealBrief, DealQualityInput
from ratecard.domain.types import ContentFormat, Platform
from ratecard.evaluation import DealEvaluation, evaluate_deal
from ratecard.log_config import configure_logging
from ratecard.pricing.quick import QuickEstimate, quick_estimate
from ratecard.pricing.rounding import format_money

logger = structlog.get_logger()

EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for both subcommands.

    Returns:
        A configured :class:`argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="ratecard", description="Price creator brand deals"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    output = argparse.ArgumentParser(add_help=False)
    output.add_argument(
        "--output",
        type=str,
        choices=["table", "json"],
        default="table",
        dest="output_format",
        help="Output format (default: table)",
    )

    quick = subparsers.add_parser(
        "quick", parents=[output], help="Instant estimate from a follower count"
    )
    quick.add_argument("--followers", type=int, required=True, help="Total followers")
    quick.add_argument(
        "--platform",
        type=str,
        required=True,
        choices=[p.value for p in Platform],
        help="Platform the content runs on",
    )
    quick.add_argument(
        "--format",
        type=str,
        required=True,
        choices=[f.value for f in ContentFormat],
        dest="content_format",
        help="Content format",
    )
    quick.add_argument("--niche", type=str, default=None, help="Primary niche")

    price = subparsers.add_parser(
        "price", parents=[output], help="Score and price a full deal brief"
    )
    price.add_argument(
        "--profile", type=Path, required=True, help="Creator profile JSON file"
    )
    price.add_argument("--brief", type=Path, required=True, help="Deal brief JSON file")
    price.add_argument(
        "--signals", type=Path, default=None, help="Optional deal-quality signals JSON file"
    )

    return parser


def _read_json(path: Path) -> dict[str, Any]:
    with path.open(encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        msg = f"{path} must contain a JSON object"
        raise ValueError(msg)
    return data


def load_profile(path: Path, settings: Settings) -> CreatorProfile:
    """Load a creator profile, filling region and currency from settings."""
    data = _read_json(path)
    data.setdefault("region", settings.default_region.value)
    data.setdefault("currency", settings.default_currency.value)
    return CreatorProfile.model_validate(data)


def format_quick_table(estimate: QuickEstimate) -> str:
    """Format a quick estimate as human-readable text."""
    low, high = estimate.top_performer_range
    lines = [
        f"Tier:         {estimate.tier_name}",
        f"Estimate:     {format_money(estimate.base_rate)} "
        f"(range {format_money(estimate.min_rate)} - {format_money(estimate.max_rate)})",
        f"Percentile:   {estimate.percentile}",
        f"Top 25%:      {format_money(low)} - {format_money(high)}",
        f"Full profile: up to {format_money(estimate.potential_with_full_profile)}",
        "",
        "Could increase your rate:",
    ]
    lines.extend(
        f"  - {factor.name} ({factor.potential_increase})" for factor in estimate.factors
    )
    lines.append("")
    lines.append("Not yet accounted for:")
    lines.extend(
        f"  - {factor.name} ({factor.impact})" for factor in estimate.missing_factors
    )
    return "\n".join(lines)


def format_price_table(evaluation: DealEvaluation) -> str:
    """Format a deal evaluation as a layer table plus a summary."""
    pricing = evaluation.pricing
    symbol = pricing.currency_symbol
    headers = ["Layer", "Op", "Value", "Rationale"]
    widths = [16, 8, 10, 50]

    def truncate(value: str, width: int) -> str:
        if len(value) > width:
            return value[: width - 3] + "..."
        return value

    lines: list[str] = []
    header_line = "  ".join(h.ljust(w) for h, w in zip(headers, widths, strict=True))
    lines.append(header_line)
    lines.append("-" * len(header_line))
    for layer in pricing.layers:
        cells = [
            truncate(layer.name, widths[0]),
            truncate(layer.operation.value, widths[1]),
            truncate(str(layer.value), widths[2]),
            truncate(layer.rationale, widths[3]),
        ]
        lines.append("  ".join(c.ljust(w) for c, w in zip(cells, widths, strict=True)))

    push_back = evaluation.talking_points.push_back
    lines.extend(
        [
            "",
            f"Formula:      {pricing.formula}",
            f"Per item:     {format_money(pricing.price_per_deliverable, symbol)}",
            f"Quantity:     {pricing.quantity}",
            f"Total:        {format_money(pricing.total_price, symbol)}",
            f"Minimum:      {format_money(push_back.minimum_rate, symbol)}",
            f"Deal score:   {evaluation.score.total_score}/100 "
            f"({evaluation.score.quality_level.value}, "
            f"{evaluation.score.recommendation.value})",
            f"Valid for:    {pricing.valid_days} days",
        ]
    )
    return "\n".join(lines)


def run_quick(args: argparse.Namespace) -> str:
    """Run the ``quick`` subcommand and return its rendered output."""
    estimate = quick_estimate(
        args.followers, args.platform, args.content_format, niche=args.niche
    )
    if args.output_format == "json":
        return estimate.model_dump_json(indent=2)
    return format_quick_table(estimate)


def run_price(args: argparse.Namespace, settings: Settings) -> str:
    """Run the ``price`` subcommand and return its rendered output."""
    profile = load_profile(args.profile, settings)
    brief = DealBrief.model_validate(_read_json(args.brief))
    signals = None
    if args.signals is not None:
        signals = DealQualityInput.model_validate(_read_json(args.signals))

    evaluation = evaluate_deal(
        profile, brief, signals, valid_days=settings.quote_valid_days
    )
    if args.output_format == "json":
        return evaluation.model_dump_json(indent=2)
    return format_price_table(evaluation)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run the subcommand and print the result."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(production=settings.production, level=settings.log_level)

    try:
        if args.command == "quick":
            output = run_quick(args)
        else:
            output = run_price(args, settings)
    except ValidationError as exc:
        logger.error("invalid_input", command=args.command, errors=exc.errors())
        sys.exit(EXIT_INVALID_INPUT)
    except (RateCardError, OSError, ValueError) as exc:
        logger.error("command_failed", command=args.command, error=str(exc))
        sys.exit(EXIT_INVALID_INPUT)

    print(output)


if __name__ == "__main__":
    main()
