#!/usr/bin/env python
"""Command-line keto macro calculator.

Prints the minimum, maintenance and desirable macronutrient targets for
a profile, either as a text report or as JSON (--json).

Exit codes:
    0 success
    2 invalid input
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from keto_calculator.application.macro_calculation.queries import (
    CalculateCalorieIntakeQuery,
    CalculateCalorieIntakeQueryHandler,
)
from keto_calculator.config import get_settings
from keto_calculator.domain.macro_calculation.core.exceptions import (
    InvalidProfileInputError,
)
from keto_calculator.logging_config import configure_logging
from keto_calculator.presentation.report import render_report
from keto_calculator.presentation.schemas import CalorieIntakeResponse

logger = logging.getLogger(__name__)

# Form defaults of the calculator page
DEFAULT_PROFILE: Dict[str, Any] = {
    "gender": "Female",
    "age": 35,
    "weight": 66,
    "bodyfat": 26,
    "height": 160,
    "activityLevel": 0.5,
}

# Worked example shown next to the calculator
EXAMPLE_PROFILE: Dict[str, Any] = {
    "gender": "Female",
    "age": 35,
    "weight": 85,
    "bodyfat": 30,
    "height": 160,
    "activityLevel": 0,
    "netCarbs": 30,
}
EXAMPLE_ADJUSTMENT = -15


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keto-calculator",
        description="Calculate daily ketogenic macronutrient targets.",
    )
    parser.add_argument("--gender", help="Female or Male (F/M)")
    parser.add_argument("--age", help="Age in years")
    parser.add_argument("--weight", help="Weight in kg")
    parser.add_argument("--height", help="Height in cm")
    parser.add_argument(
        "--activity-level", dest="activityLevel", help="Activity level, 0 - 1"
    )
    parser.add_argument("--bodyfat", help="Body fat in percent")
    parser.add_argument("--net-carbs", dest="netCarbs", help="Net carbs limit in g")
    parser.add_argument(
        "--adjustment",
        help="Calorie adjustment in percent (negative for a deficit)",
    )
    parser.add_argument(
        "--example",
        action="store_true",
        help="Use the worked example profile (other profile flags still apply)",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON")
    parser.add_argument("--log-level", dest="log_level", help="Logging level")
    return parser


def build_query(
    args: argparse.Namespace, default_net_carbs: float, default_adjustment: float
) -> CalculateCalorieIntakeQuery:
    """Merge command-line values over the default (or example) profile."""
    if args.example:
        fields = dict(EXAMPLE_PROFILE)
        adjustment: Any = EXAMPLE_ADJUSTMENT
    else:
        fields = dict(DEFAULT_PROFILE, netCarbs=default_net_carbs)
        adjustment = default_adjustment

    for name in (
        "gender",
        "age",
        "weight",
        "height",
        "activityLevel",
        "bodyfat",
        "netCarbs",
    ):
        value = getattr(args, name)
        if value is not None:
            fields[name] = value
    if args.adjustment is not None:
        adjustment = args.adjustment

    return CalculateCalorieIntakeQuery(fields=fields, adjustment_percent=adjustment)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    query = build_query(args, settings.default_net_carbs, settings.default_adjustment)
    try:
        result = CalculateCalorieIntakeQueryHandler().handle(query)
    except InvalidProfileInputError as e:
        logger.error("%s", e)
        return 2

    if args.json:
        print(CalorieIntakeResponse.from_result(result).to_json())
    else:
        print(render_report(result), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
