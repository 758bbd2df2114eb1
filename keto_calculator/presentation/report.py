"""Plain-text rendering of a calculation result."""

import math
from typing import List, Optional, Tuple

from keto_calculator.domain.macro_calculation.core.value_objects import (
    CalorieIntakeResult,
    MacronutrientRatio,
    TargetLevel,
    WarningFlag,
)

NO_WARNINGS = "none -- all good"
NOT_AVAILABLE = "not available"

# Display order of warnings in the summary line
WARNING_LABELS: List[Tuple[WarningFlag, str]] = [
    (WarningFlag.LOW_BODYFAT, "Bodyfat too low"),
    (WarningFlag.LOW_CALORIES, "Calorie intake too low"),
    (WarningFlag.LOW_FATGRAMS, "Fat intake too low"),
    (WarningFlag.HIGH_CARBS, "Carb intake too high"),
]

LEVEL_TITLES = {
    TargetLevel.MINIMUM: "Minimum",
    TargetLevel.MAINTENANCE: "Maintenance",
    TargetLevel.DESIRABLE: "Desirable",
}

_LABEL_WIDTH = 32


def display_round(value: float) -> int:
    """Round to the nearest integer, ties towards +infinity."""
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    """Format a number without a trailing '.0' on whole values."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def describe_adjustment(adjustment_percent: float) -> str:
    """Describe a calorie adjustment.

    Example:
        >>> describe_adjustment(-15)
        '15% deficit'
        >>> describe_adjustment(5)
        '5% surplus'
    """
    if adjustment_percent < 0:
        return f"{format_number(-adjustment_percent)}% deficit"
    return f"{format_number(adjustment_percent)}% surplus"


def describe_warnings(warnings: WarningFlag) -> str:
    """Join warning labels into one line, or report that all is good."""
    labels = [label for flag, label in WARNING_LABELS if flag in warnings]
    if not labels:
        return NO_WARNINGS
    return ", ".join(labels)


def _row(name: str, value: str) -> str:
    return f"  {name.ljust(_LABEL_WIDTH)}{value}"


def render_ratio(title: str, ratio: Optional[MacronutrientRatio]) -> str:
    """Render one target level as a small table."""
    lines = [title]
    if ratio is None:
        lines.append(_row("Energy", NOT_AVAILABLE))
        return "\n".join(lines)

    grams = ", ".join(
        f"{format_number(g)}g"
        for g in (ratio.grams_fat, ratio.grams_protein, ratio.grams_net_carbs)
    )
    energy = ", ".join(
        f"{e} kcal"
        for e in (ratio.energy_fat, ratio.energy_protein, ratio.energy_net_carbs)
    )
    percent = ", ".join(
        f"{p}%"
        for p in (
            ratio.perc_energy_fat,
            ratio.perc_energy_protein,
            ratio.perc_energy_net_carbs,
        )
    )
    lines.extend(
        [
            _row("Energy", f"{ratio.energy} kcal"),
            _row("Fat/ Protein/ Net Carbs grams", grams),
            _row("Fat/ Protein/ Net Carbs energy", energy),
            _row("Fat/ Protein/ Net Carbs %", percent),
        ]
    )
    return "\n".join(lines)


def render_report(result: CalorieIntakeResult) -> str:
    """Render a full result: summary, BMR and the three target levels."""
    bmr = display_round(result.derived.basal_metabolic_rate)
    sections = [
        "\n".join(
            [
                _row(
                    "Calorie Desirable Adjustment",
                    describe_adjustment(result.adjustment_percent),
                ),
                _row("Warnings", describe_warnings(result.warnings)),
            ]
        ),
        f"Calculated Basal Metabolic Rate (BMR): {bmr} kcal",
    ]
    for level in (
        TargetLevel.MINIMUM,
        TargetLevel.MAINTENANCE,
        TargetLevel.DESIRABLE,
    ):
        sections.append(render_ratio(LEVEL_TITLES[level], result.ratio_for(level)))
    return "\n\n".join(sections) + "\n"
