"""RatioBuilder - macronutrient ratio in grams, kcal and percent."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..core import constants
from ..core.ports.calculators import IRatioBuilder
from ..core.value_objects.macronutrient_ratio import MacronutrientRatio

_ONE = Decimal("1")
_TENTH = Decimal("0.1")


def round_half_up(value: float, step: Decimal = _ONE) -> Decimal:
    """Round the exact binary value of a float, ties away from zero.

    Matches how a calculator display rounds (2.5 -> 3), unlike the
    built-in round() which rounds ties to even.
    """
    return Decimal(value).quantize(step, rounding=ROUND_HALF_UP)


def round_grams(value: float) -> float:
    return float(round_half_up(value, _TENTH))


def round_whole(value: float) -> int:
    return int(round_half_up(value))


class RatioBuilder(IRatioBuilder):
    """Build a MacronutrientRatio from macro grams.

    Carb and protein percentages are rounded on their own; the fat
    percentage is whatever remains, so the three always total 100.
    """

    def build(
        self, fat_grams: float, protein_grams: float, net_carb_grams: float
    ) -> Optional[MacronutrientRatio]:
        """Build the ratio.

        Args:
            fat_grams: Fat in grams
            protein_grams: Protein in grams
            net_carb_grams: Net carbs in grams

        Returns:
            Optional[MacronutrientRatio]: None if the macros carry no energy

        Example:
            >>> ratio = RatioBuilder().build(30, 80, 30)
            >>> ratio.energy, ratio.perc_energy_fat
            (710, 38)
        """
        kcal_fat = fat_grams * constants.KCAL_PER_GRAM_FAT
        kcal_protein = protein_grams * constants.KCAL_PER_GRAM_PROTEIN
        kcal_net_carbs = net_carb_grams * constants.KCAL_PER_GRAM_NET_CARBS
        kcal_total = kcal_net_carbs + kcal_protein + kcal_fat

        if kcal_total <= 0:
            return None

        perc_net_carbs = round_whole(100 * kcal_net_carbs / kcal_total)
        perc_protein = round_whole(100 * kcal_protein / kcal_total)

        return MacronutrientRatio(
            energy=round_whole(kcal_total),
            grams_fat=round_grams(fat_grams),
            grams_protein=round_grams(protein_grams),
            grams_net_carbs=round_grams(net_carb_grams),
            energy_fat=round_whole(kcal_fat),
            energy_protein=round_whole(kcal_protein),
            energy_net_carbs=round_whole(kcal_net_carbs),
            perc_energy_fat=100 - (perc_net_carbs + perc_protein),
            perc_energy_protein=perc_protein,
            perc_energy_net_carbs=perc_net_carbs,
        )
