"""MacronutrientRatio value object - macro breakdown of a calorie target."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacronutrientRatio:
    """Fat/protein/net carbs split in grams, kcal and percent of energy.

    Grams are rounded to 0.1 g, energies and percentages to integers.
    The three percentages always add up to 100.

    Attributes:
        energy: Total energy in kcal
        grams_fat: Fat in grams
        grams_protein: Protein in grams
        grams_net_carbs: Net carbs in grams
        energy_fat: Energy from fat in kcal
        energy_protein: Energy from protein in kcal
        energy_net_carbs: Energy from net carbs in kcal
        perc_energy_fat: Share of energy from fat
        perc_energy_protein: Share of energy from protein
        perc_energy_net_carbs: Share of energy from net carbs
    """

    energy: int
    grams_fat: float
    grams_protein: float
    grams_net_carbs: float
    energy_fat: int
    energy_protein: int
    energy_net_carbs: int
    perc_energy_fat: int
    perc_energy_protein: int
    perc_energy_net_carbs: int

    def __str__(self) -> str:
        return (
            f"{self.energy} kcal: {self.grams_fat}F / "
            f"{self.grams_protein}P / {self.grams_net_carbs}C"
        )
