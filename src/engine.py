from dataclasses import dataclass, asdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any, List
import logging


logger = logging.getLogger(__name__)


# --- Selectable values ---
ROAST_LEVELS = ["Light", "Medium", "Medium-Dark", "Dark", "Italian"]

UNIT_ML = "ml"
UNIT_G = "g"
UNITS = [UNIT_ML, UNIT_G]

UNIT_LABELS = {
    UNIT_ML: "Milliliters (ml)",
    UNIT_G: "Grams (g)",
}

# espresso out per gram of coffee in
RATIOS = [1.5, 2.0, 2.5]

RATIO_LABELS = {
    1.5: "1:1.5 (Stronger)",
    2.0: "1:2 (Standard)",
    2.5: "1:2.5 (Lighter)",
}


# --- Recipe constants ---
MIN_BEAN_WEIGHT = 1.0
MILK_PER_ESPRESSO = 2.5     # steamed milk to espresso, by mass
WATER_DENSITY = 1.0         # g/ml
MILK_DENSITY = 1.03         # g/ml


@dataclass(frozen=True)
class BrewParameters:
    bean_weight: float        # grams of ground coffee, >= MIN_BEAN_WEIGHT
    ratio: float              # 1.5 | 2.0 | 2.5
    unit: str                 # "ml" | "g"
    roast_level: str = "Medium"


@dataclass(frozen=True)
class RecipeOutput:
    water: float
    milk: float


def clamp_bean_weight(value: float) -> float:
    """
    Floor the bean weight at MIN_BEAN_WEIGHT. Applied at the input boundary.
    """
    return max(MIN_BEAN_WEIGHT, float(value))


def parse_unit(value: str) -> str:
    unit = str(value).lower().strip()
    if unit not in UNITS:
        raise ValueError("unit must be: ml or g")
    return unit


def parse_roast_level(value: str) -> str:
    wanted = str(value).lower().strip()
    for roast in ROAST_LEVELS:
        if roast.lower() == wanted:
            return roast
    raise ValueError("roast_level must be: " + ", ".join(ROAST_LEVELS))


def parse_ratio(value: Any) -> float:
    try:
        ratio = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"ratio must be a number, got {value!r}") from None
    if ratio not in RATIOS:
        raise ValueError("ratio must be: 1.5, 2 or 2.5")
    return ratio


def ratio_label(ratio: float) -> str:
    return RATIO_LABELS.get(float(ratio), f"1:{ratio:g}")


def unit_label(unit: str) -> str:
    return UNIT_LABELS.get(unit, unit)


def _one_decimal(value: float) -> str:
    # exact binary value, ties rounded away from zero
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_quantity(value: float, unit: str) -> str:
    return f"{_one_decimal(value)}{unit}"


def calculate_quantities(params: BrewParameters) -> RecipeOutput:
    """
    Water (espresso yield) and milk for one cappuccino, in params.unit.
    No validation: any numbers in, numbers out.
    """
    espresso_yield = params.bean_weight * params.ratio
    milk_mass = espresso_yield * MILK_PER_ESPRESSO

    if params.unit == UNIT_ML:
        water = espresso_yield / WATER_DENSITY
        milk = milk_mass / MILK_DENSITY
    else:
        water = espresso_yield
        milk = milk_mass

    logger.debug(
        "calculated %s: bean_weight=%s ratio=%s water=%.3f milk=%.3f",
        params.unit, params.bean_weight, params.ratio, water, milk,
    )
    return RecipeOutput(water=water, milk=milk)


def brewing_steps(bean_weight: float, quantities: RecipeOutput, unit: str) -> List[str]:
    return [
        "Grind your coffee beans to a fine espresso grind",
        "Heat your machine and portafilter",
        f"Add {_one_decimal(bean_weight)}g of ground coffee to the portafilter",
        "Tamp the grounds evenly with about 30 pounds of pressure",
        f"Extract {format_quantity(quantities.water, unit)} of espresso (25-30 seconds)",
        "While extracting, steam your milk",
        f"Pour {format_quantity(quantities.milk, unit)} cold milk into a pitcher",
        "Steam until silky microfoam forms (60-65°C)",
        "Combine espresso and steamed milk with a 1cm layer of foam",
    ]


def generate_recipe(params: BrewParameters) -> Dict[str, Any]:
    """
    Everything the form displays for the given parameters.
    """
    quantities = calculate_quantities(params)

    return {
        "parameters": asdict(params),
        "ratio_label": ratio_label(params.ratio),
        "water": quantities.water,
        "milk": quantities.milk,
        "unit": params.unit,
        "water_display": format_quantity(quantities.water, params.unit),
        "milk_display": format_quantity(quantities.milk, params.unit),
        "steps": brewing_steps(params.bean_weight, quantities, params.unit),
    }
