from decimal import Decimal

BASE_PRICE = Decimal("10")
DOG_PRICE_MULTIPLIER = Decimal("1.2")
OTHER_SPECIES_MULTIPLIER = Decimal("1.1")
AGE_THRESHOLD = 5
AGE_PREMIUM_MULTIPLIER = Decimal("1.5")
PREMIUM_PLAN_MULTIPLIER = Decimal("2")


def calculate_price(species: str, age: int, premium_plan: bool) -> Decimal:
    """Price a quotation.

    Rules are applied in a fixed order on top of the base price:
    - species: DOG (case-insensitive) x1.2, anything else x1.1
    - age above the threshold: x1.5
    - premium plan: x2

    No rounding happens between steps; Decimal keeps the exact product.
    Inputs are expected to be validated by the caller.
    """
    price = BASE_PRICE
    if species is not None and species.upper() == "DOG":
        price *= DOG_PRICE_MULTIPLIER
    else:
        price *= OTHER_SPECIES_MULTIPLIER

    if age > AGE_THRESHOLD:
        price *= AGE_PREMIUM_MULTIPLIER

    if premium_plan:
        price *= PREMIUM_PLAN_MULTIPLIER

    return price
