# scooter_rentals/scorer.py
from .business import Business
from .config import STARTING_CASH, RESALE_PRICE, PRICE_OF_PARTS


def calculate_profit(business: Business) -> float:
    return business.cash - STARTING_CASH


def calculate_net_business_value(business: Business) -> float:
    """
    NBV = Cash + Fleet_Value + Parts_Value
    Working scooters are worth their resale price, broken ones 10% of it as scrap.
    """
    fleet_value = business.working_scooters * RESALE_PRICE
    fleet_value += business.broken_scooters * RESALE_PRICE * 0.1
    parts_value = business.scooter_parts * PRICE_OF_PARTS

    nbv = business.cash + fleet_value + parts_value
    return round(nbv, 2)
