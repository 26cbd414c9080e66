"""
FERS retirement benefit calculations.

All functions are pure: no I/O, no shared state. Inputs are taken as given;
range checks (negative years and the like) are the caller's business.
"""

import math

from .config import (
    COLA_MIN_AGE,
    ENHANCED_MIN_AGE,
    ENHANCED_MIN_SERVICE_YEARS,
    ENHANCED_PENSION_MULTIPLIER,
    PENSION_MULTIPLIER,
)


def pension_multiplier(service_years: float, age_at_retirement: int) -> float:
    """1.1% at age 62 or later with at least 20 years of service, else 1.0%."""
    if age_at_retirement >= ENHANCED_MIN_AGE and service_years >= ENHANCED_MIN_SERVICE_YEARS:
        return ENHANCED_PENSION_MULTIPLIER
    return PENSION_MULTIPLIER


def calculate_fers_pension(service_years: float, high_three: float, age_at_retirement: int) -> float:
    """
    Annual basic FERS annuity.

    Args:
        service_years: Creditable service in years (fractions allowed)
        high_three: Highest three-year average salary
        age_at_retirement: Age in whole years when the annuity starts

    Returns:
        high_three * service_years * multiplier
    """
    return high_three * service_years * pension_multiplier(service_years, age_at_retirement)


def calculate_annuity_supplement(service_years: float, ss_benefit_at_62: float) -> float:
    """FERS special retirement supplement, paid until age 62."""
    return (ss_benefit_at_62 / 40) * math.ceil(service_years)


def calculate_social_security_benefit(
    benefit_at_fra: float,
    claiming_age: float,
    full_retirement_age: float,
) -> float:
    """
    Adjust a full-retirement-age benefit for the age it is claimed at.

    Early claiming loses 5/9 of 1% per month for the first 36 months and
    5/12 of 1% for each month beyond. Delayed claiming earns 2/3 of 1% per
    month (8% a year).
    """
    if claiming_age == full_retirement_age:
        return benefit_at_fra

    months = (claiming_age - full_retirement_age) * 12
    if months < 0:
        early = abs(months)
        first_three_years = min(early, 36)
        additional = max(0, early - 36)
        reduction = first_three_years * 5 / 9 + additional * 5 / 12
        return benefit_at_fra * (1 - reduction / 100)

    increase = months * 2 / 3 / 100
    return benefit_at_fra * (1 + increase)


def calculate_fers_cola(base_amount: float, inflation_rate: float, retiree_age: int) -> float:
    """Yearly FERS cost-of-living increase in currency units."""
    if retiree_age < COLA_MIN_AGE:
        return 0.0

    adjusted = inflation_rate
    if 0.02 < inflation_rate <= 0.03:
        adjusted = 0.02  # capped
    elif inflation_rate > 0.03:
        adjusted = inflation_rate - 0.01
    return base_amount * adjusted
