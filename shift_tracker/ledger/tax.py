"""
Tax Estimator

A very rough UK-style PAYE estimate, for illustration only. Only the
personal allowance, the 20% basic band and the 40% higher band are
modeled; there is no additional-rate band and no allowance taper.
"""

PERSONAL_ALLOWANCE = 12570.0
BASIC_BAND_LIMIT = 50270.0
BASIC_RATE = 0.20
HIGHER_RATE = 0.40

# Four-week pay periods: 52 weeks / 4
DEFAULT_PERIODS_PER_YEAR = 52.0 / 4.0


def estimate_tax_yearly(gross_yearly: float) -> float:
    """Estimate the yearly tax on a yearly gross figure."""
    if gross_yearly <= PERSONAL_ALLOWANCE:
        return 0.0

    taxable = gross_yearly - PERSONAL_ALLOWANCE
    basic_band = max(0.0, min(taxable, BASIC_BAND_LIMIT - PERSONAL_ALLOWANCE))
    higher_band = max(0.0, taxable - basic_band)
    return basic_band * BASIC_RATE + higher_band * HIGHER_RATE


def estimate_period_tax(
    gross: float,
    periods_per_year: float = DEFAULT_PERIODS_PER_YEAR,
) -> float:
    """
    Estimate tax on a single period's gross pay.

    Scales the period up to a yearly figure, estimates, and scales the
    result back down. This is an approximation, not a periodization.
    """
    return estimate_tax_yearly(gross * periods_per_year) / periods_per_year
