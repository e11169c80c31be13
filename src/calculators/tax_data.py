"""Indonesian PPh21 constants: statuses, PTKP, TER tables, brackets, BPJS.

Hardcoded Python constants (not DB-driven). TER tables follow PP 58/2023,
progressive brackets follow UU 7/2021 (HPP). Trivially testable, no external
dependencies.
"""

from decimal import Decimal
from enum import Enum
from typing import NamedTuple


class TaxpayerStatus(str, Enum):
    """Marital status (TK = single, K = married) and number of dependents."""

    TK_0 = "TK/0"
    TK_1 = "TK/1"
    TK_2 = "TK/2"
    TK_3 = "TK/3"
    K_0 = "K/0"
    K_1 = "K/1"
    K_2 = "K/2"
    K_3 = "K/3"


class TaxRateCategory(str, Enum):
    """TER category selecting the monthly withholding table."""

    A = "A"
    B = "B"
    C = "C"


class TerRate(NamedTuple):
    """A single monthly withholding (TER) rate entry."""

    threshold: Decimal  # inclusive lower bound of monthly income
    rate: Decimal


class TaxBracket(NamedTuple):
    """A single progressive income tax bracket."""

    lower: Decimal  # inclusive
    upper: Decimal | None  # None = no cap
    rate: Decimal


def _ter_table(rows: tuple[tuple[int, str], ...]) -> tuple[TerRate, ...]:
    return tuple(TerRate(Decimal(threshold), Decimal(rate)) for threshold, rate in rows)


# --- Non-taxable income (PTKP), yearly ---

NON_TAXABLE_INCOME: dict[TaxpayerStatus, Decimal] = {
    TaxpayerStatus.TK_0: Decimal("54000000"),
    TaxpayerStatus.TK_1: Decimal("58500000"),
    TaxpayerStatus.TK_2: Decimal("63000000"),
    TaxpayerStatus.TK_3: Decimal("67500000"),
    TaxpayerStatus.K_0: Decimal("58500000"),
    TaxpayerStatus.K_1: Decimal("63000000"),
    TaxpayerStatus.K_2: Decimal("67500000"),
    TaxpayerStatus.K_3: Decimal("72000000"),
}

TAX_RATE_CATEGORIES: dict[TaxpayerStatus, TaxRateCategory] = {
    TaxpayerStatus.TK_0: TaxRateCategory.A,
    TaxpayerStatus.TK_1: TaxRateCategory.A,
    TaxpayerStatus.K_0: TaxRateCategory.A,
    TaxpayerStatus.TK_2: TaxRateCategory.B,
    TaxpayerStatus.TK_3: TaxRateCategory.B,
    TaxpayerStatus.K_1: TaxRateCategory.B,
    TaxpayerStatus.K_2: TaxRateCategory.B,
    TaxpayerStatus.K_3: TaxRateCategory.C,
}

# --- TER monthly rates, highest threshold first ---

_TER_A = _ter_table((
    (1_400_000_001, "0.34"),
    (910_000_001, "0.33"),
    (695_000_001, "0.32"),
    (550_000_001, "0.31"),
    (454_000_001, "0.30"),
    (337_000_001, "0.29"),
    (206_000_001, "0.28"),
    (157_000_001, "0.27"),
    (125_000_001, "0.26"),
    (103_000_001, "0.25"),
    (89_000_001, "0.24"),
    (77_500_001, "0.23"),
    (68_600_001, "0.22"),
    (62_200_001, "0.21"),
    (56_300_001, "0.20"),
    (51_400_001, "0.19"),
    (47_800_001, "0.18"),
    (43_850_001, "0.17"),
    (39_100_001, "0.16"),
    (35_400_001, "0.15"),
    (32_400_001, "0.14"),
    (30_050_001, "0.13"),
    (28_000_001, "0.12"),
    (26_450_001, "0.11"),
    (24_150_001, "0.10"),
    (19_750_001, "0.09"),
    (16_950_001, "0.08"),
    (15_100_001, "0.07"),
    (13_750_001, "0.06"),
    (12_500_001, "0.05"),
    (11_600_001, "0.04"),
    (11_050_001, "0.035"),
    (10_700_001, "0.03"),
    (10_350_001, "0.025"),
    (10_050_001, "0.0225"),
    (9_650_001, "0.02"),
    (8_550_001, "0.0175"),
    (7_500_001, "0.015"),
    (6_750_001, "0.0125"),
    (6_300_001, "0.01"),
    (5_950_001, "0.0075"),
    (5_650_001, "0.005"),
    (5_400_001, "0.0025"),
    (0, "0"),
))

_TER_B = _ter_table((
    (1_405_000_001, "0.34"),
    (957_000_001, "0.33"),
    (704_000_001, "0.32"),
    (555_000_001, "0.31"),
    (459_000_001, "0.30"),
    (374_000_001, "0.29"),
    (211_000_001, "0.28"),
    (163_000_001, "0.27"),
    (129_000_001, "0.26"),
    (109_000_001, "0.25"),
    (93_000_001, "0.24"),
    (80_000_001, "0.23"),
    (71_000_001, "0.22"),
    (64_000_001, "0.21"),
    (58_500_001, "0.20"),
    (53_800_001, "0.19"),
    (49_500_001, "0.18"),
    (45_800_001, "0.17"),
    (41_100_001, "0.16"),
    (37_100_001, "0.15"),
    (33_950_001, "0.14"),
    (31_450_001, "0.13"),
    (29_350_001, "0.12"),
    (27_700_001, "0.11"),
    (26_000_001, "0.10"),
    (21_850_001, "0.09"),
    (18_450_001, "0.08"),
    (16_400_001, "0.07"),
    (14_950_001, "0.06"),
    (13_600_001, "0.05"),
    (12_600_001, "0.04"),
    (11_600_001, "0.03"),
    (11_250_001, "0.025"),
    (10_750_001, "0.02"),
    (9_200_001, "0.015"),
    (7_300_001, "0.01"),
    (6_850_001, "0.0075"),
    (6_500_001, "0.005"),
    (6_200_001, "0.0025"),
    (0, "0"),
))

_TER_C = _ter_table((
    (1_419_000_001, "0.34"),
    (965_000_001, "0.33"),
    (709_000_001, "0.32"),
    (561_000_001, "0.31"),
    (463_000_001, "0.30"),
    (390_000_001, "0.29"),
    (221_000_001, "0.28"),
    (169_000_001, "0.27"),
    (134_000_001, "0.26"),
    (110_000_001, "0.25"),
    (95_600_001, "0.24"),
    (83_200_001, "0.23"),
    (74_500_001, "0.22"),
    (66_700_001, "0.21"),
    (60_400_001, "0.20"),
    (55_800_001, "0.19"),
    (51_200_001, "0.18"),
    (47_400_001, "0.17"),
    (43_000_001, "0.16"),
    (38_900_001, "0.15"),
    (35_400_001, "0.14"),
    (32_600_001, "0.13"),
    (30_100_001, "0.12"),
    (28_100_001, "0.11"),
    (26_600_001, "0.10"),
    (22_700_001, "0.09"),
    (19_500_001, "0.08"),
    (17_050_001, "0.07"),
    (15_550_001, "0.06"),
    (14_150_001, "0.05"),
    (12_950_001, "0.04"),
    (12_050_001, "0.03"),
    (11_200_001, "0.02"),
    (10_950_001, "0.0175"),
    (9_800_001, "0.015"),
    (8_850_001, "0.0125"),
    (7_800_001, "0.01"),
    (7_350_001, "0.0075"),
    (6_950_001, "0.005"),
    (6_600_001, "0.0025"),
    (0, "0"),
))

TER_RATES: dict[TaxRateCategory, tuple[TerRate, ...]] = {
    TaxRateCategory.A: _TER_A,
    TaxRateCategory.B: _TER_B,
    TaxRateCategory.C: _TER_C,
}

# --- Progressive brackets on yearly taxable income (after PTKP) ---

TAX_BRACKETS = (
    TaxBracket(Decimal("0"), Decimal("60000000"), Decimal("0.05")),
    TaxBracket(Decimal("60000000"), Decimal("250000000"), Decimal("0.15")),
    TaxBracket(Decimal("250000000"), Decimal("500000000"), Decimal("0.25")),
    TaxBracket(Decimal("500000000"), Decimal("5000000000"), Decimal("0.30")),
    TaxBracket(Decimal("5000000000"), None, Decimal("0.35")),
)

# --- BPJS contributions (monthly, fraction of salary) ---

JKK_RATE = Decimal("0.0024")  # employer, work accident (lowest risk group)
JKM_RATE = Decimal("0.003")  # employer, death
BPJS_KESEHATAN_EMPLOYER_RATE = Decimal("0.04")
BPJS_KESEHATAN_MAX_SALARY = Decimal("12000000")

JHT_EMPLOYEE_RATE = Decimal("0.02")  # old-age savings
JP_EMPLOYEE_RATE = Decimal("0.01")  # pension
JP_MAX_SALARY = Decimal("9559600")

# --- Occupational expense (biaya jabatan) ---

OCCUPATIONAL_EXPENSE_RATE = Decimal("0.05")
OCCUPATIONAL_EXPENSE_MONTHLY_CAP = Decimal("500000")

# Regular months withheld at the TER rate before the bonus month and December.
REGULAR_MONTHS = 10
MONTHS_PER_YEAR = 12
