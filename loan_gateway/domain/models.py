"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class StockPosition:
    """Stock holding declared by the applicant"""

    name: str
    quantity: int


@dataclass(frozen=True)
class FinancialRecord:
    """Applicant finances, amounts in currency units"""

    salary_per_quarter: int
    total_credit_card_debt: float
    current_home_loan_debt: float
    total_savings: float
    stock: Tuple[StockPosition, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ApplicantRecord:
    """Validated applicant submission"""

    first_name: str
    last_name: str
    location: str
    date_of_birth: date
    license: str  # base64 image payload
    finances: FinancialRecord


class ViolationKind(str, Enum):
    MISSING = "missing"
    INVALID = "invalid"


@dataclass(frozen=True)
class Violation:
    """Single constraint failure reported by the schema validator"""

    field: str  # dotted wire path without list indexes, e.g. "finances.stock.name"
    kind: ViolationKind


@dataclass(frozen=True)
class EligibilityDecision:
    """Output of the eligibility rule"""

    approved: bool
    total_assets: float
    total_liabilities: float
    age: int
