"""Value bet recommendations for Exacta and Trifecta combinations."""
from dataclasses import asdict, dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ExactaValueBet:
    first: int
    second: int
    first_name: str
    second_name: str
    tote_odds: Decimal
    fair_odds: Decimal
    value_percent: Decimal
    pool_size: Decimal
    dilution_factor: Decimal
    effective_odds: Decimal
    race_name: str

    @property
    def combination(self) -> str:
        return f"{self.first}-{self.second}"

    @property
    def display_name(self) -> str:
        return f"{self.first}. {self.first_name} → {self.second}. {self.second_name}"

    def to_dict(self) -> dict:
        """Plain dict including the derived combination/display fields."""
        d = asdict(self)
        d['combination'] = self.combination
        d['display_name'] = self.display_name
        return d


@dataclass(frozen=True)
class TrifectaValueBet:
    first: int
    second: int
    third: int
    first_name: str
    second_name: str
    third_name: str
    tote_odds: Decimal
    fair_odds: Decimal
    value_percent: Decimal
    pool_size: Decimal
    dilution_factor: Decimal
    effective_odds: Decimal
    race_name: str

    @property
    def combination(self) -> str:
        return f"{self.first}-{self.second}-{self.third}"

    @property
    def display_name(self) -> str:
        return (
            f"{self.first}. {self.first_name} → {self.second}. {self.second_name}"
            f" → {self.third}. {self.third_name}"
        )

    def to_dict(self) -> dict:
        d = asdict(self)
        d['combination'] = self.combination
        d['display_name'] = self.display_name
        return d
