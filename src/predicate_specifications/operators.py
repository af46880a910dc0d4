from enum import Enum


class ComparisonOperator(str, Enum):
    """Comparisons a criterion can build predicates for."""

    EQ = "="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    @property
    def is_ordered(self) -> bool:
        return self is not ComparisonOperator.EQ
