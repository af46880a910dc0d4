from .accessors import AttributeAccessor, attribute, resolve_path
from .base import AndPredicate, NotPredicate, OrPredicate, Predicate
from .combinators import and_, not_, or_
from .criteria import ComparisonPredicate, Criterion, RelationPredicate
from .evaluator import ordered_relation
from .exceptions import InvalidArgumentError, SpecificationError
from .operators import ComparisonOperator
from .specification import Specification

__all__ = [
    # Core types
    "Criterion",
    "Specification",
    "ComparisonOperator",
    # Predicates
    "Predicate",
    "ComparisonPredicate",
    "RelationPredicate",
    "AndPredicate",
    "OrPredicate",
    "NotPredicate",
    # Combinators
    "and_",
    "or_",
    "not_",
    # Accessors
    "AttributeAccessor",
    "attribute",
    "resolve_path",
    # Evaluator
    "ordered_relation",
    # Exceptions
    "SpecificationError",
    "InvalidArgumentError",
]
