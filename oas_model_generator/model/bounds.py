"""
Numeric bound consolidation for integer and number schemas.

OpenAPI 3.0 expresses exclusive bounds as boolean modifiers of
``minimum``/``maximum``; OpenAPI 3.1 (JSON Schema 2020-12) uses standalone
numeric ``exclusiveMinimum``/``exclusiveMaximum``. Both are accepted and
reduced to a single effective bound per side.
"""

from dataclasses import dataclass

from oas_model_generator.model.errors import NumericDomainError
from oas_model_generator.model.schema import BoundForm, SchemaNode


@dataclass(frozen=True)
class NumericBounds:
    """Effective lower and upper bound with their exclusivity."""

    min: int | float | None = None
    max: int | float | None = None
    excl_min: bool = False
    excl_max: bool = False


def get_numeric_bounds(schema: SchemaNode) -> NumericBounds:
    """Resolve the effective numeric bounds of a schema.

    A numeric exclusive bound fills in a missing inclusive bound, and replaces
    a coexisting one only when it is at least as tight (ties go to the
    exclusive bound). The boolean form only marks an existing inclusive bound
    as exclusive.

    Args:
        schema: The integer or number schema.

    Returns:
        The consolidated bounds.

    Examples:
        maximum=10, exclusiveMaximum=10  ->  max=10, excl_max=True
        maximum=10, exclusiveMaximum=15  ->  max=10, excl_max=False
        maximum=10, exclusiveMaximum=true  ->  max=10, excl_max=True
    """
    max_, excl_max = schema.maximum, False
    min_, excl_min = schema.minimum, False

    exclusive_max = schema.exclusive_maximum
    if exclusive_max.form is BoundForm.VALUE:
        if max_ is None or exclusive_max.value <= max_:
            max_, excl_max = exclusive_max.value, True
    elif exclusive_max.form is BoundForm.FLAG and exclusive_max.flag and max_ is not None:
        excl_max = True

    exclusive_min = schema.exclusive_minimum
    if exclusive_min.form is BoundForm.VALUE:
        if min_ is None or exclusive_min.value >= min_:
            min_, excl_min = exclusive_min.value, True
    elif exclusive_min.form is BoundForm.FLAG and exclusive_min.flag and min_ is not None:
        excl_min = True

    return NumericBounds(min=min_, max=max_, excl_min=excl_min, excl_max=excl_max)


def to_integral(value: int | float, location: str, keyword: str) -> int:
    """Convert a bound of an integer schema to ``int``, rejecting fractions.

    Raises:
        NumericDomainError: If the value has a fractional part.
    """
    if isinstance(value, int):
        return value
    if not value.is_integer():
        raise NumericDomainError(location, f"{keyword} {value!r} is not an integer")
    return int(value)
