"""
Request Parameter Helpers

- sanitize_params: drop absent (None) values before anything reaches the wire
- to_fixed_8: normalize amounts and prices to an 8-decimal string
- require / require_choice: argument validation raising ArgumentError
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from ionomy.core.errors import ArgumentError

EIGHT_PLACES = Decimal("0.00000001")


def sanitize_params(params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Return a copy of params without the keys whose value is None.

    Order is preserved and every other value is kept verbatim, including
    falsy ones like 0, "" and False.

    Example:
        >>> sanitize_params({"market": "btc-hive", "type": None, "limit": 0})
        {'market': 'btc-hive', 'limit': 0}
    """
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None}


def to_fixed_8(value: Union[str, int, float, Decimal]) -> str:
    """
    Format a numeric value with exactly 8 fractional digits.

    Args:
        value: Number or numeric string

    Returns:
        Decimal string, e.g. "0.00005000"

    Raises:
        ArgumentError: If value is not a finite number

    Example:
        >>> to_fixed_8("1")
        '1.00000000'
        >>> to_fixed_8(0.00005)
        '0.00005000'
    """
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ArgumentError(f"'{value}' is not a valid number") from None

    if not number.is_finite():
        raise ArgumentError(f"'{value}' is not a finite number")

    # integer digits plus 8 places must fit in the context precision
    with localcontext() as ctx:
        ctx.prec = max(28, number.adjusted() + 10)
        return f"{number.quantize(EIGHT_PLACES, rounding=ROUND_HALF_UP):f}"


def require(**fields: Any) -> None:
    """
    Check that every given field is present.

    Missing means None or any other falsy value (empty string, 0), matching
    what the API rejects.

    Raises:
        ArgumentError: For the first missing field, e.g. "currency is required"
    """
    for name, value in fields.items():
        if not value:
            raise ArgumentError(f"{name} is required")


def require_choice(name: str, value: Any, choices: Iterable[Any]) -> None:
    """
    Check that value is one of choices.

    Raises:
        ArgumentError: If value is not allowed
    """
    choices = list(choices)
    if value not in choices:
        raise ArgumentError(f"{name} must be one of: {', '.join(map(str, choices))}")
