"""
Core Utilities Package

Modules:
    - time: Unix timestamp helpers for the api-auth-time header
    - params: Parameter sanitizing, amount formatting and argument checks
"""

from ionomy.core.utils.params import require, require_choice, sanitize_params, to_fixed_8
from ionomy.core.utils.time import current_utc_timestamp

__all__ = ["current_utc_timestamp", "require", "require_choice", "sanitize_params", "to_fixed_8"]
