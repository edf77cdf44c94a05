"""
Time Utilities

The API authenticates requests with a unix timestamp in whole seconds
(the api-auth-time header). The server rejects signatures whose timestamp is
outside its replay window, so the value must come from the current UTC clock.
"""

from datetime import datetime, timezone


def current_utc_timestamp() -> int:
    """
    Get the current UTC time as whole unix seconds.

    Example:
        >>> current_utc_timestamp()
        1704110400
    """
    return int(datetime.now(timezone.utc).timestamp())
