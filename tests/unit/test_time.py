"""
Unit Tests for Time Utilities

Run with:
    pytest tests/unit/test_time.py -v
"""

import time

from ionomy.core.utils.time import current_utc_timestamp


class TestCurrentUtcTimestamp:
    """Tests for current_utc_timestamp"""

    def test_returns_whole_seconds(self):
        assert isinstance(current_utc_timestamp(), int)

    def test_matches_system_clock(self):
        before = int(time.time())
        stamp = current_utc_timestamp()
        after = time.time()

        assert before <= stamp <= after + 1
