"""
Test Suite

Structure:
- tests/unit/: Tests for individual components (signer, params, client, config, CLI)

HTTP is never touched: the client's aiohttp session is replaced by a fake
session returning canned responses. Uses pytest with pytest-asyncio.
"""
