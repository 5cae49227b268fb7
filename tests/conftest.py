"""Root test configuration.

Shared plugins for all test tiers. Tier markers and the exclusive-run
``only`` marker are registered by ``fizzbuzz_kit.testing``; each tier
(unit, integration) has its own conftest with tier-specific setup.
"""

from __future__ import annotations

pytest_plugins = ["fizzbuzz_kit.testing", "pytester"]
