"""Global pytest configuration.

Registers the shared graph fixtures from ``tests.lib.algorithms.sample_graphs``
as a plugin so every test module can use them without importing. Pytest
imports the plugin itself, keeping assertion rewriting enabled.
"""

from __future__ import annotations

pytest_plugins: list[str] = ["tests.lib.algorithms.sample_graphs"]
