"""Global pytest configuration.

Registers the fixture plugin `sample_graphs` without importing it here, so
pytest imports it with assertion rewriting enabled.
"""

from __future__ import annotations

from importlib.util import find_spec

pytest_plugins: list[str] = []
if find_spec("sample_graphs") is not None:
    pytest_plugins = ["sample_graphs"]
