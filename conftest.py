"""Root pytest configuration."""

pytest_plugins = ["archetype.pytest_plugin", "pytester"]
