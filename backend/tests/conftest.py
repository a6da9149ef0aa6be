"""Root conftest — shared test configuration."""

import os

# Ensure tests don't accidentally use a real API key
os.environ.setdefault("GEMINI_API_KEY", "test-fake-gemini-key")
