"""Allow `python -m app` to start the relay server."""

from app.main import run

run()
