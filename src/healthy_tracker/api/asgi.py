"""ASGI entrypoint for the healthy tracker API."""

from healthy_tracker.api.app import create_app
from healthy_tracker.containers import build_container

app = create_app(build_container())
