"""ASGI entrypoint for the home bar API."""

from home_bar.api.app import create_app
from home_bar.containers import build_container

app = create_app(build_container())
