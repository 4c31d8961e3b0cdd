"""ASGI entrypoint for the planner API."""

from quickchef.api.app import create_app
from quickchef.containers import build_container

app = create_app(build_container())
