"""ASGI entrypoint for the dining planner API."""

from dining_planner.api.app import create_app
from dining_planner.containers import build_container

app = create_app(build_container())
