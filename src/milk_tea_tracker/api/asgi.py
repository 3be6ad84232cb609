"""ASGI entrypoint for the milk tea tracker API."""

from milk_tea_tracker.api.app import create_app
from milk_tea_tracker.containers import build_container

app = create_app(build_container())
