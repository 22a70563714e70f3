"""ASGI entrypoint for the Dishcovery API."""

from dishcovery.api.app import create_app
from dishcovery.containers import build_container

app = create_app(build_container())
