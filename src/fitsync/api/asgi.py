"""ASGI entrypoint for the fitsync API."""

from fitsync.api.app import create_app
from fitsync.containers import build_container

app = create_app(build_container())
