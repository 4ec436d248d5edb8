"""ASGI entrypoint for the album catalog API."""

from album_catalog.api.app import create_app
from album_catalog.containers import build_container

app = create_app(build_container())
