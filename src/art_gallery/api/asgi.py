"""ASGI entrypoint for the art gallery API."""

from art_gallery.api.app import create_app
from art_gallery.containers import build_container

app = create_app(build_container())
