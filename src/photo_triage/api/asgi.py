"""ASGI entrypoint for the photo triage API."""

from photo_triage.api.app import create_app
from photo_triage.containers import build_container

app = create_app(build_container())
