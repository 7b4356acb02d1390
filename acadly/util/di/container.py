"""Container construction and FastAPI wiring."""

from typing import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from acadly.util.di import Component, build_providers


def create_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the application container.

    Production code passes nothing; tests name the components to mock.
    FastapiProvider is always included so the container can back an app.
    """
    return make_async_container(*build_providers(mocked), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    setup_dishka(container, app)
