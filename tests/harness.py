"""Fixture factories shared by the unit and end-to-end suites.

Both build on the in-memory container from ``tests.di``; pass ``unmock``
to swap a component back to its production provider.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from acadly.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Build a fixture yielding one request scope of a fresh test container.

    Every test gets its own container, so the in-memory store starts empty.

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_toggle(unit_env):
            upvote_service = await unit_env.get(UpvoteService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_app_fixture(unmock: set[Component] | None = None):
    """Factory for an application fixture backed by a test container.

    The fixture yields a zero-argument factory returning a new TestClient
    for the same app. Each client keeps its own cookie jar, so one client
    stands for one logged-in user.

    Usage:
        app_client = create_app_fixture()

        def test_flow(app_client):
            alice = app_client()
            bob = app_client()
    """

    @pytest.fixture
    def _app_client():
        from acadly.interface.api.app import create_app

        app = create_app(build_test_container(unmock=unmock or set()))
        clients: list[TestClient] = []

        def _new_client() -> TestClient:
            client = TestClient(app)
            clients.append(client)
            return client

        yield _new_client

        for client in clients:
            client.close()

    return _app_client
