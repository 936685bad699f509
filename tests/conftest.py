import pytest
from httpx import ASGITransport, AsyncClient
from asgi_lifespan import LifespanManager
from medscribe.common.dependencies import get_clock
from medscribe.main import create_app
from medscribe.managed_backend.dependencies import get_backend_client
from medscribe.notifications.dependencies import get_mailer
from medscribe.otp.dependencies import get_otp_store
from medscribe.otp.store import InMemoryOtpStore
from tests.fakes import FakeBackendClient, FakeMailer, FixedClock


@pytest.fixture
def backend():
    return FakeBackendClient()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def otp_store():
    return InMemoryOtpStore()


@pytest.fixture
def app(backend, mailer, clock, otp_store):
    app = create_app()
    app.dependency_overrides[get_backend_client] = lambda: backend
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_otp_store] = lambda: otp_store
    return app


@pytest.fixture
async def ac_client(app):
    async with LifespanManager(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac


