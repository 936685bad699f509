from contextlib import asynccontextmanager
from fastapi import FastAPI
from medscribe.__init__ import cur_version
from medscribe.api.routers import public_routers
from medscribe.background_workers.otp_cleanup import OtpCleanupWorker
from medscribe.common.custom_exceptions import register_all_exceptions
from medscribe.common.logging_setup import get_logger, setup_logging, shutdown_logging
from medscribe.common.utils import SystemClock
from medscribe.managed_backend.client import create_backend_client
from medscribe.middlewares.request_id_middleware import RequestIdMiddleware
from medscribe.notifications.mailer import create_mailer
from medscribe.otp.constants import OTP_CLEANUP_INTERVAL_SECONDS
from medscribe.otp.dependencies import create_otp_store

logger = get_logger("medscribe.app")


@asynccontextmanager
async def app_lifespan(app: FastAPI):
    setup_logging()

    app.state.clock = SystemClock()
    app.state.backend_client = create_backend_client()
    app.state.otp_store = create_otp_store()
    app.state.mailer = create_mailer()

    cleanup = OtpCleanupWorker(app.state.otp_store, interval=OTP_CLEANUP_INTERVAL_SECONDS, clock=app.state.clock)
    cleanup.start()
    logger.info("app.startup", extra={"version": cur_version})

    try:
        yield
    finally:
        # requests have stopped being accepted by now
        await cleanup.stop()
        await app.state.otp_store.close()
        await app.state.backend_client.aclose()
        logger.info("app.shutdown")
        shutdown_logging()


def create_app():
    app = FastAPI(
        title="MedScribe",
        version=cur_version,
        lifespan=app_lifespan)

    app.include_router(public_routers)

    app.add_middleware(RequestIdMiddleware)
    register_all_exceptions(app)

    return app

app = create_app()
