from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import time
import logging

from .api.routes import appointments, doctors, payments, users
from .core.config import Settings, settings
from .core.database import init_db, close_db
from .core.security import identity_verifier
from .services.appointment_service import AppointmentNotFoundError
from .services.payment_service import configure_payment_gateway

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the application with the feature modules enabled in ``app_settings``."""
    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.VERSION,
        description="Appointment booking backend for the doctors portal",
    )

    # Middleware setup
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request logging and timing
    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )

        return response

    # Exception handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(AppointmentNotFoundError)
    async def appointment_not_found_handler(request: Request, exc: AppointmentNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"message": "Appointment not found"}
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.exception(f"Internal server error on {request.method} {request.url.path}: {str(exc)}")
        return JSONResponse(
            status_code=500,
            content={"message": "An unexpected error occurred"}
        )

    # Include routers
    app.include_router(users.router)
    app.include_router(appointments.router)
    if app_settings.ENABLE_DOCTORS:
        app.include_router(doctors.router)
    if app_settings.ENABLE_PAYMENTS:
        app.include_router(payments.router)

    # Startup and shutdown events
    @app.on_event("startup")
    async def startup_event():
        """Acquire the long-lived store and provider handles."""
        logger.info(f"Starting {app_settings.APP_NAME}...")

        if app_settings.TESTING:
            logger.info("Testing mode: external services are not connected")
            return

        missing = app_settings.missing_required()
        if missing:
            raise RuntimeError(f"Missing required configuration: {', '.join(missing)}")

        try:
            init_db(app_settings.get_mongodb_uri, app_settings.DATABASE_NAME)
            identity_verifier.initialize(app_settings.FIREBASE_SERVICE_ACCOUNT)
            if app_settings.ENABLE_PAYMENTS:
                configure_payment_gateway(app_settings.STRIPE_SECRET_KEY, app_settings.PAYMENT_CURRENCY)
        except Exception as e:
            logger.error(f"Failed to initialize external services: {str(e)}")
            raise

        logger.info("Application startup complete")

    @app.on_event("shutdown")
    async def shutdown_event():
        """Release the store and provider handles."""
        logger.info(f"Shutting down {app_settings.APP_NAME}...")
        close_db()
        identity_verifier.close()

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": time.time(),
            "version": app_settings.VERSION
        }

    # Root endpoint
    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Hello World!"

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "doctors_portal.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info"
    )
