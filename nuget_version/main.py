from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from nuget_version.routes.health import router as health_router
from nuget_version.routes.v1 import router as versions_router
from nuget_version.settings import settings
from nuget_version.utils.logger import logger


def get_application() -> FastAPI:
    app = FastAPI(
        docs_url="/docs" if settings.ENVIRONMENT == "LOCAL" else None,
        redoc_url="/redoc" if settings.ENVIRONMENT == "LOCAL" else None,
    )
    logger.info(f"FastAPI application initialising for ENVIRONMENT={settings.ENVIRONMENT}")

    for router in (health_router, versions_router):
        app.include_router(router)

    # Log the addition of each route
    for route in app.routes:
        if isinstance(route, APIRoute):
            logger.info(f"HTTP Route added: {route.path} - {route.methods}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    return app


application = get_application()
