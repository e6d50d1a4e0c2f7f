import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel

from .error import ClientError, ServerError
from .middleware import RequestLoggingMiddleware, SessionGuardMiddleware

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {
        "code": exc.base_error.code,
        "message": exc.base_error.message,
        **exc.base_error.details,
    }
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}: {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    from workspace_service.depends import auth_provider_scope, engine

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.CREATE_TABLES_ON_STARTUP:
            import workspace_service.domain.entities  # noqa: F401 - register tables

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables ready")
        yield
        await engine.dispose()

    app = FastAPI(title="Workspace Service", version="0.1.0", lifespan=lifespan)
    app.state.auth_provider_scope = auth_provider_scope

    # Last added runs first: CORS wraps the session guard, which wraps logging
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SessionGuardMiddleware, api_prefix=ApplicationConfig.API_PREFIX)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from workspace_service.api.routes import (
        auth,
        health_check,
        invites,
        pages,
        profile,
        workspaces,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(pages.router, tags=["Pages"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(profile.router, prefix=prefix, tags=["Profile"])
    app.include_router(workspaces.router, prefix=prefix, tags=["Workspaces"])
    app.include_router(invites.router, prefix=prefix, tags=["Invites"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
