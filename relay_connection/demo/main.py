"""
Demo Application Entry Point

FastAPI service exposing the demo schema at ``POST /graphql``.

Run with:
    uvicorn relay_connection.demo.main:app --reload

Example Query:
    query {
        people(first: 2) {
            edges {
                cursor
                node {
                    name
                    films(first: 1) {
                        edges { roles node { name } }
                        pageInfo { hasNextPage endCursor }
                    }
                }
            }
            pageInfo { hasNextPage endCursor }
        }
    }
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from ariadne import graphql_sync
from fastapi import Body, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from relay_connection import __version__
from relay_connection.config import get_settings
from relay_connection.demo.database import create_tables, get_db
from relay_connection.demo.schema import schema

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create demo tables on startup and log lifecycle events."""
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Connection directive: @{settings.directive_name}")

    create_tables()

    yield

    logger.info(f"Shutting down {settings.app_name}...")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="Relay cursor pagination over an SDL-first GraphQL schema.",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    # Resolver errors never reach these: graphql-core turns them into
    # entries in the response's "errors" list.
    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "A database error occurred. Please try again later."
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
            return JSONResponse(
                status_code=500,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # Routes
    # -------------------------------------------------------------------------
    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Liveness check."""
        return {"status": "healthy", "version": __version__}

    @app.post("/graphql", tags=["GraphQL"])
    def graphql_server(
        request: Request,
        data: dict = Body(...),
        db: Session = Depends(get_db),
    ) -> JSONResponse:
        """
        Execute a GraphQL request against the demo schema.

        Field errors (bad cursors, negative ``first``) come back with
        status 200 in the ``errors`` list; malformed queries get 400.
        Declared sync so FastAPI runs the blocking session in its threadpool.
        """
        success, result = graphql_sync(
            schema,
            data,
            context_value={"request": request, "db": db},
            debug=settings.debug,
            logger=__name__,
        )
        return JSONResponse(result, status_code=200 if success else 400)

    return app


app = create_app()
