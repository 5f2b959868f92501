from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from primeform.config import get_settings
from primeform.infrastructure.database import engine, initialize_database
from primeform.infrastructure.push import build_push_gateway
from primeform.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise the database and the push gateway, release them on shutdown."""

    initialize_database()
    app.state.push_gateway = build_push_gateway(get_settings())
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the main FastAPI application."""

    app = FastAPI(title="PrimeForm API", lifespan=lifespan)

    # The mobile client calls the API directly, so any origin is accepted.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
