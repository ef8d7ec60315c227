"""Main FastAPI application entry point.

Serves an HTTP mirror of the users RPC surface for manual testing. The
router itself talks to the plugin over gRPC (see `plugin.server`).
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from infrastructure.settings import get_settings
from infrastructure.version import __version__
from plugin import routes as plugin_routes
from plugin.dependencies import close_resources


@asynccontextmanager
async def users_plugin_lifespan(app: FastAPI):
    """Application lifespan context.

    Closes the external API client on shutdown.
    """
    yield
    close_resources()


app = FastAPI(
    title=get_settings().app_name,
    description="User directory and external user pass-through for the federation router",
    version=__version__,
    lifespan=users_plugin_lifespan,
)

app.include_router(plugin_routes.router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok", "version": __version__}
