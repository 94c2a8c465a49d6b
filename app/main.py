import logging
import os

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.errors import http_exception_handler, panic_handler
from app.api.router import build_router
from app.core.dependencies import get_config
from app.domain.models import Config

# Configure logging
logging.basicConfig(
    level=os.environ.get("VANITY_LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(config: Config) -> FastAPI:
    """
    Build the redirector application for an already-loaded configuration.
    """
    # The generated docs routes are disabled so that only configured
    # packages answer; everything else is a 404.
    app = FastAPI(
        title="Go vanity import redirector",
        version="0.1.0",
        description="Serves go-import metadata for vanity import paths and redirects browsers to documentation.",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.include_router(build_router(config))

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, panic_handler)

    logger.info("Serving %d package(s) under %s", len(config.packages), config.url)
    return app


def build_app() -> FastAPI:
    """
    uvicorn factory: ``uvicorn --factory app.main:build_app``.
    """
    return create_app(get_config())


if __name__ == "__main__":
    """
    Allow running `python -m app.main` to start the Uvicorn development server.
    """
    import uvicorn

    uvicorn.run(
        "app.main:build_app",
        factory=True,
        host=os.environ.get("VANITY_HOST", "0.0.0.0"),
        port=int(os.environ.get("VANITY_PORT", "8000")),
    )
