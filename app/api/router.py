from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app.api.handlers import IndexHandler, PackageHandler
from app.domain.models import Config

logger = logging.getLogger(__name__)


def build_router(config: Config) -> APIRouter:
    """
    Build the static routing table: ``GET /`` plus ``GET /name`` and
    ``GET /name/{path:path}`` for every configured package.
    """
    router = APIRouter(redirect_slashes=False)

    router.add_api_route(
        "/",
        IndexHandler(config).handle,
        methods=["GET"],
        response_class=HTMLResponse,
        response_model=None,
        include_in_schema=False,
    )

    for name, package in config.packages.items():
        handle = PackageHandler(name, package, config).handle
        for path in (f"/{name}", f"/{name}/{{path:path}}"):
            router.add_api_route(
                path,
                handle,
                methods=["GET"],
                response_class=HTMLResponse,
                response_model=None,
                include_in_schema=False,
            )
        logger.debug("Registered package %s -> %s", name, package.repo)

    return router
