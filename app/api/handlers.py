"""
HTML handlers for the index page and the per-package import pages.

One IndexHandler serves ``/``; one PackageHandler is built per configured
package name at startup and serves both ``/name`` and ``/name/{path:path}``.
"""

from pathlib import Path
import logging

import jinja2
from fastapi import Request
from fastapi.responses import PlainTextResponse, Response
from fastapi.templating import Jinja2Templates

from app.domain.models import Config, Package, PackagePage

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _render(request: Request, name: str, context: dict) -> Response:
    """
    Render ``name`` or answer 500 with the rendering error as plain text.
    """
    try:
        return templates.TemplateResponse(request, name, context)
    except jinja2.TemplateError as e:
        logger.error("Failed to render %s: %s", name, e)
        return PlainTextResponse(str(e), status_code=500)


class IndexHandler:
    """Lists every configured package with its repository."""

    def __init__(self, config: Config):
        self.config = config

    async def handle(self, request: Request) -> Response:
        return _render(request, "index.html", {"config": self.config})


class PackageHandler:
    """
    Serves the go-import/go-source page for a single package.

    The wildcard route passes the remainder of the path as the ``path`` path
    parameter; it is re-prefixed with ``/`` before being appended to the
    documentation URL, so ``/name/`` redirects to ``.../name/``.
    """

    def __init__(self, name: str, package: Package, config: Config):
        self.name = name
        self.package = package
        self.config = config

    async def handle(self, request: Request) -> Response:
        path = request.path_params.get("path")
        sub_path = "" if path is None else f"/{path}"

        page = PackagePage.build(self.config, self.name, self.package, sub_path)
        return _render(request, "package.html", {"page": page})
