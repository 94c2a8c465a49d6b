"""
Pydantic models for the vanity import redirector.

This module defines the configuration that drives routing and the render
context handed to the package template:
- Package: where a single package's source repository lives
- Config: base import URL, documentation host and the package mapping
- PackagePage: per-request values derived from the two above

All models are frozen; the configuration is never mutated after startup.
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_DOCS_URL = "https://godoc.org"
DEFAULT_BRANCH = "master"


# ---------------------------------------------------------------------------
# Configuration Models
# ---------------------------------------------------------------------------


class Package(BaseModel):
    """
    A single configured package.

    The repository is given as host + path without a scheme
    (e.g. ``github.com/yarpc/yarpc-go``); ``https://`` is added when rendering.
    """

    model_config = ConfigDict(frozen=True)

    repo: str = Field(
        description="Host and path of the source repository, without scheme.",
    )
    branch: str = Field(
        default=DEFAULT_BRANCH,
        description="Branch used in the go-source tree/file URL templates.",
    )


class Config(BaseModel):
    """
    Top-level configuration for the redirector.

    ``url`` is the base of every canonical import path; the canonical URL of
    package ``P`` is ``url + "/" + P``.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(
        description="Base host/path for canonical import paths (e.g. 'go.uber.org').",
    )
    docs_url: str = Field(
        default=DEFAULT_DOCS_URL,
        description="Documentation viewer that browsers are redirected to.",
    )
    packages: Dict[str, Package] = Field(
        default_factory=dict,
        description="Mapping of package name to its repository.",
    )

    @field_validator("packages")
    @classmethod
    def _check_package_names(cls, packages: Dict[str, Package]) -> Dict[str, Package]:
        for name in packages:
            if not name:
                raise ValueError("package name must not be empty")
            if name.startswith("/") or name.endswith("/"):
                raise ValueError(f"package name {name!r} must not start or end with '/'")
            if any(ch.isspace() for ch in name):
                raise ValueError(f"package name {name!r} must not contain whitespace")
        return packages


# ---------------------------------------------------------------------------
# Render Context Models
# ---------------------------------------------------------------------------


class PackagePage(BaseModel):
    """Values rendered into the package template for one request."""

    model_config = ConfigDict(frozen=True)

    repo: str
    branch: str
    canonical_url: str
    godoc_url: str

    @classmethod
    def build(cls, config: Config, name: str, package: Package, sub_path: str) -> "PackagePage":
        """
        Derive the render context for package ``name``.

        ``sub_path`` is appended verbatim; it is empty for ``/name`` and
        starts with ``/`` otherwise.
        """
        canonical_url = f"{config.url}/{name}"
        return cls(
            repo=package.repo,
            branch=package.branch,
            canonical_url=canonical_url,
            godoc_url=f"{config.docs_url}/{canonical_url}{sub_path}",
        )
