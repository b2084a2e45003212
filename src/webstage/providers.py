"""Resource providers.

App resources are the files required to run the application. They are
generated by the host application and are reachable from the root path, e.g.
"/app-worker.js", "/manifest.webmanifest" or "/wasm_exec.js".

Static resources are the files used by the application such as the web
assembly binary, styles, scripts or images. They can live in a local
directory, a remote bucket or a static hosting subpath. To avoid confusion
with app resources, static resource URL paths are always prefixed by "/web",
e.g. "/web/app.wasm" or "/web/main.css".
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from aiohttp import web

from webstage.config import PROVIDER_KINDS, ResourcesConfig
from webstage.constants import ADS_TXT, ROBOTS_TXT, WASM_FILE, WEB_PREFIX, static_url
from webstage.handler import StaticFileHandler

logger = logging.getLogger(__name__)


class ResourceProvider(Protocol):
    """Locates app resources and static resources."""

    @property
    def static_only(self) -> bool: ...

    def app_resources(self) -> str:
        """Path of the root directory where app resources are accessible."""
        ...

    def static_resources(self) -> str:
        """Path or URL of the location holding the web directory."""
        ...

    def app_wasm(self) -> str:
        """URL of the app.wasm file: STATIC_RESOURCES/web/app.wasm."""
        ...

    def robots_txt(self) -> str:
        """URL of the robots.txt file: STATIC_RESOURCES/web/robots.txt."""
        ...

    def ads_txt(self) -> str:
        """URL of the ads.txt file: STATIC_RESOURCES/web/ads.txt."""
        ...


@runtime_checkable
class StaticFileServer(Protocol):
    """Provider that also serves static resources over HTTP."""

    def routes(self) -> list[web.RouteDef]: ...


class _StaticURLs(ABC):
    """Derives the well-known file URLs from static_resources()."""

    @abstractmethod
    def static_resources(self) -> str: ...

    def app_wasm(self) -> str:
        return static_url(self.static_resources(), WASM_FILE)

    def robots_txt(self) -> str:
        return static_url(self.static_resources(), ROBOTS_TXT)

    def ads_txt(self) -> str:
        return static_url(self.static_resources(), ADS_TXT)


@dataclass(frozen=True)
class LocalDir(_StaticURLs):
    """Static resources served from a local directory under /web."""

    path: Path
    handler: StaticFileHandler = field(compare=False, repr=False)
    static_only: bool = field(default=False, init=False)

    def app_resources(self) -> str:
        return ""

    def static_resources(self) -> str:
        return ""

    def routes(self) -> list[web.RouteDef]:
        return self.handler.routes()


@dataclass(frozen=True)
class RemoteBucket(_StaticURLs):
    """Static resources hosted in a remote bucket (Amazon S3, Google Cloud Storage)."""

    url: str
    static_only: bool = field(default=False, init=False)

    def app_resources(self) -> str:
        return ""

    def static_resources(self) -> str:
        return self.url


@dataclass(frozen=True)
class GitHubPages(_StaticURLs):
    """All resources hosted under a GitHub Pages project subpath.

    Only valid for generating static websites: the whole site, app
    resources included, lives under the repository subpath.
    """

    repo: str
    static_only: bool = field(default=True, init=False)

    def app_resources(self) -> str:
        return self.repo

    def static_resources(self) -> str:
        return self.repo


def local_dir(path: str | Path, *, show_index: bool = True) -> LocalDir:
    """Create a provider serving static resources from a local directory.

    Args:
        path: Directory containing the static resources
        show_index: List directory contents when no index.html exists

    Returns:
        LocalDir provider
    """
    root = Path(path)
    handler = StaticFileHandler(root, WEB_PREFIX, show_index=show_index)
    return LocalDir(path=root, handler=handler)


def remote_bucket(url: str) -> RemoteBucket:
    """Create a provider for static resources hosted in a remote bucket.

    Either the bucket root or its web subpath can be given; both yield the
    same provider.

    Args:
        url: Bucket URL

    Returns:
        RemoteBucket provider
    """
    url = url.removesuffix("/")
    url = url.removesuffix(WEB_PREFIX)
    return RemoteBucket(url=url)


def github_pages(repo_name: str) -> GitHubPages:
    """Create a provider for a GitHub Pages project site.

    Args:
        repo_name: Repository name, with or without leading slash

    Returns:
        GitHubPages provider
    """
    if not repo_name.startswith("/"):
        repo_name = f"/{repo_name}"
    return GitHubPages(repo=repo_name)


def provider_from_config(config: ResourcesConfig) -> ResourceProvider:
    """Build the provider selected by the resources configuration.

    Args:
        config: Resources configuration section

    Returns:
        Configured provider

    Raises:
        ValueError: If the provider kind is unknown or its setting is missing
    """
    kind = config.provider
    if kind == "local":
        logger.info(f"Serving static resources from {config.local_dir}")
        return local_dir(config.local_dir, show_index=config.show_index)
    if kind == "remote":
        if not config.bucket_url:
            raise ValueError("resources.bucket_url is required for the remote provider")
        logger.info(f"Static resources hosted at {config.bucket_url}")
        return remote_bucket(config.bucket_url)
    if kind == "github_pages":
        if not config.repo_name:
            raise ValueError(
                "resources.repo_name is required for the github_pages provider",
            )
        return github_pages(config.repo_name)
    raise ValueError(
        f"Unknown resources provider: {kind!r} (expected one of {', '.join(PROVIDER_KINDS)})",
    )


def resource_urls(provider: ResourceProvider) -> dict[str, str]:
    """Collect all provider locations for JSON serialization."""
    return {
        "appResources": provider.app_resources(),
        "staticResources": provider.static_resources(),
        "appWasm": provider.app_wasm(),
        "robotsTxt": provider.robots_txt(),
        "adsTxt": provider.ads_txt(),
    }
