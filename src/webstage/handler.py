"""Static file serving for the local directory provider.

Strips the web prefix from request paths and serves the remainder from a
local directory. The filesystem is read on every request; caching is left
to the serving host.
"""

import asyncio
import logging
import stat
from functools import cached_property
from pathlib import Path, PurePosixPath

from aiohttp import web

from webstage.constants import INDEX_FILE, WEB_PREFIX

logger = logging.getLogger(__name__)


class StaticFileHandler:
    """Serves files under a URL prefix from a local directory.

    File serving, path traversal checks and directory listings are delegated
    to aiohttp's StaticResource. This handler adds index.html resolution and
    trailing slash redirects for directories on top of it.
    """

    def __init__(
        self,
        root: Path,
        prefix: str = WEB_PREFIX,
        *,
        show_index: bool = True,
    ) -> None:
        """Initialize the handler.

        The directory is not touched until routes are requested.

        Args:
            root: Local directory containing static resources
            prefix: URL prefix stripped from request paths
            show_index: List directory contents when no index.html exists
        """
        self._root = Path(root)
        self._prefix = prefix.rstrip("/")
        self._show_index = show_index

    @property
    def root(self) -> Path:
        return self._root

    @property
    def prefix(self) -> str:
        return self._prefix

    @cached_property
    def static_resource(self) -> web.StaticResource:
        """Static resource serving the root directory.

        Raises:
            ValueError: If the root directory does not exist
        """
        return web.StaticResource(
            self._prefix,
            self._root,
            show_index=self._show_index,
            follow_symlinks=False,
        )

    def routes(self) -> list[web.RouteDef]:
        """Route definitions mounting the handler at its prefix (GET and HEAD).

        Raises:
            ValueError: If the root directory does not exist
        """
        static_dir = self.static_resource.get_info()["directory"]
        logger.debug(f"Mounting {static_dir} at {self._prefix}/")
        # StaticResource reads the "filename" match key
        return [
            web.get(self._prefix, self.handle),
            web.get(f"{self._prefix}/{{filename:.*}}", self.handle),
        ]

    async def handle(self, request: web.Request) -> web.StreamResponse:
        """Serve the file addressed by the request path.

        Raises:
            web.HTTPNotFound: Path is outside the prefix, escapes the root
                directory, is rejected by the filesystem or does not exist
            web.HTTPForbidden: Directory listing is disabled or the file
                cannot be read
            web.HTTPMovedPermanently: Directory requested without trailing
                slash, or index.html requested directly
        """
        match_info, _ = await self.static_resource.resolve(request)
        if match_info is None:
            raise web.HTTPNotFound()

        raw_path, _, raw_query = request.raw_path.partition("?")
        filename = match_info["filename"]
        if PurePosixPath(filename).name == INDEX_FILE and not raw_path.endswith("/"):
            raise web.HTTPMovedPermanently(raw_path.rsplit("/", 1)[0] + "/")

        loop = asyncio.get_running_loop()
        directory = await loop.run_in_executor(None, self._find_directory, filename)
        if directory is not None:
            if not raw_path.endswith("/"):
                location = f"{raw_path}/"
                if raw_query:
                    location = f"{location}?{raw_query}"
                raise web.HTTPMovedPermanently(location)

            index_path = directory / INDEX_FILE
            if await loop.run_in_executor(None, index_path.is_file):
                return web.FileResponse(index_path)

        return await match_info.handler(request)

    def _find_directory(self, filename: str) -> Path | None:
        """Return the directory named by filename, None for anything else."""
        root = self._root.resolve()
        try:
            path = root.joinpath(filename).resolve()
            path.relative_to(root)
            mode = path.stat().st_mode
        except PermissionError:
            return None
        except (ValueError, OSError) as e:
            logger.debug(f"Rejected static path {filename!r}: {e}")
            raise web.HTTPNotFound() from e
        return path if stat.S_ISDIR(mode) else None
