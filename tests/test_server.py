"""Tests for server module."""

from pathlib import Path
from typing import Any

import pytest
from aiohttp import web
from webstage.app_keys import provider_key
from webstage.config import Config, ResourcesConfig, ServerConfig
from webstage.providers import LocalDir, RemoteBucket
from webstage.server import create_app, run_server


def _remote_config() -> Config:
    return Config(
        server=ServerConfig(),
        resources=ResourcesConfig(
            provider="remote",
            bucket_url="https://cdn.example.com/assets/",
        ),
    )


class TestCreateApp:
    """Tests for create_app()."""

    def test__local_config__stores_local_provider(self, test_config: Config) -> None:
        """Local provider is stored on the application."""
        app = create_app(test_config)

        assert provider_key in app
        provider = app[provider_key]
        assert isinstance(provider, LocalDir)
        assert provider.path == test_config.resources.local_dir

    def test__remote_config__stores_remote_provider(self) -> None:
        """Remote provider is stored on the application."""
        app = create_app(_remote_config())

        assert app[provider_key] == RemoteBucket(url="https://cdn.example.com/assets")

    def test__github_pages_config__raises_value_error(self) -> None:
        """GitHub Pages cannot back a live server."""
        config = Config(
            server=ServerConfig(),
            resources=ResourcesConfig(provider="github_pages", repo_name="my-repo"),
        )

        with pytest.raises(ValueError, match="static websites"):
            create_app(config)

    def test__missing_local_dir__raises_value_error(self, tmp_path: Path) -> None:
        """Local provider fails at startup when its directory is missing."""
        config = Config(
            server=ServerConfig(),
            resources=ResourcesConfig(provider="local", local_dir=tmp_path / "missing"),
        )

        with pytest.raises(ValueError, match="does not exist"):
            create_app(config)


class TestStaticRoutes:
    """Tests for static route mounting."""

    @pytest.mark.asyncio
    async def test__local_provider__serves_web_directory(
        self,
        aiohttp_client: Any,
        test_config: Config,
        static_dir: Path,
    ) -> None:
        """Local provider serves files under /web."""
        client = await aiohttp_client(create_app(test_config))

        response = await client.get("/web/robots.txt")

        assert response.status == 200
        assert await response.text() == (static_dir / "robots.txt").read_text()

    @pytest.mark.asyncio
    async def test__local_provider__does_not_serve_root_paths(
        self,
        aiohttp_client: Any,
        test_config: Config,
    ) -> None:
        """App resource paths at the root are not served from the web directory."""
        client = await aiohttp_client(create_app(test_config))

        response = await client.get("/app.wasm")

        assert response.status == 404

    @pytest.mark.asyncio
    async def test__remote_provider__does_not_mount_web_routes(
        self,
        aiohttp_client: Any,
    ) -> None:
        """Remote bucket serves nothing locally."""
        client = await aiohttp_client(create_app(_remote_config()))

        response = await client.get("/web/app.wasm")

        assert response.status == 404


class TestRunServer:
    """Tests for run_server()."""

    def test__config__runs_app_on_configured_address(
        self,
        test_config: Config,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Server binds to the configured host and port."""
        calls: list[dict[str, Any]] = []
        monkeypatch.setattr(
            web,
            "run_app",
            lambda app, **kwargs: calls.append({"app": app, **kwargs}),
        )

        run_server(test_config)

        assert len(calls) == 1
        assert calls[0]["host"] == "127.0.0.1"
        assert calls[0]["port"] == 8080
        assert provider_key in calls[0]["app"]
