"""Shared test fixtures."""

from pathlib import Path

import pytest
from webstage.config import Config, ResourcesConfig, ServerConfig


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """Create a static resources directory.

    Layout:
        web/
        ├── app.wasm
        ├── robots.txt
        ├── docs/
        │   ├── index.html
        │   └── guide.txt
        └── assets/
            └── main.css
    """
    web_dir = tmp_path / "web"
    web_dir.mkdir()
    (web_dir / "app.wasm").write_bytes(b"\x00asm\x01\x00\x00\x00")
    (web_dir / "robots.txt").write_text("User-agent: *\nDisallow:\n")

    docs = web_dir / "docs"
    docs.mkdir()
    (docs / "index.html").write_text("<h1>Docs</h1>")
    (docs / "guide.txt").write_text("guide")

    assets = web_dir / "assets"
    assets.mkdir()
    (assets / "main.css").write_text("body { margin: 0; }")

    return web_dir


@pytest.fixture
def test_config(static_dir: Path) -> Config:
    """Create a test configuration using the local directory provider."""
    return Config(
        server=ServerConfig(),
        resources=ResourcesConfig(provider="local", local_dir=static_dir),
    )
