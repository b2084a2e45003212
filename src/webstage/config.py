"""Configuration management for Webstage.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "webstage.toml"

PROVIDER_KINDS = ("local", "remote", "github_pages")


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class ResourcesConfig:
    """Resource provider configuration."""

    provider: str = "local"
    local_dir: Path = field(default_factory=lambda: Path("web"))
    bucket_url: str | None = None
    repo_name: str | None = None
    show_index: bool = True


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    resources: ResourcesConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for webstage.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(server=ServerConfig(), resources=ResourcesConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        server = cls._parse_server(data.get("server"))
        resources = cls._parse_resources(data.get("resources"), config_dir)

        return cls(server=server, resources=resources, config_path=path)

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_resources(cls, data: object, config_dir: Path) -> ResourcesConfig:
        """Parse resources configuration section.

        Relative local directories are resolved against the directory
        containing the config file.

        Args:
            data: Raw resources section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            ResourcesConfig instance
        """
        if data is None:
            return ResourcesConfig(local_dir=config_dir / "web")

        if not isinstance(data, dict):
            raise ValueError("resources section must be a dictionary")

        provider = data.get("provider", "local")
        if not isinstance(provider, str):
            raise ValueError("resources.provider must be a string")
        if provider not in PROVIDER_KINDS:
            raise ValueError(
                f"resources.provider must be one of: {', '.join(PROVIDER_KINDS)}",
            )

        local_dir = data.get("local_dir", "web")
        if not isinstance(local_dir, str):
            raise ValueError("resources.local_dir must be a string")

        bucket_url = data.get("bucket_url")
        if bucket_url is not None and not isinstance(bucket_url, str):
            raise ValueError("resources.bucket_url must be a string")

        repo_name = data.get("repo_name")
        if repo_name is not None and not isinstance(repo_name, str):
            raise ValueError("resources.repo_name must be a string")

        show_index = data.get("show_index", True)
        if not isinstance(show_index, bool):
            raise ValueError("resources.show_index must be a boolean")

        return ResourcesConfig(
            provider=provider,
            local_dir=config_dir / local_dir,
            bucket_url=bucket_url,
            repo_name=repo_name,
            show_index=show_index,
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        provider: str | None = None,
        local_dir: Path | None = None,
        bucket_url: str | None = None,
        repo_name: str | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            provider: Override resources.provider
            local_dir: Override resources.local_dir
            bucket_url: Override resources.bucket_url
            repo_name: Override resources.repo_name

        Returns:
            New Config instance with overrides applied

        Raises:
            ValueError: If the provider override is unknown
        """
        if provider is not None and provider not in PROVIDER_KINDS:
            raise ValueError(
                f"provider must be one of: {', '.join(PROVIDER_KINDS)}",
            )

        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        resources = replace(
            self.resources,
            provider=provider if provider is not None else self.resources.provider,
            local_dir=local_dir if local_dir is not None else self.resources.local_dir,
            bucket_url=bucket_url if bucket_url is not None else self.resources.bucket_url,
            repo_name=repo_name if repo_name is not None else self.resources.repo_name,
        )

        return replace(self, server=server, resources=resources)
