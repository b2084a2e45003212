"""aiohttp server for Webstage.

Application factory and route registration for standalone server mode.
"""

import logging

from aiohttp import web

from webstage.api.resources import create_resources_routes
from webstage.app_keys import provider_key
from webstage.config import Config
from webstage.providers import StaticFileServer, provider_from_config

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application

    Raises:
        ValueError: If the configured provider cannot serve a live application
    """
    provider = provider_from_config(config.resources)
    if provider.static_only:
        raise ValueError(
            f"The {config.resources.provider} provider can only be used to "
            "generate static websites",
        )

    app = web.Application()
    app[provider_key] = provider

    app.router.add_routes(create_resources_routes())

    # Static resources under /web when the provider serves them itself
    if isinstance(provider, StaticFileServer):
        app.router.add_routes(provider.routes())
        logger.debug("Mounted static file routes")

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
