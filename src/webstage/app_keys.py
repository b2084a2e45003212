"""Application keys for type-safe app configuration access."""

from aiohttp import web

from webstage.providers import ResourceProvider

provider_key = web.AppKey("provider", ResourceProvider)
