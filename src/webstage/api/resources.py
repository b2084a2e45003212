"""Resources API endpoint.

Exposes the locations computed by the configured provider so page renderers
can embed them into generated markup.
"""

from aiohttp import web

from webstage.app_keys import provider_key
from webstage.providers import resource_urls


def create_resources_routes() -> list[web.RouteDef]:
    return [web.get("/api/resources", get_resources)]


async def get_resources(request: web.Request) -> web.Response:
    provider = request.app[provider_key]
    return web.json_response(resource_urls(provider))
