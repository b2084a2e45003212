"""Path conventions shared by all resource providers.

Static resources always live under WEB_PREFIX so they never collide with
app resources served from the root (manifest, worker and loader scripts).
"""

WEB_PREFIX = "/web"
WASM_FILE = "app.wasm"
ROBOTS_TXT = "robots.txt"
ADS_TXT = "ads.txt"
INDEX_FILE = "index.html"


def static_url(root: str, filename: str) -> str:
    """Build the URL of a well-known file located under the web prefix.

    Args:
        root: Static resources root (empty, a subpath or an absolute URL)
        filename: Name of the file inside the web directory

    Returns:
        URL matching the pattern ROOT/web/FILENAME
    """
    return f"{root}{WEB_PREFIX}/{filename}"
