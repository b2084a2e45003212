"""Webstage - resource locations for web application runtimes.

Resolves where app resources and static resources live, and serves static
resources from a local directory when requested.
"""

from webstage.providers import (
    GitHubPages,
    LocalDir,
    RemoteBucket,
    ResourceProvider,
    github_pages,
    local_dir,
    remote_bucket,
)

__all__ = [
    "GitHubPages",
    "LocalDir",
    "RemoteBucket",
    "ResourceProvider",
    "github_pages",
    "local_dir",
    "remote_bucket",
]
