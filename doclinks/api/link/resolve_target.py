"""Map a link reference to the URL that is actually checked."""

from ..config.RepositoryConfig import RepositoryConfig
from ._parsers import LinkRef
from .resolve_path import is_absolute_url, resolve_path
from .ResolvedTarget import ResolvedTarget


def resolve_target(ref: LinkRef, repository: RepositoryConfig) -> ResolvedTarget:
    """Resolve ``ref`` to an absolute URL.

    Relative hrefs are resolved against the source file and then pinned to
    the repository blob URL at the configured commit. Never raises.
    """
    if is_absolute_url(ref.href):
        return ResolvedTarget(url=ref.href, original=ref.href)
    path = resolve_path(ref.source_file, ref.href)
    return ResolvedTarget(url=repository.blob_url(path), original=ref.href)
