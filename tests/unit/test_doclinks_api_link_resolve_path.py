"""Unit tests for path resolution and repository URL composition."""

import pytest

from doclinks.api.config.RepositoryConfig import RepositoryConfig
from doclinks.api.link._parsers import LinkRef
from doclinks.api.link.resolve_path import is_absolute_url, resolve_path
from doclinks.api.link.resolve_target import resolve_target
from doclinks.api.link.ResolvedTarget import ResolvedTarget


def ref(href: str, source_file: str = "build/guide.md") -> LinkRef:
    return LinkRef(href=href, source_file=source_file, line_number=1, column_number=1, link_type="inline")


class TestResolvePath:
    def test_absolute_url_unchanged(self):
        assert resolve_path("build/guide.md", "https://example.com/a") == "https://example.com/a"
        assert resolve_path("build/guide.md", "HTTP://example.com") == "HTTP://example.com"

    def test_root_relative_unchanged(self):
        assert resolve_path("build/guide.md", "/README.md") == "/README.md"

    def test_dot_segment_is_preserved_verbatim(self):
        # Joining is purely textual: "./" is not normalized away
        assert resolve_path("build/guide.md", "./node.md") == "build/./node.md"
        assert resolve_path("dir/file.md", "./other.md") == "dir/./other.md"

    def test_parent_segment_is_preserved_verbatim(self):
        assert resolve_path("a/b/c.md", "../d.md") == "a/b/../d.md"

    def test_top_level_source(self):
        assert resolve_path("README.md", "docs/intro.md") == "docs/intro.md"

    def test_backslash_source_is_treated_as_separator(self):
        assert resolve_path("build\\guide.md", "x.md") == "build/x.md"

    @pytest.mark.parametrize("href", ["other.md", "./x.md", "../y.md", "img.png#frag", "weird path?.md"])
    def test_relative_resolution_never_yields_url(self, href):
        assert not is_absolute_url(resolve_path("dir/file.md", href))


class TestResolveTarget:
    def test_absolute_link(self, repository):
        target = resolve_target(ref("https://example.com"), repository)
        assert target == ResolvedTarget(url="https://example.com", original="https://example.com")

    def test_relative_link_uses_commit_blob_url(self, repository):
        target = resolve_target(ref("./node.md"), repository)
        assert target.url == "https://github.com/acme/docs/blob/abc123/build/./node.md"
        assert target.original == "./node.md"

    def test_root_relative_link(self, repository):
        target = resolve_target(ref("/CONTRIBUTING.md#setup"), repository)
        assert target.url == "https://github.com/acme/docs/blob/abc123/CONTRIBUTING.md#setup"

    def test_custom_host(self):
        repo = RepositoryConfig(host="git.example.org/", owner="o", name="n", commit="c")
        assert resolve_target(ref("x.md", "x/y.md"), repo).url == "https://git.example.org/o/n/blob/c/x/x.md"


def test_resolved_target_requires_url():
    with pytest.raises(ValueError):
        ResolvedTarget(url="", original="x")
