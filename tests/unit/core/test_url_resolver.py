"""Tests for UrlResolver."""

from unittest.mock import MagicMock

import pytest

from akamaipurge import (
    ContentChange,
    ExternalizationError,
    PurgeTarget,
    StaticExternalizer,
    TargetKind,
    UrlResolver,
)


@pytest.fixture
def externalizer() -> StaticExternalizer:
    return StaticExternalizer(
        {"production": "https://www.my-site.com", "staging": "https://stage.my-site.com"},
        content_root="/content/my-site",
    )


@pytest.fixture
def resolver(externalizer: StaticExternalizer) -> UrlResolver:
    return UrlResolver(externalizer=externalizer)


class TestPageResolution:
    """Tests for resolving pages."""

    @pytest.mark.parametrize("vanity", [None, "", "  "])
    def test_page_without_vanity_url(self, resolver: UrlResolver, vanity) -> None:
        """A page resolves to exactly its externalized .html URL."""
        change = ContentChange(path="/content/my-site/foo/bar", is_page=True, vanity_url=vanity)

        targets = resolver.resolve(change)

        assert targets == [PurgeTarget.url("https://www.my-site.com/foo/bar.html")]

    def test_page_with_vanity_url(self, resolver: UrlResolver) -> None:
        """The vanity URL follows the primary URL."""
        change = ContentChange(
            path="/content/my-site/foo/bar", is_page=True, vanity_url="/bar-alias"
        )

        targets = resolver.resolve(change)

        assert [t.value for t in targets] == [
            "https://www.my-site.com/foo/bar.html",
            "/bar-alias",
        ]
        assert all(t.kind is TargetKind.URL for t in targets)

    def test_vanity_url_emitted_verbatim(self, resolver: UrlResolver) -> None:
        """The vanity URL is emitted exactly as the page reports it."""
        change = ContentChange(
            path="/content/my-site/foo/bar", is_page=True, vanity_url=" /bar-alias "
        )

        targets = resolver.resolve(change)

        assert targets[1] == PurgeTarget.url(" /bar-alias ")

    def test_uses_configured_environment(self, externalizer: StaticExternalizer) -> None:
        resolver = UrlResolver(externalizer=externalizer, environment="staging")

        targets = resolver.resolve(ContentChange(path="/content/my-site/a", is_page=True))

        assert targets[0].value == "https://stage.my-site.com/a.html"

    def test_externalizer_called_with_environment_and_path(self) -> None:
        externalizer = MagicMock()
        externalizer.external_link.return_value = "https://x.test/p"
        resolver = UrlResolver(externalizer=externalizer)

        targets = resolver.resolve(ContentChange(path="/content/p", is_page=True))

        externalizer.external_link.assert_called_once_with("production", "/content/p")
        assert targets == [PurgeTarget.url("https://x.test/p.html")]


class TestFallbacks:
    """Tests for non-pages and unavailable externalization."""

    def test_non_page_resolves_to_raw_path(self, resolver: UrlResolver) -> None:
        change = ContentChange(path="/content/dam/logo.png", is_page=False, vanity_url="/ignored")

        assert resolver.resolve(change) == [PurgeTarget.url("/content/dam/logo.png")]

    def test_missing_externalizer_falls_back(self) -> None:
        resolver = UrlResolver(externalizer=None)

        targets = resolver.resolve(ContentChange(path="/content/a", is_page=True, vanity_url="/v"))

        assert targets == [PurgeTarget.url("/content/a")]

    def test_failing_externalizer_falls_back(self) -> None:
        externalizer = MagicMock()
        externalizer.external_link.side_effect = ExternalizationError("down")
        resolver = UrlResolver(externalizer=externalizer)

        targets = resolver.resolve(ContentChange(path="/content/a", is_page=True))

        assert targets == [PurgeTarget.url("/content/a")]


class TestReferenceFinder:
    """Tests for the referencing pages hook."""

    def test_no_finder_adds_nothing(self, resolver: UrlResolver) -> None:
        targets = resolver.resolve(ContentChange(path="/content/my-site/a", is_page=True))

        assert len(targets) == 1

    def test_referencing_urls_appended_without_duplicates(
        self, externalizer: StaticExternalizer
    ) -> None:
        finder = MagicMock()
        finder.find_referencing_urls.return_value = [
            "https://www.my-site.com/home.html",
            "/a-alias",
            "",
        ]
        resolver = UrlResolver(externalizer=externalizer, reference_finder=finder)

        targets = resolver.resolve(
            ContentChange(path="/content/my-site/a", is_page=True, vanity_url="/a-alias")
        )

        finder.find_referencing_urls.assert_called_once_with("/content/my-site/a")
        assert [t.value for t in targets] == [
            "https://www.my-site.com/a.html",
            "/a-alias",
            "https://www.my-site.com/home.html",
        ]
