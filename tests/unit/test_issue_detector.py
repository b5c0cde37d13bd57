"""Unit tests for issue detection."""
from __future__ import annotations

from src.seo.issue_detector import (
    CANONICAL_FIX_LINK,
    OPEN_GRAPH_FIX_LINK,
    TITLE_FIX_LINK,
    TWITTER_FIX_LINK,
    _check_canonical,
    _check_description,
    _check_open_graph,
    _check_title,
    _check_twitter,
    detect_issues,
)
from src.seo.models import (
    CanonicalMeta,
    DescriptionMeta,
    MetadataRecord,
    OpenGraphMeta,
    Severity,
    TitleMeta,
    TwitterMeta,
)


def _titles(issues):
    return [issue.title for issue in issues]


class TestTitleChecks:
    """Tests for title tag validation."""

    def test_missing_title(self):
        """Title missing should return a single error."""
        issues = _check_title(TitleMeta())
        assert _titles(issues) == ["Missing title tag"]
        assert issues[0].severity == Severity.ERROR
        assert issues[0].fix_link == TITLE_FIX_LINK

    def test_title_too_short(self):
        """Short title warning embeds the exact length."""
        issues = _check_title(TitleMeta(content="Short"))
        assert _titles(issues) == ["Title tag too short"]
        assert issues[0].severity == Severity.WARNING
        assert "only 5 characters" in issues[0].description

    def test_title_too_long(self):
        """Long title is informational."""
        issues = _check_title(TitleMeta(content="A" * 70))
        assert _titles(issues) == ["Title tag may be truncated in search results"]
        assert issues[0].severity == Severity.INFO
        assert "70 characters" in issues[0].description

    def test_title_optimal_length(self):
        """Titles of 30-60 characters have no issues."""
        assert _check_title(TitleMeta(content="x" * 30)) == []
        assert _check_title(TitleMeta(content="x" * 60)) == []


class TestDescriptionChecks:
    """Tests for meta description validation."""

    def test_missing_description(self):
        """Missing description is an error."""
        issues = _check_description(DescriptionMeta())
        assert _titles(issues) == ["Missing meta description"]
        assert issues[0].severity == Severity.ERROR

    def test_description_too_short(self):
        """Short description is a warning."""
        issues = _check_description(DescriptionMeta(content="x" * 100))
        assert _titles(issues) == ["Meta description too short"]
        assert issues[0].severity == Severity.WARNING
        assert "only 100 characters" in issues[0].description

    def test_description_too_long(self):
        """Long description is informational."""
        issues = _check_description(DescriptionMeta(content="x" * 200))
        assert _titles(issues) == ["Meta description may be truncated"]
        assert issues[0].severity == Severity.INFO

    def test_description_optimal_length(self):
        """120-160 characters have no issues."""
        assert _check_description(DescriptionMeta(content="x" * 140)) == []


class TestCanonicalChecks:
    """Tests for canonical URL validation."""

    def test_missing_canonical(self):
        """Missing canonical is a warning."""
        issues = _check_canonical(CanonicalMeta())
        assert _titles(issues) == ["Missing canonical tag"]
        assert issues[0].severity == Severity.WARNING
        assert issues[0].fix_link == CANONICAL_FIX_LINK

    def test_present_canonical(self):
        """Any canonical value passes."""
        assert _check_canonical(CanonicalMeta(content="/relative")) == []


class TestOpenGraphChecks:
    """Tests for Open Graph validation."""

    def test_all_missing_single_error(self):
        """No core og tags gives one error and no per-field warnings."""
        issues = _check_open_graph(OpenGraphMeta(url="u", type="website"))
        assert _titles(issues) == ["Missing Open Graph meta tags"]
        assert issues[0].severity == Severity.ERROR
        assert issues[0].fix_link == OPEN_GRAPH_FIX_LINK

    def test_title_only(self):
        """Each missing core field is reported separately."""
        issues = _check_open_graph(OpenGraphMeta(title="t"))
        assert _titles(issues) == ["Missing og:description", "Missing og:image"]
        assert all(i.severity == Severity.WARNING for i in issues)

    def test_image_only(self):
        """An image alone still reports the title and description."""
        issues = _check_open_graph(OpenGraphMeta(image="i"))
        assert _titles(issues) == ["Missing og:title", "Missing og:description"]

    def test_complete(self):
        """All core fields present gives no issues; url/type aren't checked."""
        assert _check_open_graph(OpenGraphMeta(title="t", description="d", image="i")) == []


class TestTwitterChecks:
    """Tests for Twitter Card validation."""

    def test_all_missing_single_error(self):
        """Nothing present gives one error."""
        issues = _check_twitter(TwitterMeta())
        assert _titles(issues) == ["Missing Twitter Card meta tags"]
        assert issues[0].severity == Severity.ERROR
        assert issues[0].fix_link == TWITTER_FIX_LINK

    def test_card_missing(self):
        """Only the card type is reported individually."""
        issues = _check_twitter(TwitterMeta(title="t", description="d"))
        assert _titles(issues) == ["Missing twitter:card"]
        assert issues[0].severity == Severity.WARNING

    def test_other_fields_not_reported(self):
        """A card without title/description has no issues."""
        assert _check_twitter(TwitterMeta(card="summary")) == []


class TestDetectIssues:
    """Full issue detection."""

    def test_category_order(self):
        """Issues follow title, description, canonical, og, twitter order."""
        issues = detect_issues(MetadataRecord())
        assert _titles(issues) == [
            "Missing title tag",
            "Missing meta description",
            "Missing canonical tag",
            "Missing Open Graph meta tags",
            "Missing Twitter Card meta tags",
        ]

    def test_single_missing_title_error(self):
        """An absent title produces exactly one title error."""
        issues = detect_issues(MetadataRecord(description=DescriptionMeta(content="x" * 140)))
        assert _titles(issues).count("Missing title tag") == 1

    def test_to_dict_uses_fix_link_key(self):
        """Serialized issues use camelCase fixLink."""
        issue = detect_issues(MetadataRecord())[0]
        assert issue.to_dict() == {
            "severity": "error",
            "title": "Missing title tag",
            "description": issue.description,
            "fixLink": TITLE_FIX_LINK,
        }
