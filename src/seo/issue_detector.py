"""Metadata issue checks."""
from __future__ import annotations

from src.seo.models import (
    CanonicalMeta,
    DescriptionMeta,
    Issue,
    MetadataRecord,
    OpenGraphMeta,
    Severity,
    TitleMeta,
    TwitterMeta,
)
from src.seo.scorer import (
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)

# Documentation links, one per category
TITLE_FIX_LINK = "https://moz.com/learn/seo/title-tag"
DESCRIPTION_FIX_LINK = "https://moz.com/learn/seo/meta-description"
CANONICAL_FIX_LINK = "https://moz.com/learn/seo/canonicalization"
OPEN_GRAPH_FIX_LINK = "https://ogp.me/"
TWITTER_FIX_LINK = "https://developer.twitter.com/en/docs/twitter-for-websites/cards/overview/abouts-cards"


def _check_title(title: TitleMeta) -> list[Issue]:
    """Check page title length."""
    if not title.content:
        return [Issue(
            severity=Severity.ERROR,
            title="Missing title tag",
            description="Your page is missing a title tag, which is critical for SEO and usability.",
            fix_link=TITLE_FIX_LINK,
        )]

    if title.length < TITLE_MIN_LENGTH:
        return [Issue(
            severity=Severity.WARNING,
            title="Title tag too short",
            description=(
                f"Your title tag is only {title.length} characters. For best SEO results, "
                f"use between {TITLE_MIN_LENGTH}-{TITLE_MAX_LENGTH} characters."
            ),
            fix_link=TITLE_FIX_LINK,
        )]

    if title.length > TITLE_MAX_LENGTH:
        return [Issue(
            severity=Severity.INFO,
            title="Title tag may be truncated in search results",
            description=(
                f"Your title tag is {title.length} characters, which may get truncated in some "
                f"search results. Consider keeping it under {TITLE_MAX_LENGTH} characters."
            ),
            fix_link=TITLE_FIX_LINK,
        )]

    return []


def _check_description(description: DescriptionMeta) -> list[Issue]:
    """Check meta description length."""
    if not description.content:
        return [Issue(
            severity=Severity.ERROR,
            title="Missing meta description",
            description=(
                "Your page is missing a meta description, which helps improve "
                "click-through rates from search results."
            ),
            fix_link=DESCRIPTION_FIX_LINK,
        )]

    if description.length < DESCRIPTION_MIN_LENGTH:
        return [Issue(
            severity=Severity.WARNING,
            title="Meta description too short",
            description=(
                f"Your meta description is only {description.length} characters. For best "
                f"results, use between {DESCRIPTION_MIN_LENGTH}-{DESCRIPTION_MAX_LENGTH} characters."
            ),
            fix_link=DESCRIPTION_FIX_LINK,
        )]

    if description.length > DESCRIPTION_MAX_LENGTH:
        return [Issue(
            severity=Severity.INFO,
            title="Meta description may be truncated",
            description=(
                f"Your meta description is {description.length} characters, which may get "
                f"truncated in search results. Consider keeping it under "
                f"{DESCRIPTION_MAX_LENGTH} characters."
            ),
            fix_link=DESCRIPTION_FIX_LINK,
        )]

    return []


def _check_canonical(canonical: CanonicalMeta) -> list[Issue]:
    """Check that a canonical URL is declared."""
    if canonical.content:
        return []
    return [Issue(
        severity=Severity.WARNING,
        title="Missing canonical tag",
        description="Your page is missing a canonical tag, which helps prevent duplicate content issues.",
        fix_link=CANONICAL_FIX_LINK,
    )]


def _check_open_graph(og: OpenGraphMeta) -> list[Issue]:
    """Check Open Graph tags.

    A page without any of title/description/image gets one error; otherwise
    each missing core property is reported on its own.
    """
    if not (og.title or og.description or og.image):
        return [Issue(
            severity=Severity.ERROR,
            title="Missing Open Graph meta tags",
            description=(
                "Open Graph meta tags are missing from your page. These tags help optimize how "
                "your content appears when shared on social media platforms like Facebook."
            ),
            fix_link=OPEN_GRAPH_FIX_LINK,
        )]

    issues = []
    for prop, value, purpose in (
        ("og:title", og.title, "the title of your content"),
        ("og:description", og.description, "the description of your content"),
        ("og:image", og.image, "the image displayed"),
    ):
        if not value:
            issues.append(Issue(
                severity=Severity.WARNING,
                title=f"Missing {prop}",
                description=(
                    f"The {prop} tag is missing. This tag defines {purpose} "
                    "when your content is shared on social media."
                ),
                fix_link=OPEN_GRAPH_FIX_LINK,
            ))
    return issues


def _check_twitter(twitter: TwitterMeta) -> list[Issue]:
    """Check Twitter Card tags. Only the card type is reported individually."""
    if not (twitter.card or twitter.title or twitter.description or twitter.image):
        return [Issue(
            severity=Severity.ERROR,
            title="Missing Twitter Card meta tags",
            description=(
                "Twitter Card meta tags are missing from your page. These tags help optimize "
                "how your content appears when shared on Twitter."
            ),
            fix_link=TWITTER_FIX_LINK,
        )]

    if not twitter.card:
        return [Issue(
            severity=Severity.WARNING,
            title="Missing twitter:card",
            description=(
                "The twitter:card tag is missing. This tag defines the type of card to be "
                "displayed when your content is shared on Twitter."
            ),
            fix_link=TWITTER_FIX_LINK,
        )]

    return []


def detect_issues(metadata: MetadataRecord) -> list[Issue]:
    """Run all metadata checks.

    Issues are returned in category order: title, description, canonical,
    Open Graph, Twitter.
    """
    issues: list[Issue] = []
    issues.extend(_check_title(metadata.title))
    issues.extend(_check_description(metadata.description))
    issues.extend(_check_canonical(metadata.canonical))
    issues.extend(_check_open_graph(metadata.open_graph))
    issues.extend(_check_twitter(metadata.twitter))
    return issues
