"""Prioritized fixes for the analyzed page."""
from __future__ import annotations

from src.seo.models import MetadataRecord, Priority, Recommendation, ScoreCategory

TWITTER_CARD_EXAMPLE = """\
<meta name="twitter:card" content="summary_large_image">
<meta name="twitter:title" content="Your Title Here">
<meta name="twitter:description" content="Your description here">
<meta name="twitter:image" content="https://example.com/image.jpg">"""

# og property -> example tag, in the order they are suggested
OPEN_GRAPH_EXAMPLES = {
    "og:title": '<meta property="og:title" content="Your Title Here">',
    "og:description": '<meta property="og:description" content="Your description here">',
    "og:image": '<meta property="og:image" content="https://example.com/image.jpg">',
    "og:url": '<meta property="og:url" content="https://example.com/page">',
    "og:type": '<meta property="og:type" content="website">',
}

OPEN_GRAPH_EXAMPLE = "\n".join([
    *OPEN_GRAPH_EXAMPLES.values(),
    '<meta property="og:site_name" content="Your Site Name">',
])

DESCRIPTION_EXAMPLE = (
    '<meta name="description" content="Your description here - make it compelling '
    'and relevant to the page content.">'
)

CANONICAL_EXAMPLE = '<link rel="canonical" href="https://example.com/your-page">'

STRUCTURED_DATA_EXAMPLE = """\
<script type="application/ld+json">
{
  "@context": "https://schema.org",
  "@type": "WebPage",
  "name": "Page Title",
  "description": "Page description",
  "url": "https://example.com/page"
}
</script>"""


def _missing_open_graph_properties(metadata: MetadataRecord) -> list[str]:
    og = metadata.open_graph
    present = {
        "og:title": og.title,
        "og:description": og.description,
        "og:image": og.image,
        "og:url": og.url,
        "og:type": og.type,
    }
    return [prop for prop, value in present.items() if not value]


def _high_priority(metadata: MetadataRecord) -> list[Recommendation]:
    recommendations = []

    if metadata.twitter.score == ScoreCategory.MISSING:
        recommendations.append(Recommendation(
            priority=Priority.HIGH,
            title="Add Twitter Card Meta Tags",
            description=(
                "Implement Twitter Card meta tags to control how your content appears "
                "when shared on Twitter."
            ),
            code=TWITTER_CARD_EXAMPLE,
        ))

    og_score = metadata.open_graph.score
    if og_score == ScoreCategory.MISSING:
        recommendations.append(Recommendation(
            priority=Priority.HIGH,
            title="Add Open Graph Meta Tags",
            description=(
                "Implement Open Graph meta tags to control how your content appears when "
                "shared on social media platforms like Facebook."
            ),
            code=OPEN_GRAPH_EXAMPLE,
        ))
    elif og_score == ScoreCategory.NEEDS_WORK:
        missing = _missing_open_graph_properties(metadata)
        if missing:
            code = "<!-- Add these missing Open Graph tags -->\n"
            code += "".join(f"{OPEN_GRAPH_EXAMPLES[prop]}\n" for prop in missing)
            recommendations.append(Recommendation(
                priority=Priority.HIGH,
                title="Complete Open Graph Implementation",
                description=(
                    f"Add missing Open Graph properties ({', '.join(missing)}) to improve "
                    "how your content appears on social media."
                ),
                code=code,
            ))

    if metadata.description.score == ScoreCategory.MISSING:
        recommendations.append(Recommendation(
            priority=Priority.HIGH,
            title="Add Meta Description",
            description=(
                "Add a meta description tag to improve click-through rates from search "
                "results. Keep it between 120-160 characters."
            ),
            code=DESCRIPTION_EXAMPLE,
        ))

    return recommendations


def _medium_priority(metadata: MetadataRecord) -> list[Recommendation]:
    recommendations = []

    if not metadata.canonical.content:
        recommendations.append(Recommendation(
            priority=Priority.MEDIUM,
            title="Add Canonical Tag",
            description=(
                "Add a canonical tag to prevent duplicate content issues and consolidate "
                "link signals."
            ),
            code=CANONICAL_EXAMPLE,
        ))

    recommendations.append(Recommendation(
        priority=Priority.MEDIUM,
        title="Add Structured Data",
        description=(
            "Implement JSON-LD structured data to provide more context about your page "
            "content to search engines."
        ),
        code=STRUCTURED_DATA_EXAMPLE,
    ))

    if metadata.open_graph.image or metadata.twitter.image:
        recommendations.append(Recommendation(
            priority=Priority.MEDIUM,
            title="Optimize Open Graph Image",
            description=(
                "Resize your Open Graph image to 1200x630 pixels for optimal display "
                "across social platforms."
            ),
        ))

    return recommendations


def recommend(metadata: MetadataRecord) -> list[Recommendation]:
    """Build recommendations for a scored metadata record.

    Args:
        metadata: Record returned by ``score_metadata``

    Returns:
        High-priority recommendations followed by medium-priority ones,
        each group in detection order
    """
    return _high_priority(metadata) + _medium_priority(metadata)
