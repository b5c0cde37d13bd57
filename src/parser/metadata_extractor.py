"""Extract SEO metadata (title, description, canonical, social tags) from HTML."""
from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace

from src.parser.html_document import HtmlDocument, attribute
from src.parser.url_resolver import resolve_url
from src.seo.models import (
    CanonicalMeta,
    DescriptionMeta,
    MetadataRecord,
    MetaTag,
    OpenGraphMeta,
    TitleMeta,
    TwitterMeta,
)

Source = Callable[[HtmlDocument], str | None]

NO_TITLE = "No title found"

# Images most likely to represent the page when no social image is declared
FEATURED_IMAGE_SELECTOR = 'img[class*="featured"], article img, .post img, .content img'

# Names already reported in their own category, or irrelevant for SEO
_EXCLUDED_PREFIXES = ("og:", "twitter:")
_EXCLUDED_NAMES = ("description", "viewport")


def _og(prop: str) -> Source:
    return lambda doc: doc.meta_content("property", prop)


def _named(name: str) -> Source:
    return lambda doc: doc.meta_content("name", name)


def first_available(sources: Iterable[Source], doc: HtmlDocument) -> str | None:
    """Return the first non-empty value produced by ``sources``."""
    for source in sources:
        value = source(doc)
        if value:
            return value
    return None


# Fallback chains, in precedence order
TITLE_SOURCES: tuple[Source, ...] = (
    lambda doc: doc.joined_text("title"),
    lambda doc: doc.text("h1"),
    lambda doc: NO_TITLE,
)

DESCRIPTION_SOURCES: tuple[Source, ...] = (
    _named("description"),
    _og("og:description"),
    _named("twitter:description"),
)

CANONICAL_SOURCES: tuple[Source, ...] = (
    lambda doc: doc.attr('link[rel="canonical"]', "href"),
    _og("og:url"),
)

OG_IMAGE_SOURCES: tuple[Source, ...] = (
    _og("og:image"),
)

TWITTER_IMAGE_SOURCES: tuple[Source, ...] = (
    _named("twitter:image"),
    _named("twitter:image:src"),
)

PAGE_IMAGE_SOURCES: tuple[Source, ...] = (
    _og("og:image"),
    _og("og:image:url"),
    _named("twitter:image"),
    _named("twitter:image:src"),
    lambda doc: doc.attr(FEATURED_IMAGE_SELECTOR, "src"),
    lambda doc: doc.attr("img", "src"),
)


def _extract_open_graph(doc: HtmlDocument, page_url: str) -> OpenGraphMeta:
    return OpenGraphMeta(
        title=_og("og:title")(doc),
        description=_og("og:description")(doc),
        image=resolve_url(page_url, first_available(OG_IMAGE_SOURCES, doc)),
        url=_og("og:url")(doc),
        type=_og("og:type")(doc),
        site_name=_og("og:site_name")(doc),
    )


def _extract_twitter(doc: HtmlDocument, page_url: str) -> TwitterMeta:
    return TwitterMeta(
        card=_named("twitter:card")(doc),
        title=_named("twitter:title")(doc),
        description=_named("twitter:description")(doc),
        image=resolve_url(page_url, first_available(TWITTER_IMAGE_SOURCES, doc)),
    )


def _extract_other(doc: HtmlDocument) -> tuple[MetaTag, ...]:
    tags = []
    for element in doc.all("meta"):
        name = attribute(element, "name") or attribute(element, "property")
        content = attribute(element, "content")
        if not name or not content:
            continue
        if name.startswith(_EXCLUDED_PREFIXES) or name in _EXCLUDED_NAMES:
            continue
        tags.append(MetaTag(name=name, content=content))
    return tuple(tags)


def extract_metadata(html: str, page_url: str) -> MetadataRecord:
    """Build a metadata record for a page.

    Args:
        html: Raw HTML of the page
        page_url: URL the HTML was fetched from, used to absolutize images

    Returns:
        MetadataRecord with every score left at ``missing``
    """
    doc = HtmlDocument(html)

    open_graph = _extract_open_graph(doc, page_url)
    twitter = _extract_twitter(doc, page_url)

    # Fill social images from whatever the page offers
    page_image = resolve_url(page_url, first_available(PAGE_IMAGE_SOURCES, doc))
    if not open_graph.image and page_image:
        open_graph = replace(open_graph, image=page_image)
    if not twitter.image:
        twitter = replace(twitter, image=open_graph.image or page_image)

    return MetadataRecord(
        title=TitleMeta(content=first_available(TITLE_SOURCES, doc)),
        description=DescriptionMeta(content=first_available(DESCRIPTION_SOURCES, doc)),
        canonical=CanonicalMeta(content=first_available(CANONICAL_SOURCES, doc)),
        open_graph=open_graph,
        twitter=twitter,
        other=_extract_other(doc),
    )
