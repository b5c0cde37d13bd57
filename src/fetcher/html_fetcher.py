"""HTML fetching utilities with SSRF protection."""
from __future__ import annotations

import logging
import socket
from dataclasses import dataclass
from ipaddress import ip_address
from urllib.parse import urljoin, urlparse

import requests
from bs4 import UnicodeDammit

from src.config.settings import settings

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """The target answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, url: str):
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"Failed to fetch URL: {status_code} {reason}".rstrip())


@dataclass
class FetchedPage:
    """Raw page body plus where it was actually served from."""
    html: str
    final_url: str
    status_code: int = 200
    content_type: str = ""


def _is_url(source: str) -> bool:
    parsed = urlparse(source)
    return parsed.scheme in {"http", "https"}


def _validate_ip(ip_str: str) -> tuple[bool, str]:
    """Check if an IP address is safe (not private/internal)."""
    try:
        ip = ip_address(ip_str)
        if ip.is_private or ip.is_loopback or ip.is_reserved or ip.is_link_local:
            return False, f"Access to private/internal IP addresses is forbidden: {ip_str}"
        return True, ""
    except ValueError:
        return False, f"Invalid IP address: {ip_str}"


def _resolve_and_validate_url(url: str) -> tuple[str, str, str]:
    """
    Resolve URL hostname to IP and validate it's safe.
    Returns (resolved_ip, hostname, error_message).
    """
    parsed = urlparse(url)

    if parsed.scheme not in {"http", "https"}:
        return "", "", "Only http and https schemes are allowed"

    hostname = parsed.hostname
    if not hostname:
        return "", "", "Invalid URL: hostname not found"

    try:
        resolved_ip = socket.gethostbyname(hostname)
    except (socket.gaierror, UnicodeError):
        return "", "", f"Could not resolve hostname: {hostname}"

    is_safe, error_msg = _validate_ip(resolved_ip)
    if not is_safe:
        return "", "", error_msg

    return resolved_ip, hostname, ""


def _request_headers() -> dict[str, str]:
    fetcher = settings.fetcher
    return {
        "User-Agent": fetcher.user_agent,
        "Accept": fetcher.accept,
        "Accept-Language": fetcher.accept_language,
        "Referer": fetcher.referer,
    }


def _get(url: str) -> requests.Response:
    response = requests.get(
        url,
        headers=_request_headers(),
        timeout=settings.fetcher.request_timeout,
        allow_redirects=False,  # Redirect targets are validated one by one
        stream=True,  # Enable streaming for size check
    )

    content_length = response.headers.get("Content-Length")
    max_size = settings.fetcher.max_response_size
    if content_length and content_length.isdigit() and int(content_length) > max_size:
        response.close()
        raise ValueError(f"Response too large: {int(content_length)} bytes (max {max_size})")

    return response


def _read_body(response: requests.Response) -> str:
    """Read the response with a size cap and decode it leniently."""
    max_size = settings.fetcher.max_response_size
    chunks = []
    total_size = 0
    for chunk in response.iter_content(chunk_size=8192, decode_unicode=False):
        total_size += len(chunk)
        if total_size > max_size:
            response.close()
            raise ValueError(f"Response too large: exceeded {max_size} bytes")
        chunks.append(chunk)

    content_bytes = b"".join(chunks)

    # requests reports ISO-8859-1 for any text/* response without a charset,
    # so only a charset the server actually sent is trusted outright
    declared = []
    if "charset=" in response.headers.get("Content-Type", "").lower() and response.encoding:
        declared.append(response.encoding)

    # Then BOM, UTF-8, <meta charset>, detection, windows-1252
    dammit = UnicodeDammit(
        content_bytes,
        known_definite_encodings=declared,
        user_encodings=["utf-8"],
        is_html=True,
    )
    if dammit.unicode_markup is not None:
        return dammit.unicode_markup
    return content_bytes.decode("utf-8", errors="replace")


def fetch_page(source: str) -> FetchedPage:
    """
    Fetch a page and report the URL it was finally served from.

    Security measures:
    - Only accepts http/https URLs (no local file paths)
    - Validates resolved IP is not private/internal (SSRF protection)
    - Follows redirects manually, re-validating every hop
    - Limits response size to prevent memory exhaustion

    Raises:
        ValueError: URL rejected or response too large
        FetchError: Non-2xx response
        requests.RequestException: Network failure
    """
    if not _is_url(source):
        raise ValueError("Only http and https URLs are allowed")

    _, _, error_msg = _resolve_and_validate_url(source)
    if error_msg:
        raise ValueError(f"SSRF protection: {error_msg}")

    response = _get(source)

    redirect_count = 0
    while response.is_redirect and redirect_count < settings.fetcher.max_redirects:
        redirect_count += 1
        redirect_url = response.headers.get("Location", "")
        if not redirect_url:
            break

        redirect_url = urljoin(source, redirect_url)

        _, _, redirect_error = _resolve_and_validate_url(redirect_url)
        if redirect_error:
            raise ValueError(f"SSRF protection: Redirect blocked - {redirect_error}")

        logger.debug("Following redirect %s -> %s", source, redirect_url)
        response.close()
        response = _get(redirect_url)
        source = redirect_url

    if not 200 <= response.status_code < 300:
        response.close()
        raise FetchError(response.status_code, response.reason or "", source)

    return FetchedPage(
        html=_read_body(response),
        final_url=source,
        status_code=response.status_code,
        content_type=response.headers.get("Content-Type", ""),
    )


def fetch_html(source: str) -> str:
    """Fetch raw HTML from a URL. See ``fetch_page``."""
    return fetch_page(source).html
