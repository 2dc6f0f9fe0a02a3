"""Utility functions for loading JSON text.

This module reads JSON samples from files, URLs or standard input with
proper error handling. Parsing is left to the generation pipeline.
"""

import sys
from pathlib import Path
from typing import TextIO
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class JSONLoaderError(Exception):
    """Custom exception for JSON loading errors."""

    pass


def load_text_from_file(file_path: str | Path) -> tuple[str, str]:
    """Read JSON text from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, file content).

    Raises:
        FileNotFoundError: If file doesn't exist.
        JSONLoaderError: If file cannot be read.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to read JSON from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        # Might still be valid JSON
        logger.warning("File does not have .json extension: %s", file_path)

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info("Read %d characters from %s", len(text), file_path)
    return str(file_path), text


def load_text_from_url(url: str, timeout: int = 30) -> tuple[str, str]:
    """Fetch JSON text from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, response body).

    Raises:
        JSONLoaderError: If URL is invalid or the request fails.
    """
    logger.debug("Attempting to fetch JSON from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise JSONLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise JSONLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise JSONLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise JSONLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e)
        raise JSONLoaderError(f"Request error for URL {url}: {e}") from e

    content_type = response.headers.get("content-type", "").lower()
    if "application/json" not in content_type and not url.endswith(".json"):
        logger.warning("URL %s does not have JSON content type: %s", url, content_type)

    logger.info("Fetched JSON from %s", url)
    return url, response.text


def load_json_text(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
    stdin: TextIO | None = None,
) -> tuple[str, str]:
    """Read JSON text from a file, a URL or standard input.

    A missing file path, or ``-``, reads standard input.

    Args:
        file_path: Path to local JSON file (mutually exclusive with url).
        url: URL to fetch JSON from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).
        stdin: Stream used instead of ``sys.stdin``.

    Returns:
        Tuple of (source description, JSON text).

    Raises:
        JSONLoaderError: If both sources are given or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if file_path and str(file_path) != "-" and url:
        logger.error("Both file_path and url provided")
        raise JSONLoaderError("Cannot specify both file_path and url")

    if url:
        return load_text_from_url(url, timeout)

    if file_path and str(file_path) != "-":
        return load_text_from_file(file_path)

    stream = stdin or sys.stdin
    logger.debug("Reading JSON from standard input")
    return "<stdin>", stream.read()
