"""Utility functions for loading GraphQL schemas.

This module provides functions for loading schema definition language (SDL)
from files and URLs and building a GraphQLSchema from it, with proper error
handling and validation.
"""

from pathlib import Path
from urllib.parse import urlparse

import requests
from graphql import GraphQLError, GraphQLSchema, build_schema

from .logging_config import get_logger

logger = get_logger(__name__)

SDL_SUFFIXES = {".graphql", ".graphqls", ".gql"}


class SchemaLoaderError(Exception):
    """Custom exception for schema loading errors."""

    pass


def parse_schema(sdl: str, source: str = "<string>") -> GraphQLSchema:
    """Build a schema from SDL text.

    Args:
        sdl: Schema definition language source.
        source: Description of where the text came from, for messages.

    Returns:
        Parsed schema.

    Raises:
        SchemaLoaderError: If the SDL is invalid.
    """
    try:
        return build_schema(sdl)
    except GraphQLError as e:
        logger.error("Invalid schema in %s: %s", source, e.message)
        raise SchemaLoaderError(f"Invalid schema in {source}: {e.message}") from e
    except TypeError as e:
        logger.error("Invalid schema in %s: %s", source, e)
        raise SchemaLoaderError(f"Invalid schema in {source}: {e}") from e


def load_schema_from_file(file_path: str | Path) -> tuple[str, GraphQLSchema]:
    """Load a schema from a local SDL file.

    Args:
        file_path: Path to the schema file.

    Returns:
        Tuple of (source description, parsed schema).

    Raises:
        FileNotFoundError: If file doesn't exist.
        SchemaLoaderError: If file cannot be read or the schema is invalid.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load schema from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() not in SDL_SUFFIXES:
        logger.warning("File does not have a GraphQL extension: %s", file_path)

    try:
        sdl = file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e, exc_info=True)
        raise SchemaLoaderError(f"Error reading file {file_path}: {e}") from e

    schema = parse_schema(sdl, str(file_path))
    logger.info("Successfully loaded schema from %s", file_path)
    return f"📄 {file_path}", schema


def load_schema_from_url(url: str, timeout: int = 30) -> tuple[str, GraphQLSchema]:
    """Load a schema from a URL serving SDL text.

    Args:
        url: URL to fetch the schema from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed schema).

    Raises:
        SchemaLoaderError: If URL is invalid, request fails, or schema is invalid.
    """
    logger.debug("Attempting to load schema from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise SchemaLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise SchemaLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise SchemaLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e, exc_info=True)
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e

    schema = parse_schema(response.text, url)
    logger.info("Successfully loaded schema from %s", url)
    return f"🌐 {url}", schema


def load_schema(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, GraphQLSchema]:
    """Load a schema from either a file or URL.

    Args:
        file_path: Path to local SDL file (mutually exclusive with url).
        url: URL to fetch SDL from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, parsed schema).

    Raises:
        SchemaLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise SchemaLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise SchemaLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_schema_from_file(file_path)
    else:
        return load_schema_from_url(url, timeout)
