from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List

import yaml
from pydantic import BaseModel, StrictStr, TypeAdapter, ValidationError

from minitools.errors import ParseError

logger = logging.getLogger(__name__)


class PathURL(BaseModel):
    """One `path -> url` record from a redirect data file."""

    path: StrictStr
    url: StrictStr


_PATH_URL_LIST = TypeAdapter(List[PathURL])


def _validate(payload: Any, source: str) -> List[PathURL]:
    # Mirrors the decoders' behavior for an empty document.
    if payload is None:
        return []
    try:
        return _PATH_URL_LIST.validate_python(payload)
    except ValidationError as exc:
        raise ParseError(f"Invalid {source} redirect data: {exc}") from exc


def parse_yaml(data: bytes | str) -> List[PathURL]:
    """
    Parse YAML of the form::

        - path: /some-path
          url: https://www.some-url.com/demo
    """
    try:
        payload = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise ParseError(f"Invalid YAML: {exc}") from exc
    return _validate(payload, "YAML")


def parse_json(data: bytes | str) -> List[PathURL]:
    """Parse a JSON array of `{"path": ..., "url": ...}` objects."""
    try:
        payload = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(f"Invalid JSON: {exc}") from exc
    if payload is None:
        raise ParseError("Invalid JSON redirect data: expected an array, got null")
    return _validate(payload, "JSON")


def build_map(path_urls: Iterable[PathURL]) -> Dict[str, str]:
    """Collapse records into a lookup table; a repeated path keeps its last URL."""
    paths_to_urls: Dict[str, str] = {}
    for entry in path_urls:
        if entry.path in paths_to_urls:
            logger.debug("Duplicate redirect path %s; keeping the later URL", entry.path)
        paths_to_urls[entry.path] = entry.url
    return paths_to_urls
