from __future__ import annotations

import logging
from typing import Mapping, Sequence

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, RedirectResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from minitools.redirect.parsers import build_map, parse_json, parse_yaml

logger = logging.getLogger(__name__)

HELLO_TEXT = "Hello World.\n"


def map_handler(paths_to_urls: Mapping[str, str], fallback: ASGIApp) -> ASGIApp:
    """
    Return an ASGI app that redirects any path found in `paths_to_urls` to its URL.

    Hits answer with `302 Found` and a `Location` header. Misses, and any non-HTTP
    scope such as lifespan, are handed to `fallback` untouched. The mapping is copied
    here and only read afterwards, so the handler is safe to share across requests.
    """
    table = dict(paths_to_urls)

    async def handler(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            destination = table.get(scope["path"])
            if destination is not None:
                logger.debug("Redirecting %s to %s", scope["path"], destination)
                response = RedirectResponse(destination, status_code=302)
                await response(scope, receive, send)
                return
        await fallback(scope, receive, send)

    return handler


def yaml_handler(data: bytes | str, fallback: ASGIApp) -> ASGIApp:
    """
    Build a `map_handler` from YAML records of the form::

        - path: /some-path
          url: https://www.some-url.com/demo

    Invalid YAML raises `ParseError`.
    """
    return map_handler(build_map(parse_yaml(data)), fallback)


def json_handler(data: bytes | str, fallback: ASGIApp) -> ASGIApp:
    """JSON counterpart of `yaml_handler`; invalid JSON raises `ParseError`."""
    return map_handler(build_map(parse_json(data)), fallback)


def chain(mappings: Sequence[Mapping[str, str]], fallback: ASGIApp) -> ASGIApp:
    """Link mappings into one fallback chain; the first mapping is consulted first."""
    handler = fallback
    for mapping in reversed(mappings):
        handler = map_handler(mapping, handler)
    return handler


def hello_app() -> FastAPI:
    """Catch-all application that answers every path with a plain greeting."""
    app = FastAPI(
        title="minitools redirector",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    async def hello(request: Request) -> PlainTextResponse:
        return PlainTextResponse(HELLO_TEXT)

    # No method list: the route answers every HTTP method.
    app.add_route("/{full_path:path}", hello, include_in_schema=False)
    return app
