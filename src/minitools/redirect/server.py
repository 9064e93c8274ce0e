from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Optional

import uvicorn
from starlette.types import ASGIApp

from minitools.config.schema import DEFAULT_PATHS, RedirectConfig
from minitools.redirect.handlers import chain, hello_app, json_handler, yaml_handler

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_PATHS", "build_app", "handler_for", "infer_file_type", "serve"]

FileHandler = Callable[[bytes, ASGIApp], ASGIApp]

_FILE_HANDLERS: Dict[str, FileHandler] = {
    "yaml": yaml_handler,
    "yml": yaml_handler,
    "json": json_handler,
}


def infer_file_type(path: str | Path) -> str:
    """Return the text after the last '.' of `path`, lowercased, or '' when there is none."""
    name = str(path)
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1].lower()


def handler_for(file_type: str) -> Optional[FileHandler]:
    return _FILE_HANDLERS.get(file_type.lower())


def _read_data(path: Path) -> Optional[bytes]:
    try:
        return path.read_bytes()
    except OSError as exc:
        logger.warning("Could not read redirect data %s: %s", path, exc)
        return None


def build_app(config: RedirectConfig) -> ASGIApp:
    """
    Assemble the redirect chain: file mapping -> default mapping -> hello fallback.

    The file layer is skipped, with a warning, when no data path is configured, the
    file cannot be read, or its suffix is neither YAML nor JSON. Malformed file
    contents raise `ParseError` to the caller.
    """
    app = chain([config.default_paths], hello_app())
    if config.data_path is None:
        return app

    data = _read_data(config.data_path)
    if data is None:
        return app

    file_type = infer_file_type(config.data_path)
    make_handler = handler_for(file_type)
    if make_handler is None:
        logger.warning(
            "Unsupported redirect data type %r for %s; using default paths only",
            file_type,
            config.data_path,
        )
        return app

    logger.info("Loading %s redirect data from %s", file_type, config.data_path)
    return make_handler(data, app)


def serve(config: RedirectConfig, log_level: str = "info") -> None:
    """Build the redirect app and run it under uvicorn until interrupted."""
    app = build_app(config)
    logger.info("Starting server on %s:%d", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=log_level.lower())
