from .handlers import chain, hello_app, json_handler, map_handler, yaml_handler
from .parsers import PathURL, build_map, parse_json, parse_yaml
from .server import DEFAULT_PATHS, build_app, infer_file_type, serve

__all__ = [
    "DEFAULT_PATHS",
    "PathURL",
    "build_app",
    "build_map",
    "chain",
    "hello_app",
    "infer_file_type",
    "json_handler",
    "map_handler",
    "parse_json",
    "parse_yaml",
    "serve",
    "yaml_handler",
]
