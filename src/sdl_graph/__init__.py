# -*- coding: utf-8 -*-
"""
sdl_graph

sdl_graph builds linked GraphQL type graphs from schema definition language
(SDL) documents parsed with graphql-core.

The main :mod:`sdl_graph` package exposes the entry points to build a type
graph while the :mod:`sdl_graph.schema` module exposes the type model.
"""

from .version import __version__  # isort:skip

from . import schema, utilities  # noqa: F401
from .schema import Schema, SchemaConfig
from .sdl import build_ast_schema, build_schema, build_schema_config


__all__ = (
    "__version__",
    "build_schema",
    "build_ast_schema",
    "build_schema_config",
    "Schema",
    "SchemaConfig",
)
