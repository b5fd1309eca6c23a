# -*- coding: utf-8 -*-
"""
Utilities to build type graphs from the GraphQL schema definition language
(SDL).
"""

# flake8: noqa

from .ast_type_builder import ASTTypeBuilder
from .registry import TypeRegistry
from .schema_from_ast import build_ast_schema, build_schema, build_schema_config

__all__ = (
    "build_schema",
    "build_ast_schema",
    "build_schema_config",
    "ASTTypeBuilder",
    "TypeRegistry",
)
