# -*- coding: utf-8 -*-
"""
Value coercion helpers used when building a type graph from a schema
definition document.
"""

# flake8: noqa

from .coerce_value import coerce_argument_values, directive_arguments
from .untyped_value_from_ast import untyped_value_from_ast
from .value_from_ast import value_from_ast
