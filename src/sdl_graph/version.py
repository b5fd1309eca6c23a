# -*- coding: utf-8 -*-
"""
Package information.
"""

__title__ = "sdl_graph"
__description__ = "Build linked GraphQL type graphs from SDL documents."
__url__ = "https://github.com/lirsacc/sdl-graph"
__version__ = "0.1.0"
__author__ = "Charles Lirsac"
__author_email__ = "c.lirsac@gmail.com"
__license__ = "MIT"
__copyright__ = "Copyright 2019 Charles Lirsac"
