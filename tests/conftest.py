# -*- coding: utf-8 -*-
""" Global fixtures """

import os

import pytest

from sdl_graph import build_schema


@pytest.fixture
def fixture_file():
    """ Helper to load fixture files by name. """

    def load(name):
        filepath = os.path.join(os.path.dirname(__file__), "fixtures", name)
        with open(filepath, "rb") as f:
            return f.read().decode("utf-8")

    return load


@pytest.fixture
def starwars_sdl(fixture_file):
    return fixture_file("starwars.graphql")


@pytest.fixture
def starwars_schema(starwars_sdl):
    return build_schema(starwars_sdl)
