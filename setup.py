#!/usr/bin/env python
# -*- coding: utf-8 -*-
# mypy: ignore-errors

import os

import setuptools


DIR = os.path.abspath(os.path.dirname(__file__))

AUTHOR = ("Charles Lirsac", "c.lirsac@gmail.com")
GITHUB_URL = "https://github.com/lirsacc/sdl-graph"
SHORT_DESCRIPTION = (
    "Build linked GraphQL type graphs from schema definition documents."
)


def run_setup():

    with open(os.path.join(DIR, "README.md")) as f:
        readme = "\n" + f.read()

    setuptools.setup(
        name="sdl_graph",
        version=_get_version(),
        description=SHORT_DESCRIPTION,
        long_description=readme,
        long_description_content_type="text/markdown",
        author=AUTHOR[0],
        author_email=AUTHOR[1],
        url=GITHUB_URL,
        license="MIT",
        keywords="graphql sdl schema",
        zip_safe=False,
        packages=setuptools.find_packages(where="src"),
        package_dir={"": "src"},
        install_requires=_split_requirements("requirements.txt"),
        extras_require={
            "test": _split_requirements("requirements-tests.txt"),
            "dev": _split_requirements(
                "requirements-dev.txt",
                "requirements-tests.txt",
                "requirements-lint.txt",
                "requirements-mypy.txt",
            ),
        },
        include_package_data=True,
        python_requires=">=3.7",
        classifiers=[
            "License :: OSI Approved :: MIT License",
            "Natural Language :: English",
            "Programming Language :: Python",
            "Programming Language :: Python :: Implementation :: CPython",
            "Programming Language :: Python :: Implementation :: PyPy",
            "Programming Language :: Python :: 3 :: Only",
            "Programming Language :: Python :: 3",
            "Operating System :: POSIX",
            "Operating System :: MacOS :: MacOS X",
            "Development Status :: 3 - Alpha",
            "Intended Audience :: Developers",
            "Topic :: Software Development :: Libraries",
            "Topic :: Software Development :: Libraries :: Python Modules",
        ],
        project_urls={
            "Bug Reports": "%s/issues" % GITHUB_URL,
            "Source": GITHUB_URL,
        },
    )


def _split_requirements(*requirements_files):
    req = []
    for requirements_file in requirements_files:
        with open(os.path.join(DIR, requirements_file)) as f:
            lines = (line.strip() for line in f.readlines())
            req.extend(
                [
                    line
                    for line in lines
                    if line
                    and not (line.startswith("#") or line.startswith("-"))
                ]
            )
    return req


def _get_version() -> str:
    with open(os.path.join(DIR, "src", "sdl_graph", "version.py")) as f:
        for line in f.readlines():
            if line.startswith("__version__"):
                delim = '"' if '"' in line else "'"
                return line.split(delim)[1]
        else:
            raise RuntimeError("Unable to find version string.")


if __name__ == "__main__":
    run_setup()
