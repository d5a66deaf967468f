#!/usr/bin/env python3
"""
Setup script for yshell for environments that install without Poetry.

Package metadata and dependencies are read from pyproject.toml.
"""

import sys

from setuptools import find_namespace_packages, setup

# Read the pyproject.toml to get the package metadata
try:
    import tomllib

    with open("pyproject.toml", "rb") as f:
        pyproject_data = tomllib.load(f)

    poetry = pyproject_data["tool"]["poetry"]

    # Get dependencies; optional ones (pytest) go to their extras
    install_requires = []
    optional = {}
    for dep, version_spec in poetry["dependencies"].items():
        if dep == "python":
            continue
        if isinstance(version_spec, str):
            install_requires.append(f"{dep}{version_spec}")
        elif version_spec.get("optional"):
            optional[dep] = f"{dep}{version_spec.get('version', '')}"
        else:
            install_requires.append(f"{dep}{version_spec.get('version', '')}")

    extras_require = {
        extra: [optional[dep] for dep in deps if dep in optional]
        for extra, deps in poetry.get("extras", {}).items()
    }

    entry_points = {
        "console_scripts": [f"{name} = {target}" for name, target in poetry.get("scripts", {}).items()]
    }

    setup(
        name=poetry["name"],
        version=poetry["version"],
        description=poetry["description"],
        author=poetry["authors"][0],
        license=poetry["license"],
        packages=find_namespace_packages(where="src", include=["yshell*"]),
        package_dir={"": "src"},
        install_requires=install_requires,
        extras_require=extras_require,
        entry_points=entry_points,
        python_requires=">=3.11,<4.0",
        zip_safe=False,
    )

except Exception as e:
    print(f"Error reading pyproject.toml: {e}")
    sys.exit(1)
