"""
Templates and static assets live inside the installable views package
"""

import importlib.util
from pathlib import Path

import pytest

from utils.templates import STATIC_DIR, TEMPLATES_DIR, templates


def test_views_ship_inside_the_views_package():
    spec = importlib.util.find_spec("views")
    package_dirs = [Path(location).resolve() for location in spec.submodule_search_locations]

    assert TEMPLATES_DIR.parent in package_dirs
    assert STATIC_DIR.parent in package_dirs
    assert (STATIC_DIR / "style.css").is_file()


@pytest.mark.parametrize("name", [
    "list.html",
    "create.html",
    "edit.html",
    "delete.html",
    "error.html",
    "db_unavailable.html",
])
def test_page_templates_load(name):
    assert templates.get_template(name) is not None
