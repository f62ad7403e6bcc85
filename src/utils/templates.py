"""
Template rendering and static asset locations
"""

from pathlib import Path
from fastapi.templating import Jinja2Templates

from models.enums import Gender

VIEWS_DIR = Path(__file__).resolve().parent.parent / "views"
TEMPLATES_DIR = VIEWS_DIR / "templates"
STATIC_DIR = VIEWS_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["genders"] = Gender.values()
