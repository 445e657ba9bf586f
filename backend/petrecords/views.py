"""Module: views."""

from datetime import date, datetime
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def format_date(value: Any, fmt: str = "%Y-%m-%d") -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    if isinstance(value, (date, datetime)):
        return value.strftime(fmt)
    return str(value)


def eq(left: Any, right: Any) -> bool:
    # Ids from the database are ints, ids echoed back from forms are strings.
    if left is None or right is None:
        return left is right
    return str(left) == str(right)


templates.env.filters["date"] = format_date
templates.env.globals["eq"] = eq
templates.env.globals["now"] = datetime.now


def render(request: Request, view_name: str, context: dict | None = None):
    """Render ``templates/<view_name>.html`` with ``context``."""
    return templates.TemplateResponse(request, f"{view_name}.html", context or {})
