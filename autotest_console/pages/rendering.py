"""
Jinja2 environment shared by all pages
"""
from fastapi.templating import Jinja2Templates

from ..config import settings
from ..utils import badge_class, duration_between, format_timestamp, truncate_text
from .local_files import to_viewable_url


templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))
templates.env.filters["timestamp"] = format_timestamp
templates.env.filters["badge"] = badge_class
templates.env.filters["viewable_url"] = to_viewable_url
templates.env.filters["truncate_text"] = truncate_text
templates.env.globals["duration_between"] = duration_between
templates.env.globals["app_name"] = settings.APP_NAME
