from .templating import render_partial
from ..core.config import APP_TITLE


def render_title(title: str = APP_TITLE) -> str:
    return render_partial("title.html", title=title)
