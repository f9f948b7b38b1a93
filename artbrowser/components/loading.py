from .templating import render_partial


def render_loading(busy: bool) -> str:
    return render_partial("loading.html", busy=busy)
