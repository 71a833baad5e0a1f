from datetime import datetime, timezone
from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape
from bs4 import BeautifulSoup
import pathlib

from .pillars import pillar_class

def time_ago(then: datetime, now: datetime | None = None) -> str:
    """Short relative label for a card: "42s ago", "5m ago", "3h ago", "2d ago".

    Anything older than a week falls back to the date, e.g. "9 Mar 2024".
    """
    now = now or datetime.now(timezone.utc)
    if then.tzinfo is None:
        then = then.replace(tzinfo=timezone.utc)
    secs = max(0, int((now - then).total_seconds()))
    if secs < 60:
        return f"{secs}s ago"
    if secs < 60 * 60:
        return f"{secs // 60}m ago"
    if secs < 24 * 60 * 60:
        return f"{secs // 3600}h ago"
    days = secs // 86400
    if days <= 7:
        return f"{days}d ago"
    return f"{then.day} {then:%b %Y}"

def plain_text(html: str | None) -> str:
    # trailText arrives as an HTML fragment
    if not html:
        return ""
    text = BeautifulSoup(html, "lxml").get_text()
    return " ".join(text.split())

env = Environment(
    loader=FileSystemLoader(str(pathlib.Path(__file__).parent / "templates")),
    autoescape=select_autoescape()
)
env.filters["time_ago"] = time_ago
env.filters["plain_text"] = plain_text
env.filters["pillar_class"] = pillar_class

def render(name: str, ctx: dict) -> HTMLResponse:
    tmpl = env.get_template(name)
    return HTMLResponse(tmpl.render(**ctx))
