from fastapi import FastAPI, Query
from fastapi.responses import HTMLResponse
from datetime import datetime
from .logs import setup_logging
from .pillars import pillar_styles
from .search import search
from .settings import settings
from .styles import page_styles
from .templates import render

app = FastAPI(title="CAPI Search")

@app.on_event("startup")
def startup_event():
    setup_logging(settings.LOG_LEVEL)

@app.get("/", response_class=HTMLResponse)
def home(q: str | None = Query(None)):
    q = (q or "").strip() or None
    outcome = search(q)
    # A failed search degrades the page, it never fails the request
    results = outcome.value if outcome.ok else ()
    return render("search.html", {
        "q": q,
        "results": results,
        "error": None if outcome.ok else outcome.error,
        "styles": page_styles(),
        "pillar_styles": pillar_styles(r.pillar_id for r in results),
    })

@app.get("/healthz")
def healthz():
    return {"status": "ok", "time": datetime.utcnow().isoformat()}
