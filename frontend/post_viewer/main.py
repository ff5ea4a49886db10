import logging
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from .core.config import settings
from .services import api_client
from .models import Post

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

app = FastAPI(title="Blog Demo - Post Viewer")
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")
templates = Jinja2Templates(
    directory=BASE_DIR / "templates",
    context_processors=[lambda request: {"site_title": settings.SITE_TITLE, "site_author": settings.SITE_AUTHOR}],
)

def to_post(post_data) -> Optional[Post]:
    """Builds a view model, or returns None when the store sent a malformed record."""
    try:
        return Post(**post_data)
    except (ValidationError, TypeError) as exc:
        logger.warning("Ignoring malformed post from store: %r", exc)
        return None

@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    posts_data = await api_client.get_posts()
    # Any malformed record leaves the screen unpopulated, like a failed request.
    posts = [to_post(post) for post in posts_data] if isinstance(posts_data, list) else [None]
    if None in posts:
        posts = []
    return templates.TemplateResponse(request, "index.html", {"posts": posts, "excerpt_length": settings.EXCERPT_LENGTH})

@app.get("/posts/{post_id}", response_class=HTMLResponse)
async def show(request: Request, post_id: int):
    post_data = await api_client.get_post(post_id)
    post = to_post(post_data) if post_data else None
    return templates.TemplateResponse(request, "show.html", {"post": post})

@app.get("/health")
async def health_check():
    return {"status": "ok"}

def run():
    uvicorn.run("post_viewer.main:app", host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
