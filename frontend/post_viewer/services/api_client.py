import logging
import httpx
from typing import Dict, Any, Optional, List

from ..core.config import settings

logger = logging.getLogger(__name__)

# A store that answers 2xx with a body that is not JSON, or lacks "data",
# is treated like any other failed request.
STORE_ERRORS = (httpx.HTTPError, ValueError, KeyError)

def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=settings.POST_STORE_URL, timeout=settings.REQUEST_TIMEOUT)

async def get_posts() -> List[Dict[str, Any]]:
    async with _client() as client:
        try:
            response = await client.get("/")
            response.raise_for_status()
            return response.json()["data"]
        except STORE_ERRORS as exc:
            logger.warning("Could not load posts from %s: %r", settings.POST_STORE_URL, exc)
            return []

async def get_post(post_id: int) -> Optional[Dict[str, Any]]:
    async with _client() as client:
        try:
            response = await client.get(f"/posts/{post_id}")
            response.raise_for_status()
            return response.json()["data"]
        except STORE_ERRORS as exc:
            logger.warning("Could not load post %s from %s: %r", post_id, settings.POST_STORE_URL, exc)
            return None
