import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from post_store.api.routes import posts, users
from post_store.core.config import settings
from post_store.db.session import Base, engine
from post_store.models import post, user # Import both models so their tables are created
from post_store.validation import RecordValidationError

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create database tables on startup
Base.metadata.create_all(bind=engine)

app = FastAPI(title="Blog Demo - Post Store API", version="1.0")

app.include_router(posts.index_router, tags=["posts"])
app.include_router(posts.router, prefix="/posts", tags=["posts"])
app.include_router(users.router, prefix="/users", tags=["users"])

@app.exception_handler(RecordValidationError)
async def record_validation_error_handler(request: Request, exc: RecordValidationError):
    logger.info("Rejected write to %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": [{"loc": [exc.field], "msg": exc.message}]},
    )

@app.get("/health")
def health_check():
    return {"status": "ok"}

def run():
    uvicorn.run("post_store.main:app", host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
