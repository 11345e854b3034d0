"""FastAPI backend for Post Finder.

Endpoints:
  GET  {API_PREFIX}/search -> {posts:[{id, title, url}], total, pages}
  GET  {API_PREFIX}/render -> "Read More" HTML fragment for ?postId=
  GET  /health             -> {'status':'ok'}
  GET  /                   -> basic info JSON
"""

from typing import Dict, Any, List, Optional
from fastapi import Depends, FastAPI, Query
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .container import Container, container
from .config import API_HOST, API_PORT, API_PREFIX, CORS_ORIGINS, DEFAULT_PER_PAGE, SCAN_STRATEGY
from .domain.entities import Reference
from .exceptions import PostFinderError, InvalidArgument, StoreUnavailable
from .error_handler import log_error
from .logging_config import get_logger

logger = get_logger(__name__)

app = FastAPI(title="Post Finder")


class PostItem(BaseModel):
    id: int
    title: str
    url: str


class SearchResponse(BaseModel):
    posts: List[PostItem]
    total: int
    pages: int


def get_container() -> Container:
    return container


@app.exception_handler(PostFinderError)
async def post_finder_exception_handler(request, exc: PostFinderError):
    log_error(exc, f"API error in {request.url.path}")

    status_code = 500
    if isinstance(exc, InvalidArgument):
        status_code = 400
    elif isinstance(exc, StoreUnavailable):
        status_code = 503

    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.error_code,
            "message": exc.message,
            "details": exc.details
        }
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get(f"{API_PREFIX}/search", response_model=SearchResponse)
def search_posts(search: Optional[str] = Query(None, description="Post id or free text; empty lists recent posts"),
                 page: int = Query(1, description="1-based page number"),
                 per_page: int = Query(DEFAULT_PER_PAGE, description="Posts per page"),
                 di: Container = Depends(get_container)) -> Dict[str, Any]:
    """Search published posts by id or text. Searching is idempotent, hence GET."""
    logger.info(f"Search request: search={search!r} page={page} per_page={per_page}")
    return di.search_posts_use_case().execute(search=search, page=page, per_page=per_page)


@app.get(f"{API_PREFIX}/render", response_class=HTMLResponse)
def render_reference(postId: int = Query(0, description="Referenced post id; 0 means none"),
                     di: Container = Depends(get_container)) -> HTMLResponse:
    """Server-side render of a stored reference. Unresolvable references render empty."""
    return HTMLResponse(content=di.reference_resolver().render(Reference(document_id=postId)))


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/")
def root() -> Dict[str, Any]:
    return {
        "name": "Post Finder API",
        "endpoints": [f"GET {API_PREFIX}/search", f"GET {API_PREFIX}/render", "GET /health"],
        "scan_strategy": SCAN_STRATEGY,
        "notes": "Use `post-finder scan` for the bulk marker scan."
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("post_finder.api:app", host=API_HOST, port=API_PORT, reload=True)
