"""Trailing-slash collection paths answer 301 to their canonical URL."""

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

COLLECTION_PATHS = ("/cars/", "/favorites/", "/reviews/")

router = APIRouter(include_in_schema=False)


def redirect_to_collection(request: Request) -> RedirectResponse:
    url = request.url.path.rstrip("/")
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return RedirectResponse(url=url, status_code=status.HTTP_301_MOVED_PERMANENTLY)


for path in COLLECTION_PATHS:
    router.add_api_route(
        path, redirect_to_collection, methods=["GET", "POST", "PUT", "DELETE"]
    )
