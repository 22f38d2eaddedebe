"""GET /: list of posts."""

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from frontend.app.models.api_response import ApiFailure
from frontend.app.services.blog_api import BlogApiClient, get_api_client
from frontend.app.views import render_home_page

router = APIRouter()


@router.get("/")
def home(request: Request, api: BlogApiClient = Depends(get_api_client)) -> Response:
    """Render the post list; an upstream failure renders an empty list with a notice."""
    result = api.list_posts()
    if isinstance(result, ApiFailure):
        return render_home_page(request, [], unavailable=True)
    return render_home_page(request, result.data)
