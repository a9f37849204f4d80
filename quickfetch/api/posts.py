# quickfetch/api/posts.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from ..core.logging import get_logger
from ..core.schemas import RenderStateResp
from ..deps.provider_deps import get_post_provider
from ..posts.page import PageComposer
from ..posts.provider import PostProvider
from ..web.render import render_page

log = get_logger(__name__)
router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home(q: str = Query(default=""), provider: PostProvider = Depends(get_post_provider)):
    view = await PageComposer(provider).compose(query=q)
    return HTMLResponse(render_page(view))


@router.get("/api/posts", response_model=RenderStateResp)
async def api_posts(q: str = Query(default=""), provider: PostProvider = Depends(get_post_provider)):
    view = await PageComposer(provider).compose(query=q)
    return view.state.to_dict()
