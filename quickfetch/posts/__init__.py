from .filtering import filter_posts
from .models import MalformedPayloadError, PostRecord
from .page import PageComposer, PageView
from .provider import POST_LIMIT, PostProvider
from .session import RenderState, SearchSession

__all__ = [
    "filter_posts",
    "MalformedPayloadError",
    "PostRecord",
    "PageComposer",
    "PageView",
    "POST_LIMIT",
    "PostProvider",
    "RenderState",
    "SearchSession",
]
