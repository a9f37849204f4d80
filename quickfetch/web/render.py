# quickfetch/web/render.py
from __future__ import annotations

import html

from ..posts.models import PostRecord
from ..posts.page import PageView

SITE_TITLE = "QuickFetch - Python Demo"

_STYLE = """
body { font-family: system-ui, sans-serif; background: #f9fafb; margin: 0; color: #111827; }
header { background: #fff; border-bottom: 1px solid #e5e7eb; padding: 24px 16px; }
main { max-width: 1120px; margin: 0 auto; padding: 32px 16px; }
.grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(300px, 1fr)); gap: 24px; }
.card { background: #fff; border-radius: 8px; box-shadow: 0 1px 3px rgba(0,0,0,.1); padding: 24px; }
.badge { background: #dbeafe; color: #1e40af; font-size: 12px; padding: 2px 10px; border-radius: 4px; }
.muted { color: #6b7280; }
.empty { text-align: center; padding: 48px 0; color: #6b7280; }
"""


def esc(s: object) -> str:
    return html.escape(str(s), quote=True)


def render_post_card(post: PostRecord) -> str:
    return (
        '<div class="card">'
        f'<div><span class="badge">Post #{esc(post.id)}</span> '
        f'<span class="muted">User {esc(post.author_id)}</span></div>'
        f"<h3>{esc(post.title)}</h3>"
        f"<p>{esc(post.body)}</p>"
        "</div>"
    )


def render_search(view: PageView) -> str:
    state = view.state
    parts: list[str] = [
        '<form method="get" action="/">',
        f'<input type="text" name="q" value="{esc(state.query)}" '
        'placeholder="Search posts by title or content..." />',
        "</form>",
    ]
    if state.show_result_count:
        parts.append(f'<p class="muted">Found {state.result_count} post(s) matching "{esc(state.query)}"</p>')
    parts.append('<div class="grid">' + "".join(render_post_card(p) for p in state.results) + "</div>")
    if state.no_matches:
        parts.append('<div class="empty"><p>No posts found matching your search.</p></div>')
    return "\n".join(parts)


def render_page(view: PageView) -> str:
    parts: list[str] = [
        f"<h2>Latest Posts ({view.total_count})</h2>",
        render_search(view),
    ]
    if view.show_empty_fallback:
        parts.append('<div class="empty"><p>No posts available.</p></div>')
    return wrap_document("\n".join(parts))


def wrap_document(content_html: str, *, title: str = SITE_TITLE) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en"><head><meta charset="utf-8" />'
        f"<title>{esc(title)}</title><style>{_STYLE}</style></head>"
        "<body>"
        "<header><h1>QuickFetch</h1><p class=\"muted\">FastAPI + httpx Mini App Demo</p></header>"
        f"<main>{content_html}</main>"
        "</body></html>"
    )
