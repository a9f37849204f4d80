# quickfetch/core/schemas.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class PostModel(BaseModel):
    id: int
    title: str
    body: str
    authorId: int


class RenderStateResp(BaseModel):
    totalCount: int
    query: str
    results: list[PostModel]
    resultCount: int


class EchoInfoResp(BaseModel):
    message: str
    timestamp: str


class EchoResp(EchoInfoResp):
    data: Any = None


class ErrorResp(BaseModel):
    error: str
