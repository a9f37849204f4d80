# quickfetch/core/request_ctx.py
from contextvars import ContextVar

x_id_ctx: ContextVar[str] = ContextVar("x_id_ctx", default="")

def get_x_id() -> str: return x_id_ctx.get()
def set_x_id(val: str): x_id_ctx.set((val or "").strip())
