# quickfetch/api/settings.py
from fastapi import APIRouter

from ..core.logging import get_logger
from ..core.settings import SETTINGS

log = get_logger(__name__)

# read-only: overrides come from the overrides file, never from HTTP callers
router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("/defaults")
def get_defaults():
    return SETTINGS.defaults


@router.get("/overrides")
def get_overrides():
    return SETTINGS.overrides


@router.get("/effective")
def get_effective():
    return SETTINGS.effective()
