from fastapi import APIRouter, HTTPException, Query

from gitin.models import ProfileView
from gitin.services.github import ProfileNotFound
from gitin.services.profile_view import build_profile_view

router = APIRouter()

@router.get("/analyze", response_model=ProfileView)
def analyze(username: str = Query(..., description="GitHub username, e.g. 'torvalds'")):
    try:
        return build_profile_view(username)
    except ProfileNotFound:
        raise HTTPException(404, "No encontrado en GitHub")
