# gitin/routers/user.py
"""
Vista de perfil: /user/{username}

Cualquier fallo al traer datos de GitHub (404, rate limit, red, JSON roto)
redirige a la home.
"""

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from gitin.models import ProfileView
from gitin.services.github import ProfileNotFound
from gitin.services.profile_view import build_profile_view

router = APIRouter()

@router.get("/user/{username}", response_model=ProfileView)
def view_profile(username: str):
    try:
        return build_profile_view(username)
    except ProfileNotFound:
        return RedirectResponse("/", status_code=302)
