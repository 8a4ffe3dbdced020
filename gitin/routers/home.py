from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def home():
    return {
        "app": "GitIn",
        "tagline": "Turn your code history into a real professional profile.",
        "profile_url": "/user/{username}",
    }
