from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv())  # carga .env antes de tocar settings

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from gitin.core.config import settings
from gitin.routers import health, home, user, analyze

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="GitIn API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(home.router, tags=["home"])
app.include_router(health.router)
app.include_router(user.router, prefix="", tags=["user"])
app.include_router(analyze.router, prefix="", tags=["analyze"])

# uvicorn main:app --reload --port 8080
