from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from staffdirectory.api.v1.router import v1_router
from staffdirectory.core.config import settings

app = FastAPI(title="Staff Directory")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router)
