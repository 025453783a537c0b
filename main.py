from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
from api.routes.analyze import router as analyze_router
from api.routes.auth import router as auth_router
from api.routes.trending import router as trending_router
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Media Lens API",
    version="1.0.0",
)


origins = [
    "http://localhost:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(
    analyze_router,
    prefix="/api",
    tags=["analyze"],
)

app.include_router(
    auth_router,
    prefix="/api",
    tags=["auth"],
)

app.include_router(
    trending_router,
    prefix="/api",
    tags=["trending"],
)


# Routes
@app.get("/")
async def root():
    return {"message": "Media Lens Backend API", "version": "1.0.0"}


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


def run():
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True, env_file='.env')
