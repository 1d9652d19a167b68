from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "Dynamic Forms Backend",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }
