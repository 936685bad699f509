from fastapi import APIRouter

home_router = APIRouter()


@home_router.get("/health")
async def health_check():
    return {"status": "ok"}
