"""Welcome endpoint"""
from fastapi import APIRouter

router = APIRouter(tags=["root"])

WELCOME_MESSAGE = "Welcome to the Base64 Encoder/Decoder API"


@router.get("/")
async def root():
    """Unauthenticated welcome message"""
    return {"message": WELCOME_MESSAGE}
