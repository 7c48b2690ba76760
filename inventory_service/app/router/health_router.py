from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
def root():
    return "OK"


@router.get("/health", response_class=PlainTextResponse)
def health():
    return "OK"
