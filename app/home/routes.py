from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Home"])

# Served as text, so the spacing around the colon is preserved
HOME_MESSAGE = '{"message" : "Hello, World"}'

@router.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
async def home():
    return HOME_MESSAGE
