"""Router – greeting."""

from fastapi import APIRouter, Request

from src.hello_service.schemas.greeting import GreetingResponse

router = APIRouter(tags=["Greeting"])


@router.get("/", response_model=GreetingResponse)
def greeting(request: Request) -> GreetingResponse:
    """Return the greeting with the service version and the time of the request."""
    return GreetingResponse(version=request.app.version)
