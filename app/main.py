from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from app.core.config import get_settings
from app.core.errors import ProviderError, ValidationError
from app.core.providers import DEFAULT_PROVIDER, ProviderIdentity
from app.schemas.request import ChatRequest, ImageRequest
from app.schemas.response import HealthResponse
from app.services import generation_service
from app.utils.logger import configure_logging, logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings().log_level)
    yield


app = FastAPI(title="GenAI Gateway", lifespan=lifespan)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(ProviderError)
async def provider_error_handler(request: Request, exc: ProviderError) -> JSONResponse:
    logger.error("request_failed", extra={"path": request.url.path, "provider": exc.provider})
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.get("/")
async def root():
    return {
        "message": "GenAI Gateway",
        "docs": "/docs",
        "health": "/health",
        "chat": "POST /chat",
        "image": "POST /generate-image",
    }


@app.get("/health", response_model=HealthResponse)
async def get_health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        providers=[p.value for p in ProviderIdentity],
        default_provider=DEFAULT_PROVIDER.value,
    )


@app.post("/chat", response_class=PlainTextResponse)
async def post_chat(body: ChatRequest) -> str:
    return await generation_service.chat(
        prompt=body.prompt,
        api_key=body.api_key,
        provider=body.provider,
        model=body.model,
    )


@app.post("/generate-image")
async def post_generate_image(body: ImageRequest) -> list[str]:
    return await generation_service.generate_image(prompt=body.prompt, api_key=body.api_key)
