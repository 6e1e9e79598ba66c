import time
import traceback

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from videoforge.config import GENERATION_FAILED, PROMPT_REQUIRED
from videoforge.models.schemas import ErrorResponse, GenerateVideoRequest, GenerateVideoResponse
from videoforge.services.state import record_generation
from videoforge.utils.logging import log, log_fail, log_request, log_success

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post("/generate-video", tags=["video"])
async def generate_video(request: Request):
    """Run one prompt through the configured provider and return the playback URL."""
    provider = request.app.state.provider
    t0 = time.time()
    prompt = ""
    try:
        body = await request.json()
        if body is None:
            raise ValueError("Request body is null")
        try:
            payload = GenerateVideoRequest.model_validate(body)
        except ValidationError:
            payload = GenerateVideoRequest()

        if not payload.prompt:
            log.warning("[API] Rejected request without prompt")
            return _error(400, PROMPT_REQUIRED)

        prompt = payload.prompt
        log_request(prompt, provider.name)
        video = await provider.generate(prompt)

        elapsed = int((time.time() - t0) * 1000)
        record_generation(prompt, provider.name, elapsed, True)
        log_success(prompt, f"{elapsed}ms via {provider.name}")

        resp = GenerateVideoResponse(
            videoUrl=video.video_url,
            prompt=video.prompt,
            resolution=video.resolution,
            model=video.model,
        )
        return JSONResponse(
            resp.model_dump(),
            headers={"X-Elapsed-Ms": str(elapsed), "X-Provider": provider.name},
        )
    except Exception as e:
        elapsed = int((time.time() - t0) * 1000)
        record_generation(prompt, provider.name, elapsed, False)
        log_fail("generate-video", str(e))
        log.debug(f"[API] Full traceback:\n{traceback.format_exc()}")
        return _error(500, GENERATION_FAILED)
