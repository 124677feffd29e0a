import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from pairchat.api.dependencies import get_translation_service
from pairchat.schemas.translation import TranslateError, TranslateRequest, TranslateResponse
from pairchat.services.translation_service import TranslationError, TranslationService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/translate",
    response_model=TranslateResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": TranslateError}},
)
async def translate_text(
    payload: TranslateRequest,
    service: TranslationService = Depends(get_translation_service),
) -> TranslateResponse | JSONResponse:
    try:
        translated = await service.translate(payload.text, payload.target_lang)
    except TranslationError as exc:
        logger.error("Translation error: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=TranslateError(error="Translation failed").model_dump(),
        )
    return TranslateResponse(translated_text=translated)
