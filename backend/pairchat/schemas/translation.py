from pydantic import BaseModel, Field

from pairchat.schemas.common import APIModel


class TranslateRequest(APIModel):
    text: str
    target_lang: str = Field(alias="targetLang", min_length=2, max_length=16)


class TranslateResponse(APIModel):
    translated_text: str = Field(alias="translatedText")


class TranslateError(BaseModel):
    error: str
