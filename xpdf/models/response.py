# xpdf/models/response.py
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from xpdf.models.blocks import RenderedBlock


class ExplanationResponse(BaseModel):
    explanation: str = Field(..., description="Summary and bullet-point notes")


class DetailedExplanationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    detailed_explanation: str = Field(..., alias="detailedExplanation", description="Step-by-step explanation")


class TranslateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., min_length=1, description="Text to translate")
    target_language: str = Field(..., alias="targetLanguage", min_length=1, description="Language code, e.g. 'ta'")


class TranslateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(..., alias="translatedText")


class RenderRequest(BaseModel):
    text: str = Field("", description="Markdown-flavoured text to render")


class RenderResponse(BaseModel):
    blocks: List[RenderedBlock] = Field(..., description="Ordered rendered blocks")
    html: str = Field(..., description="The same blocks as an HTML fragment")


class Language(BaseModel):
    code: str
    name: str


class LanguagesResponse(BaseModel):
    languages: List[Language]
