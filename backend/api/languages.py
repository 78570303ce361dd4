"""Languages API Routes

Language information and grammar tables for the frontend.
"""
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from core.logging import api_logger
from languages import get_module, list_languages

log = api_logger()

router = APIRouter()


# === Response Models ===

class GenderResponse(BaseModel):
    id: str
    label: str
    short: str


class NumberResponse(BaseModel):
    id: str
    label: str


class ParadigmCellResponse(BaseModel):
    pronoun: str
    form: str


class VerbResponse(BaseModel):
    id: str
    label: str
    paradigm: list[ParadigmCellResponse]


class GrammarConfigResponse(BaseModel):
    genders: list[GenderResponse]
    numbers: list[NumberResponse]
    verbs: list[VerbResponse]
    hasConjugation: bool
    hasElision: bool


class LanguageInfoResponse(BaseModel):
    code: str
    name: str
    nativeName: str


# === Endpoints ===

@router.get("/", response_model=list[LanguageInfoResponse])
async def get_available_languages():
    """Get list of available languages."""
    return list_languages()


@router.get("/{lang_code}/grammar", response_model=GrammarConfigResponse)
async def get_grammar_config(lang_code: str):
    """Genders, numbers and verb paradigms for a language."""
    try:
        module = get_module(lang_code)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    log.debug("grammar_config_fetched", language=lang_code)
    return module.get_grammar_config().to_dict()
