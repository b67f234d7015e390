"""Shared FastAPI dependencies used across routers."""

from fastapi import HTTPException

from wine_pathmap.mapping import Translator, TranslationError, TranslationErrorCode
from wine_pathmap.schemas.paths import TranslationErrorOut

_STATUS_BY_CODE = {
    TranslationErrorCode.PARSE_ERROR: 400,
    TranslationErrorCode.RELATIVE_PATH_UNSUPPORTED: 400,
    TranslationErrorCode.UNMAPPED_DRIVE: 404,
    TranslationErrorCode.NO_DRIVE_COVERS_PATH: 404,
    TranslationErrorCode.PATH_NOT_FOUND: 404,
    TranslationErrorCode.MAPPING_DIRECTORY_UNREADABLE: 503,
    TranslationErrorCode.PREFIX_NOT_FOUND: 503,
}


def http_error(exc: TranslationError) -> HTTPException:
    """Convert a translation failure into an HTTP error with a structured detail."""
    detail = TranslationErrorOut(code=exc.code.value, message=str(exc), path=exc.path)
    return HTTPException(_STATUS_BY_CODE.get(exc.code, 400), detail.model_dump())


def get_translator() -> Translator:
    """Build a translator with a fresh drive discovery for every request."""
    try:
        return Translator.from_env()
    except TranslationError as exc:
        raise http_error(exc) from exc
