"""Endpoints translating paths between guest and host form."""

import logging

from fastapi import APIRouter, Depends, Query

from wine_pathmap.mapping import TranslationError, Translator
from wine_pathmap.routers.deps import get_translator, http_error
from wine_pathmap.schemas.paths import (
    DriveListResult,
    DriveMappingOut,
    TranslationDirection,
    TranslationResult,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/paths", tags=["paths"])


@router.get("/drives", response_model=DriveListResult)
def list_drives(translator: Translator = Depends(get_translator)) -> DriveListResult:
    """Return the drive mappings discovered in the prefix."""
    return DriveListResult(
        prefix=str(translator.prefix),
        unc_root=translator.unc_root,
        drives=[
            DriveMappingOut(letter=m.letter, host_root=m.host_root)
            for m in translator.drives.mappings()
        ],
    )


@router.get("/host", response_model=TranslationResult)
def to_host(
    path: str = Query(..., min_length=1),
    strict: bool = False,
    translator: Translator = Depends(get_translator),
) -> TranslationResult:
    """Translate a guest path (``C:\\x``) to a host path."""
    try:
        result = translator.guest_to_host(path, strict=strict)
    except TranslationError as exc:
        logger.info("Guest path translation failed: %s", exc)
        raise http_error(exc) from exc
    return TranslationResult(source=path, result=result, direction=TranslationDirection.TO_HOST)


@router.get("/guest", response_model=TranslationResult)
def to_guest(
    path: str = Query(..., min_length=1),
    translator: Translator = Depends(get_translator),
) -> TranslationResult:
    """Translate an absolute host path to a guest path."""
    try:
        result = translator.host_to_guest(path)
    except TranslationError as exc:
        logger.info("Host path translation failed: %s", exc)
        raise http_error(exc) from exc
    return TranslationResult(source=path, result=result, direction=TranslationDirection.TO_GUEST)
