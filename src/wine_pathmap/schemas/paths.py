"""Schemas for the path translation endpoints."""

from enum import StrEnum

from pydantic import BaseModel


class TranslationDirection(StrEnum):
    TO_HOST = "to_host"
    TO_GUEST = "to_guest"


class TranslationResult(BaseModel):
    source: str
    result: str
    direction: TranslationDirection


class DriveMappingOut(BaseModel):
    letter: str
    host_root: str


class DriveListResult(BaseModel):
    prefix: str
    unc_root: str
    drives: list[DriveMappingOut]


class TranslationErrorOut(BaseModel):
    code: str
    message: str
    path: str | None = None
