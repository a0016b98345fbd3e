# app/models/fortune_models.py
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class ErrorCode(str, Enum):
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    BAD_REQUEST = "BAD_REQUEST"
    VALIDATION_ERROR = "VALIDATION_ERROR"


HTTP_STATUS_BY_CODE = {
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.BAD_REQUEST: 400,
    ErrorCode.VALIDATION_ERROR: 422,
}


class FortuneActionError(Exception):
    def __init__(self, code: ErrorCode, message: str):
        self.code = code
        self.message = message
        super().__init__(f"{code.value}: {message}")

    @property
    def status_code(self) -> int:
        return HTTP_STATUS_BY_CODE[self.code]


class ValidationError(BaseModel):
    loc: List[str]
    msg: str
    type: str


class ErrorDetail(BaseModel):
    code: ErrorCode
    message: str
    detail: Optional[List[ValidationError]] = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: ErrorDetail


class FortuneRequest(BaseModel):
    """Accepts both snake_case and camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FortuneTemplateListRequest(FortuneRequest):
    category: Optional[str] = None
    tone: Optional[str] = None
    include_inactive: bool = False
    include_system: bool = True
    include_mine: bool = True


class FortuneTemplateCreate(FortuneRequest):
    title: Optional[str] = None
    body: str = Field(..., min_length=1)
    category: Optional[str] = None
    tone: Optional[str] = None


TEMPLATE_UPDATE_FIELDS = {"title", "body", "category", "tone", "is_active"}


class FortuneTemplateUpdate(FortuneRequest):
    title: Optional[str] = None
    body: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    tone: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("body", "is_active")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.model_fields_set & TEMPLATE_UPDATE_FIELDS:
            raise ValueError("At least one field must be provided.")
        return self

    def changes(self) -> dict:
        """Only the fields the caller actually sent."""
        return self.model_dump(include=TEMPLATE_UPDATE_FIELDS, exclude_unset=True)


class FortuneSessionCreate(FortuneRequest):
    question: Optional[str] = None
    spread_type: Optional[str] = None
    notes: Optional[str] = None


class FortuneSessionListRequest(FortuneRequest):
    page: int = Field(1, ge=1)
    page_size: int = Field(20, ge=1, le=100)


class FortuneDrawCreate(FortuneRequest):
    fortune_template_id: Optional[str] = None
    position_index: Optional[int] = Field(None, gt=0)
    interpreted_text: Optional[str] = None
