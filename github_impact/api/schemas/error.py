from pydantic import BaseModel


class ValidationIssue(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: list[ValidationIssue] | str | None = None
