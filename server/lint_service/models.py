from typing import List, Literal
from pydantic import BaseModel

# ---- Request / response models for the lint endpoint ----

class LintRequest(BaseModel):
    language: str
    code: str

class DiagnosticModel(BaseModel):
    line: int
    column: int
    message: str

class ErrorDetail(BaseModel):
    kind: Literal["unsupported_language", "parser_configuration", "parse_failure", "lint_error"]
    message: str

class ErrorResponse(BaseModel):
    error: ErrorDetail

# ---- Health ----

class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    languages: List[str] = []
