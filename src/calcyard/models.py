"""
Request and response schemas for the calcyard API.
"""

from pydantic import BaseModel, Field

from calcyard.errors import ErrorKind
from calcyard.tokens import TokenKind


# =============================================================================
# Evaluation Models
# =============================================================================

class EvaluateRequest(BaseModel):
    """Request model for evaluating an expression."""
    expression: str = Field(..., max_length=4096, description="Infix arithmetic expression")


class EvaluateResponse(BaseModel):
    """Successful evaluation result."""
    expression: str
    result: float
    display: str = Field(..., description="Result text, usable as a new expression")


class TokenModel(BaseModel):
    kind: TokenKind
    text: str


class PostfixResponse(BaseModel):
    """Intermediate token and postfix sequences for an expression."""
    expression: str
    tokens: list[TokenModel]
    postfix: list[TokenModel]
    result: float


class ErrorResponse(BaseModel):
    """Body returned when an expression cannot be evaluated."""
    kind: ErrorKind
    message: str


# =============================================================================
# Editor Models
# =============================================================================

class EditorState(BaseModel):
    """Snapshot of an expression editor."""
    expression: str
    display: str
    result_text: str


class KeysRequest(BaseModel):
    """Replay keyboard keys against an expression."""
    expression: str = Field("", max_length=4096)
    keys: list[str] = Field(default_factory=list, max_length=1024)
