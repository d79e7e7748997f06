"""
Error types for the indicator engine.

Every failure raised by an indicator function is an IndicatorError. The
hierarchy is open: new variants may be added, so callers should always keep
an ``except IndicatorError`` arm after any variant-specific handling.
"""
from typing import Optional
from enum import Enum
from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Standard error codes for indicator failures."""
    INDICATOR_ERROR = "INDICATOR_ERROR"
    NOT_ENOUGH_DATA = "NOT_ENOUGH_DATA"
    INVALID_WINDOW = "INVALID_WINDOW"


class IndicatorErrorModel(BaseModel):
    """
    Serializable view of an IndicatorError.
    Mirrors the standard error response shape so services can return it as-is.
    """
    error: bool = Field(default=True, description="Always true for error responses")
    error_code: ErrorCode = Field(..., description="Standard error code")
    message: str = Field(..., description="Human-readable error message")
    indicator: Optional[str] = Field(None, description="Indicator that failed (RSI, EMA, MACD)")
    field: Optional[str] = Field(None, description="Parameter name if a window was rejected")
    required: Optional[int] = Field(None, description="Number of prices the call needed")
    available: Optional[int] = Field(None, description="Number of prices the call received")

    class Config:
        json_schema_extra = {
            "example": {
                "error": True,
                "error_code": "NOT_ENOUGH_DATA",
                "message": "RSI(14) needs more than 14 prices, got 10",
                "indicator": "RSI",
                "field": None,
                "required": 15,
                "available": 10,
            }
        }


class IndicatorError(ValueError):
    """Base class for all indicator errors."""

    code: ErrorCode = ErrorCode.INDICATOR_ERROR

    def __init__(
        self,
        message: str,
        indicator: Optional[str] = None,
        field: Optional[str] = None,
        required: Optional[int] = None,
        available: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.indicator = indicator
        self.field = field
        self.required = required
        self.available = available

    def to_model(self) -> IndicatorErrorModel:
        """Convert to the standard error response model."""
        return IndicatorErrorModel(
            error_code=self.code,
            message=self.message,
            indicator=self.indicator,
            field=self.field,
            required=self.required,
            available=self.available,
        )


class NotEnoughData(IndicatorError):
    """Fewer prices were supplied than the requested window needs."""

    code = ErrorCode.NOT_ENOUGH_DATA


class InvalidWindow(IndicatorError):
    """A window parameter is not a positive integer, or MACD windows are out of order."""

    code = ErrorCode.INVALID_WINDOW
