#!/usr/bin/env python3
"""
Value Models for Web Screenshot Module

This module defines the request, result and error records exchanged by the
capture routine and its callers. All records live for a single call.

Field names follow Python conventions; the MCP wire names (camelCase) are
declared as aliases and used when dumping with by_alias=True.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- CaptureRequest(url="https://example.com", width=800, height=600)

Expected output:
- CaptureResult(content=[TextContent(...)], metadata=CaptureMetadata(...))
- or CaptureError(type=CaptureErrorType.INVALID_URL, message="...")
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class CaptureErrorType(str, Enum):
    """Closed set of capture failure categories"""
    INVALID_URL = "INVALID_URL"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    PERMISSION_ERROR = "PERMISSION_ERROR"
    PUPPETEER_ERROR = "PUPPETEER_ERROR"


class CaptureRequest(BaseModel):
    """Arguments of a single capture"""
    model_config = ConfigDict(populate_by_name=True)

    url: Any = None
    width: Optional[float] = None
    height: Optional[float] = None
    full_page: Optional[bool] = Field(default=None, alias="fullPage")
    output_path: Optional[str] = Field(default=None, alias="outputPath")


class Viewport(BaseModel):
    width: int
    height: int


class CaptureMetadata(BaseModel):
    """Describes a saved screenshot using the resolved settings"""
    model_config = ConfigDict(populate_by_name=True)

    url: str
    file_path: str = Field(alias="filePath")
    timestamp: str
    viewport: Viewport
    full_page: bool = Field(alias="fullPage")


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class CaptureResult(BaseModel):
    """Successful capture"""
    content: List[TextContent]
    metadata: CaptureMetadata

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class CaptureError(BaseModel):
    """Failed capture, returned as a value instead of raised"""
    type: CaptureErrorType
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


CaptureOutcome = Union[CaptureResult, CaptureError]


def is_error(outcome: CaptureOutcome) -> bool:
    """Return True if the outcome is a CaptureError"""
    return isinstance(outcome, CaptureError)
