from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .coltypes import ColumnType
from .view import ViewState


class EncodingInfo(BaseModel):
    detected: Optional[str] = Field(default=None, examples=[None])
    decode_used: str = "utf-8"
    decode_fallback: bool = False


class DatasetSummary(BaseModel):
    id: str
    filename: str
    delimiter: str
    encoding: EncodingInfo
    headers: List[str]
    column_types: Dict[int, ColumnType]
    rows: int
    view: ViewState


class ViewResponse(BaseModel):
    view: ViewState
    rows: List[List[str]]
    page: int
    total_pages: int
    page_list: List[Union[int, str]]
    matched: int
    total: int
    row_info: str


class HealthResponse(BaseModel):
    ok: bool = True
