"""
Base models shared by every extraction result.
"""
from typing import Optional
from pydantic import BaseModel, Field


class Statistics(BaseModel):
    """Document statistics gathered from the acquired lines."""

    total_pages: int = Field(..., ge=0, description="Number of pages (1 for plain text)")
    total_lines: int = Field(..., ge=0, description="Number of lines handed to the parser")
    non_blank_lines: int = Field(..., ge=0, description="Lines with visible text")
    total_characters: int = Field(..., ge=0, description="Total characters extracted")
    total_words: int = Field(..., ge=0, description="Total words extracted")


class PageInfo(BaseModel):
    """Basic page information for PDF sources."""

    page_num: int = Field(..., ge=1, description="Page number")
    line_count: int = Field(0, ge=0, description="Visual lines reconstructed on this page")
    text_preview: Optional[str] = Field(
        None,
        description="Preview of page text (first 200 chars)"
    )
