from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

PDF_MEDIA_TYPE = "application/pdf"


class Upload(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: bytes
    media_type: str | None = None
    filename: str | None = None

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def is_pdf(self) -> bool:
        declared = (self.media_type or "").split(";", 1)[0].strip().lower()
        return declared == PDF_MEDIA_TYPE


class ExtractedText(BaseModel):
    text: str
    pages: int = 0
    warnings: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.text
