from __future__ import annotations

from dataclasses import replace

from resume_check.ai.types import Completion
from resume_check.core.config import Settings, settings


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def make_pdf(*lines: str) -> bytes:
    """Build a one-page PDF that draws ``lines`` in Helvetica."""
    body = " ".join(f"({_escape(line)}) Tj T*" for line in lines)
    content = f"BT /F1 12 Tf 14 TL 72 720 Td {body} ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        (
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>"
        ),
        b"<< /Length " + str(len(content)).encode() + b" >>\nstream\n" + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, obj in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + obj + b"\nendobj\n"

    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_at}\n%%EOF\n"
    ).encode()
    return bytes(out)


def make_settings(**overrides) -> Settings:
    defaults = {
        "ai_provider": "gemini",
        "gemini_api_key": None,
        "openai_api_key": None,
        "cors_allowed_origins": ("http://localhost:5173", "https://ai-resume-check.netlify.app"),
        "cors_allow_credentials": True,
        "max_upload_bytes": 10 * 1024 * 1024,
    }
    defaults.update(overrides)
    return replace(settings, **defaults)


class FakeAIClient:
    provider = "fake"

    def __init__(self, text: str | None = "Rating: 8/10. Strong Python background.", error: Exception | None = None):
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> Completion:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return Completion(text=self.text)
