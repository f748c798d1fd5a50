from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Completion:
    """Result of one model call. ``text`` is None when the provider sent nothing usable."""

    text: str | None = None

    @property
    def has_text(self) -> bool:
        return bool(self.text and self.text.strip())

    @classmethod
    def empty(cls) -> "Completion":
        return cls(text=None)


class AIClient(Protocol):
    provider: str

    async def generate(self, prompt: str) -> Completion: ...
