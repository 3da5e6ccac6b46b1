"""Application ports package."""

from .session_store import SessionStorePort
from .text_generation import TextGenerationPort

__all__ = ["SessionStorePort", "TextGenerationPort"]
