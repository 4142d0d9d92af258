"""
Data models for the YouTube notes application.
"""
import time
from typing import Optional, Literal
from pydantic import BaseModel, Field, field_validator
from ytnotes.config import config


Language = Literal["en", "pt-BR"]


class UserChoices(BaseModel):
    """Answers collected from the interactive prompts."""
    video_id: str
    flashcards: bool = False
    language: Language = config.DEFAULT_LANGUAGE

    @field_validator('video_id')
    def validate_video_id(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('A YouTube video ID is required')
        return v


class SummaryConfig(BaseModel):
    """Configuration for summarization operations."""
    model: str = config.DEFAULT_SUMMARY_MODEL
    model_provider: str = config.MODEL_PROVIDER
    temperature: float = config.TEMPERATURE
    chunk_size: int = config.CHUNK_SIZE
    chunk_overlap: int = config.CHUNK_OVERLAP


class VideoSummary(BaseModel):
    """Model for storing video summary information."""
    video_id: str
    title: Optional[str] = None
    summary: str
    flashcards: Optional[str] = None
    language: Language = config.DEFAULT_LANGUAGE
    created_at: str = Field(default_factory=lambda: time.strftime("%Y-%m-%d %H:%M:%S"))

    @property
    def file_stem(self) -> str:
        """Title when known, otherwise the video ID."""
        return self.title or self.video_id

    def to_markdown(self) -> str:
        """Render the summary, followed by the flashcards section when present."""
        if self.flashcards is None:
            return self.summary
        return f"{self.summary}\n\n## Flashcards\n\n{self.flashcards}"
