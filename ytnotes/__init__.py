"""
YouTube Notes Application.

This application fetches YouTube transcripts, summarizes them into Markdown
with an LLM and can append flashcards derived from the summary.
"""

from ytnotes.config import config

__version__ = config.APP_VERSION
