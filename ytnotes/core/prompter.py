"""
Interactive prompts for collecting the run's choices from standard input.
"""

import re
import asyncio
from typing import Awaitable, Callable, Optional

from ytnotes.config import config
from ytnotes.models.schemas import UserChoices
from ytnotes.utils.logger import logging

AskFunc = Callable[[str], Awaitable[str]]

VIDEO_ID_QUESTION = "▶️  Enter YouTube video ID: "
FLASHCARDS_QUESTION = "🧠 Generate flashcards? (y/N): "
LANGUAGE_QUESTION = "🌐 Transcript language (en / pt-BR) [en]: "

AFFIRMATIVE_PATTERN = re.compile(r"^y(es)?$", re.IGNORECASE)
LANGUAGE_ALIASES = {
    "": "en",
    "en": "en",
    "pt-br": "pt-BR",
    "ptbr": "pt-BR",
    "pt": "pt-BR",
}


async def ask_question(query: str) -> str:
    """Read one line from stdin without blocking the event loop."""
    return await asyncio.to_thread(input, query)


def parse_flashcards_answer(answer: str) -> bool:
    """Return True only for y / yes answers, in any case."""
    return bool(AFFIRMATIVE_PATTERN.match(answer.strip()))


def parse_language_answer(answer: str) -> str:
    """
    Resolve a language answer to a supported transcript language.

    Args:
        answer: Raw user input

    Returns:
        "en" or "pt-BR"; unrecognised input falls back to the default language
    """
    key = answer.strip().lower()
    if key in LANGUAGE_ALIASES:
        return LANGUAGE_ALIASES[key]

    logging.warning(
        f"Unsupported language '{answer.strip()}' (expected one of "
        f"{', '.join(config.SUPPORTED_LANGUAGES)}), falling back to '{config.DEFAULT_LANGUAGE}'"
    )
    return config.DEFAULT_LANGUAGE


async def collect_choices(ask: Optional[AskFunc] = None) -> UserChoices:
    """
    Prompt for the video ID, the flashcards opt-in and the transcript language.

    Args:
        ask: Coroutine used to read an answer (defaults to stdin)

    Returns:
        UserChoices for the run
    """
    ask = ask or ask_question

    video_id = (await ask(VIDEO_ID_QUESTION)).strip()
    flashcards = parse_flashcards_answer(await ask(FLASHCARDS_QUESTION))
    language = parse_language_answer(await ask(LANGUAGE_QUESTION))

    return UserChoices(video_id=video_id, flashcards=flashcards, language=language)
