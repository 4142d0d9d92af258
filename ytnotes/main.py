"""
Main entry point for the YouTube notes application.
"""

import sys
import asyncio
from pathlib import Path
from typing import Optional, Union

from ytnotes.models.schemas import Language, SummaryConfig, VideoSummary
from ytnotes.core.prompter import AskFunc, collect_choices
from ytnotes.core.transcript_loader import load_transcript, get_title
from ytnotes.core.splitter import split_documents
from ytnotes.core.summarizer import TranscriptSummarizer
from ytnotes.core.flashcards import FlashcardGenerator
from ytnotes.core.llm import get_chat_model
from ytnotes.core.writer import save_summary
from ytnotes.config import config
from ytnotes.utils.error_handling import handle_fatal_error, log_diagnostic_info
from ytnotes.utils.logger import logging


async def summarize_youtube_video(
    video_id: str,
    flashcards: bool = False,
    language: Language = config.DEFAULT_LANGUAGE,
    summary_config: Optional[SummaryConfig] = None,
    output_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Fetch, chunk and summarize a YouTube transcript, then save it as Markdown.

    Args:
        video_id: YouTube video ID
        flashcards: Whether to append flashcards derived from the summary
        language: Transcript language
        summary_config: Model and chunking settings
        output_dir: Directory for the Markdown file

    Returns:
        Path of the written file
    """
    summary_config = summary_config or SummaryConfig()
    log_diagnostic_info({
        "video_id": video_id,
        "flashcards": flashcards,
        "language": language,
        "model": summary_config.model,
    })

    # 1. Load transcript
    logging.info(f"LOAD Fetching transcript for {video_id}…")
    raw_docs = await load_transcript(video_id, language)

    # 2. Split into chunks
    logging.info(f"SPLIT Splitting {len(raw_docs)} raw segments…")
    chunks = split_documents(raw_docs, summary_config)

    # 3. Summarize
    llm = get_chat_model(summary_config)
    summarizer = TranscriptSummarizer(summary_config, llm=llm)
    logging.info(f"SUMMARIZE Sending {len(chunks)} chunks to the model…")
    summary_md = await summarizer.summarize(chunks)

    # 4. Flashcards
    flashcards_md = None
    if flashcards:
        logging.info("FLASHCARDS Generating flashcards…")
        generator = FlashcardGenerator(summary_config, llm=llm)
        flashcards_md = await generator.generate(summary_md)

    # 5. Save
    summary = VideoSummary(
        video_id=video_id,
        title=get_title(raw_docs),
        summary=summary_md,
        flashcards=flashcards_md,
        language=language,
    )
    return await save_summary(summary, output_dir)


async def run(ask: Optional[AskFunc] = None) -> Path:
    """Prompt for the run's choices and process the video."""
    choices = await collect_choices(ask)
    return await summarize_youtube_video(
        choices.video_id,
        flashcards=choices.flashcards,
        language=choices.language,
    )


def main():
    """Main function to run the application from command line."""
    config.initialize()

    try:
        asyncio.run(run())
    except Exception as e:
        sys.exit(handle_fatal_error(e))


if __name__ == "__main__":
    main()
