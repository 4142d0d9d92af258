"""
Persistence of summaries as Markdown files.
"""

import asyncio
from pathlib import Path
from typing import Optional, Union

from ytnotes.config import config
from ytnotes.models.schemas import VideoSummary
from ytnotes.utils.helpers import ensure_dir, make_file_name
from ytnotes.utils.logger import logging


def _write(file_path: Path, content: str) -> None:
    ensure_dir(str(file_path.parent))
    file_path.write_text(content, encoding="utf-8")


async def save_markdown(folder: Union[str, Path], name: str, content: str) -> Path:
    """
    Write Markdown content to a timestamped file.

    Args:
        folder: Output directory, created if missing
        name: Video title or ID used for the file name
        content: Markdown to write

    Returns:
        Path of the written file
    """
    file_path = Path(folder) / make_file_name(name)
    await asyncio.to_thread(_write, file_path, content)

    logging.info(f"SAVE Wrote summary to {file_path}")
    print(f"✅ Summary saved to {file_path}")
    return file_path


async def save_summary(summary: VideoSummary, output_dir: Optional[Union[str, Path]] = None) -> Path:
    """Save a VideoSummary, named after its title or video ID."""
    folder = output_dir if output_dir is not None else config.SUMMARIES_DIR
    return await save_markdown(folder, summary.file_stem, summary.to_markdown())
