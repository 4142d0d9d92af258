"""
Centralized error handling for the application.
"""

import sys
import json
import traceback
from typing import Dict, Any

from ytnotes.config import config
from ytnotes.utils.logger import logging


class TranscriptUnavailableError(ValueError):
    """Raised when no transcript segments could be retrieved for a video."""

    def __init__(self, video_id: str, language: str):
        self.video_id = video_id
        self.language = language
        super().__init__(
            f"No transcript available for video {video_id} (language: {language})"
        )


def handle_fatal_error(error: Exception) -> int:
    """
    Report an error that aborted the run.

    Args:
        error: The exception that escaped the pipeline

    Returns:
        Process exit code
    """
    logging.error(f"Run aborted: {error}")
    logging.error(traceback.format_exc())

    print(f"❌ Unexpected error: {error}", file=sys.stderr)
    return 1


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    try:
        logging.debug(f"Diagnostic info: {json.dumps(context, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
