"""
Transcript retrieval for YouTube videos.
"""

import asyncio
from typing import List, Optional

from langchain_core.documents import Document
from langchain_community.document_loaders import YoutubeLoader
from pytubefix import YouTube

from ytnotes.config import config
from ytnotes.models.schemas import Language
from ytnotes.utils.error_handling import TranscriptUnavailableError
from ytnotes.utils.logger import logging


def build_video_url(video_id: str) -> str:
    """Canonical short URL for a video ID."""
    return config.YOUTUBE_URL_TEMPLATE.format(video_id=video_id)


class TranscriptLoader:
    """Class to fetch transcript segments and video metadata."""

    def __init__(self, video_id: str, language: Language = config.DEFAULT_LANGUAGE):
        """
        Initialize the loader for one video.

        Args:
            video_id: YouTube video ID
            language: Transcript language code
        """
        self.video_id = video_id
        self.language = language
        self.url = build_video_url(video_id)

    async def load(self) -> List[Document]:
        """
        Fetch the transcript and attach video metadata to the segments.

        Returns:
            Transcript segments in original order
        """
        loader = YoutubeLoader.from_youtube_url(self.url, language=[self.language])
        docs = await loader.aload()
        if not docs:
            raise TranscriptUnavailableError(self.video_id, self.language)

        info = await asyncio.to_thread(self.get_video_info)
        for doc in docs:
            doc.metadata.update(info)
            doc.metadata["language"] = self.language

        return docs

    def get_video_info(self) -> dict:
        """Extract title and author; an empty dict if YouTube cannot be reached."""
        try:
            yt = YouTube(self.url)
            return {"title": yt.title, "author": yt.author}
        except Exception as e:
            logging.warning(f"Could not fetch metadata for {self.video_id}: {e}")
            return {}


async def load_transcript(video_id: str, language: Language = config.DEFAULT_LANGUAGE) -> List[Document]:
    """Fetch transcript segments for a video."""
    return await TranscriptLoader(video_id, language).load()


def get_title(docs: List[Document]) -> Optional[str]:
    """Video title from the first segment's metadata, if any."""
    if not docs:
        return None
    return docs[0].metadata.get("title") or None
