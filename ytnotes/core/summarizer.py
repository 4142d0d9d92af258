"""
Module for summarizing transcript chunks into Markdown.
"""

from typing import List, Optional

from langchain_core.documents import Document
from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from ytnotes.core.llm import get_chat_model
from ytnotes.core.prompts import SUMMARY_TEMPLATE
from ytnotes.models.schemas import SummaryConfig
from ytnotes.utils.logger import logging

DOCUMENT_SEPARATOR = "\n\n"


def format_context(chunks: List[Document]) -> str:
    """Join chunk texts into a single prompt context."""
    return DOCUMENT_SEPARATOR.join(doc.page_content for doc in chunks)


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(self, config: Optional[SummaryConfig] = None, llm: Optional[BaseChatModel] = None):
        """
        Initialize the summarizer.

        Args:
            config: Configuration for summarization
            llm: Chat model to use (if None, one is built from config)
        """
        self.config = config or SummaryConfig()
        self.llm = llm or get_chat_model(self.config)
        self.prompt = ChatPromptTemplate.from_template(SUMMARY_TEMPLATE)

    async def summarize(self, chunks: List[Document]) -> str:
        """
        Summarize transcript chunks in a single model call.

        Args:
            chunks: Transcript chunks in order

        Returns:
            The model's Markdown response, unmodified
        """
        chain = self.prompt | self.llm | StrOutputParser()

        logging.info(f"Summarizing {len(chunks)} chunks with {self.config.model}")
        return await chain.ainvoke({"context": format_context(chunks)})
