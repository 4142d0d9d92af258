"""
Module for deriving flashcards from a summary.
"""

from typing import Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from ytnotes.core.llm import get_chat_model
from ytnotes.core.prompts import FLASHCARD_TEMPLATE
from ytnotes.models.schemas import SummaryConfig
from ytnotes.utils.logger import logging


class FlashcardGenerator:
    """Class to turn a Markdown summary into question/answer flashcards."""

    def __init__(self, config: Optional[SummaryConfig] = None, llm: Optional[BaseChatModel] = None):
        self.config = config or SummaryConfig()
        self.llm = llm or get_chat_model(self.config)
        self.prompt = ChatPromptTemplate.from_template(FLASHCARD_TEMPLATE)

    async def generate(self, summary: str) -> str:
        """
        Ask the model for flashcards.

        The response is returned as-is; the card format is requested in the
        prompt but never checked.
        """
        chain = self.prompt | self.llm | StrOutputParser()

        logging.info("Generating flashcards from summary")
        return await chain.ainvoke({"summary": summary})
