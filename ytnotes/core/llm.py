"""
Module to get the chat model used for summaries and flashcards.
"""

import os
from typing import Optional

from langchain.chat_models import init_chat_model
from langchain_core.language_models import BaseChatModel

from ytnotes.models.schemas import SummaryConfig
from ytnotes.utils.logger import logging


def get_chat_model(config: SummaryConfig, api_key: Optional[str] = None) -> BaseChatModel:
    """
    Get the hosted chat model for the configured provider.

    Args:
        config: Model name, provider and temperature
        api_key: OpenAI API key (if None, will try to get from environment)

    Returns:
        A configured chat model
    """
    if config.model_provider == "openai":
        api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError("OpenAI API key is required. Set it in .env file or pass directly.")
        os.environ["OPENAI_API_KEY"] = api_key

    logging.info(f"Initializing LLM {config.model} from {config.model_provider}")
    return init_chat_model(
        model=config.model,
        model_provider=config.model_provider,
        temperature=config.temperature,
    )
