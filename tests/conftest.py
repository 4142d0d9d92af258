"""
Configuration for pytest tests.
"""

import os
import tempfile
import pytest
from pathlib import Path

# Must be set before ytnotes is imported during collection
os.environ.setdefault("OPENAI_API_KEY", "test_api_key")
os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "ytnotes-test-logs"))
os.environ.setdefault("ENVIRONMENT", "development")

from langchain_core.documents import Document
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda


@pytest.fixture
def test_summaries_dir(tmp_path):
    """Return an output directory that does not exist yet."""
    return tmp_path / "summaries"


@pytest.fixture
def echo_llm():
    """A chat model stand-in that answers with the prompt it received."""
    return RunnableLambda(lambda prompt_value: AIMessage(content=prompt_value.to_string()))


@pytest.fixture
def transcript_docs():
    """Transcript segments as returned by the loader."""
    return [
        Document(
            page_content="Welcome to this video about testing. We cover pytest and mocks.",
            metadata={"source": "abc123", "title": "Testing: A Guide?", "author": "Test Author", "language": "en"},
        )
    ]
