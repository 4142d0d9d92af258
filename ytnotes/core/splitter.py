from typing import List, Optional

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

from ytnotes.models.schemas import SummaryConfig


def split_documents(docs: List[Document], config: Optional[SummaryConfig] = None) -> List[Document]:
    """Split transcript segments into overlapping chunks, keeping their order and metadata."""
    config = config or SummaryConfig()
    text_splitter = RecursiveCharacterTextSplitter(
        chunk_size=config.chunk_size,
        chunk_overlap=config.chunk_overlap
    )
    return text_splitter.split_documents(docs)
