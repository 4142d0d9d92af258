"""
Core functionality for the YouTube notes application.

This package contains modules for prompting the user, fetching and
splitting transcripts, summarizing, generating flashcards and saving
Markdown output.
"""
