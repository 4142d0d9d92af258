SUMMARY_TEMPLATE = """
    🎥 Video Summary
    You are a helpful assistant. Given the following transcript excerpts, produce a concise, well-structured Markdown document:
    - Use H1/H2 headers for main ideas and sections.
    - Use bullet lists for key concepts and supporting details.
    - Discard filler words, disfluencies, and unnecessary jargon.
    Transcript:
    {context}
    """

FLASHCARD_TEMPLATE = """
    🧠 Flashcards
    You are a study assistant. Using only the Markdown summary below, write flashcards
    covering its key ideas. Output nothing but the flashcards, each in exactly this format:

    <question>
    ?
    <answer>
    ---

    Keep every question and every answer on a single line.
    Summary:
    {summary}
    """
