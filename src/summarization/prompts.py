"""Prompt templates for direct and chunked summarization."""

from __future__ import annotations

NO_PREAMBLE = (
    'Do not include any introductory phrases like "Here is a summary:" '
    'or "This is a summary of the text:".'
)

CHUNK_INSTRUCTION = (
    "Summarize the following text to extract all key information and main points. "
    "Do not lose any important details."
)

CHUNK_SEPARATOR = "\n\n---\n\n"


def direct_instruction(instruction: str) -> str:
    """Caller's instruction plus the grammar and no-preamble constraints."""
    return (
        f"{instruction} Ensure the output is free of spelling and grammatical errors. "
        f"{NO_PREAMBLE}"
    )


def combine_instruction(instruction: str) -> str:
    """Instruction for the final pass that merges partial summaries."""
    return (
        "I have several summaries of different parts of a long document. "
        "Combine them into a single, cohesive summary. "
        f"Then, apply the following instruction: {instruction} "
        "The final summary should be free of any spelling mistakes. "
        f"{NO_PREAMBLE}"
    )
