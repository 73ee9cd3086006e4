"""LangChain chains for article generation."""

from src.chains.structure_generator import MalformedCompletionError, StructureGeneratorChain

__all__ = [
    "MalformedCompletionError",
    "StructureGeneratorChain",
]
