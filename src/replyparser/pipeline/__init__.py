"""Pipeline components for reply extraction."""

from replyparser.pipeline.classifier import VisibilityClassifier
from replyparser.pipeline.fragment import Fragment
from replyparser.pipeline.preprocessor import PreprocessedBody, Preprocessor
from replyparser.pipeline.segmenter import (
    DEFAULT_MAX_LINE_LENGTH,
    FragmentSegmenter,
    reverse_text,
)

__all__ = [
    "DEFAULT_MAX_LINE_LENGTH",
    "Fragment",
    "FragmentSegmenter",
    "PreprocessedBody",
    "Preprocessor",
    "VisibilityClassifier",
    "reverse_text",
]
