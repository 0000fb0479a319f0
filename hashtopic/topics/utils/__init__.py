"""Utility modules for topic matching."""

from .topic_frame import derive_topic_column, filter_matching, match_topic_column
from .topic_matcher import TopicMatcher, compile_topic_matcher, match_topics

__all__ = [
    "TopicMatcher",
    "compile_topic_matcher",
    "match_topics",
    "derive_topic_column",
    "match_topic_column",
    "filter_matching",
]
