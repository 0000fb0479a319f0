"""Topic derivation and positional topic filtering."""

from hashtopic.topics.domain.filter_condition import ConditionKind, FilterCondition
from hashtopic.topics.domain.topic import EMPTY_TOPIC, TOPIC_LENGTH, Topic
from hashtopic.topics.domain.topic_deriver import TopicDeriver, to_display_string
from hashtopic.topics.infrastructure.default_deriver import derive_topic, derive_topics
from hashtopic.topics.utils.topic_matcher import TopicMatcher, compile_topic_matcher, match_topics

__all__ = [
    "Topic",
    "TOPIC_LENGTH",
    "EMPTY_TOPIC",
    "TopicDeriver",
    "derive_topic",
    "derive_topics",
    "to_display_string",
    "ConditionKind",
    "FilterCondition",
    "TopicMatcher",
    "compile_topic_matcher",
    "match_topics",
]
