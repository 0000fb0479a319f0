"""Domain layer exports."""

from .filter_condition import ConditionKind, FilterCondition
from .hasher_port import HasherPort
from .topic import EMPTY_TOPIC, TOPIC_LENGTH, Topic
from .topic_deriver import TopicDeriver, to_display_string

__all__ = [
    "ConditionKind",
    "FilterCondition",
    "HasherPort",
    "Topic",
    "TOPIC_LENGTH",
    "EMPTY_TOPIC",
    "TopicDeriver",
    "to_display_string",
]
