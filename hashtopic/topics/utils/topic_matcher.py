"""Positional topic filter matching."""

import logging
from collections.abc import Iterable, Sequence

from hashtopic.topics.domain.filter_condition import FilterCondition
from hashtopic.topics.domain.topic import Topic
from hashtopic.topics.domain.topic_deriver import TopicData, TopicDeriver
from hashtopic.topics.infrastructure.default_deriver import get_default_deriver

logger = logging.getLogger(__name__)

ConditionInput = Iterable[Topic] | FilterCondition | None


class TopicMatcher:
    """
    A compiled filter expression over message topic lists.

    The matcher holds one condition per position. Each condition may require
    a) an exact topic; b) one of a set of topics; or c) nothing (wildcard).
    A message must carry at least as many topics as the matcher has
    conditions. Topics beyond the condition count are never examined.

    Consider the following sample matcher:

        TopicMatcher.compile([
            {topic_a1, topic_a2, topic_a3},
            {topic_b},
            None,
            {topic_d1, topic_d2},
        ])

    To pass it, a message must list at least 4 topics: the first one of the
    A topics, the second topic_b, any third topic, and the fourth either
    topic_d1 or topic_d2. Any further topics are ignored.

    Matchers are immutable and may be evaluated concurrently.
    """

    def __init__(self, conditions: Iterable[FilterCondition] = ()) -> None:
        """
        Initialize the matcher from prepared conditions.

        Args:
            conditions: One condition per topic position.
        """
        self._conditions: tuple[FilterCondition, ...] = tuple(conditions)

    @classmethod
    def compile(cls, conditions: Iterable[ConditionInput]) -> "TopicMatcher":
        """
        Compile a matcher from per-position topic sets.

        An empty set (or None) at a position is a wildcard. Topic values are
        not validated; the zero sentinel is treated as an ordinary topic.

        Args:
            conditions: Acceptable topics for each position.

        Returns:
            The compiled matcher.
        """
        matcher = cls(FilterCondition.of(condition) for condition in conditions)
        logger.debug("Compiled %r", matcher)
        return matcher

    @classmethod
    def from_data(
        cls,
        conditions: Iterable[Iterable[TopicData] | None],
        deriver: TopicDeriver | None = None,
    ) -> "TopicMatcher":
        """
        Compile a matcher from raw payloads instead of topics.

        Each payload is turned into a topic with the deriver, so subscribers
        can filter on the same data publishers derive their topics from.

        Args:
            conditions: Acceptable payloads for each position.
            deriver: Deriver to use (default: shared SHA3-256 deriver).

        Returns:
            The compiled matcher.
        """
        deriver = deriver if deriver is not None else get_default_deriver()
        return cls.compile(
            deriver.derive_many(payloads) if payloads is not None else None
            for payloads in conditions
        )

    @property
    def conditions(self) -> tuple[FilterCondition, ...]:
        return self._conditions

    def matches(self, topics: Sequence[Topic]) -> bool:
        """
        Check if a list of topics satisfies every condition.

        Args:
            topics: Topics of an arriving message, in order.

        Returns:
            True if the message passes the filter, False otherwise.
        """
        # Mismatch if there aren't enough topics
        if len(self._conditions) > len(topics):
            return False

        # zip stops at the last condition, trailing topics are ignored
        for condition, topic in zip(self._conditions, topics):
            if not condition.accepts(topic):
                return False
        return True

    def filter(self, topic_lists: Iterable[Sequence[Topic]]) -> list[Sequence[Topic]]:
        """
        Get all topic lists that match this filter, in their original order.

        Args:
            topic_lists: Candidate topic lists.

        Returns:
            The matching topic lists.
        """
        return [topics for topics in topic_lists if self.matches(topics)]

    def is_wildcard(self) -> bool:
        """Check if every position accepts any topic."""
        return all(condition.is_wildcard() for condition in self._conditions)

    def __len__(self) -> int:
        return len(self._conditions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TopicMatcher):
            return NotImplemented
        return self._conditions == other._conditions

    def __hash__(self) -> int:
        return hash(self._conditions)

    def __repr__(self) -> str:
        rendered = ", ".join(_render_condition(condition) for condition in self._conditions)
        return f"{self.__class__.__name__}([{rendered}])"


def _render_condition(condition: FilterCondition) -> str:
    if condition.is_wildcard():
        return "*"
    return "{" + ", ".join(sorted(topic.hex() for topic in condition.topics)) + "}"


def compile_topic_matcher(conditions: Iterable[ConditionInput]) -> TopicMatcher:
    """
    Compile per-position topic sets into a matcher.

    Examples:
        >>> compile_topic_matcher([]).matches([])
        True
    """
    return TopicMatcher.compile(conditions)


def match_topics(conditions: Iterable[ConditionInput], topics: Sequence[Topic]) -> bool:
    """
    Check if a topic list matches the given conditions.

    Compiles the conditions on every call; compile a TopicMatcher once when
    the same filter is evaluated repeatedly.

    Args:
        conditions: Acceptable topics for each position.
        topics: Topics of an arriving message.

    Returns:
        True if the topics match, False otherwise.
    """
    return TopicMatcher.compile(conditions).matches(topics)
