"""Per-position conditions of a topic filter."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum, auto

from hashtopic.topics.domain.topic import Topic


class ConditionKind(StrEnum):
    """Kind of a filter condition.

    Attributes:
        WILDCARD: Any topic is accepted at this position
        EXACT: Only topics from the condition's set are accepted
    """

    WILDCARD = auto()
    EXACT = auto()


@dataclass(frozen=True)
class FilterCondition:
    """
    The acceptance rule for one position of a topic filter.

    Wildcard is an explicit kind rather than an empty topic set, so a
    condition can never silently mean "accept nothing".

    Attributes:
        kind: Whether the position is a wildcard or an exact match.
        topics: Accepted topics (empty for wildcards).
    """

    kind: ConditionKind
    topics: frozenset[Topic] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate the condition and freeze its topic set."""
        topics = frozenset(self.topics)
        for topic in topics:
            if not isinstance(topic, Topic):
                raise TypeError(
                    f"Filter condition topics must be Topic instances, got {type(topic).__name__}"
                )
        # Detach from a mutable set the caller may still hold
        object.__setattr__(self, "topics", topics)

        if self.kind is ConditionKind.WILDCARD and self.topics:
            raise ValueError("Wildcard condition cannot carry topics")
        if self.kind is ConditionKind.EXACT and not self.topics:
            raise ValueError("Exact condition requires at least one topic")

    @classmethod
    def any(cls) -> "FilterCondition":
        """Condition accepting every topic."""
        return cls(ConditionKind.WILDCARD)

    @classmethod
    def exact(cls, *topics: Topic) -> "FilterCondition":
        """Condition accepting only the given topics."""
        return cls(ConditionKind.EXACT, frozenset(topics))

    @classmethod
    def of(cls, topics: "Iterable[Topic] | FilterCondition | None") -> "FilterCondition":
        """
        Build a condition from a set of acceptable topics.

        An empty (or missing) set compiles to a wildcard, so a position
        with no listed topics accepts anything.

        Args:
            topics: Acceptable topics, an existing condition, or None.

        Returns:
            The corresponding condition.
        """
        if isinstance(topics, FilterCondition):
            return topics
        if isinstance(topics, bytes | bytearray | memoryview | str):
            raise TypeError(
                f"Expected a collection of topics, got a {type(topics).__name__} payload; "
                "derive topics first or use TopicMatcher.from_data"
            )
        accepted = frozenset(topics) if topics is not None else frozenset()
        if not accepted:
            return cls.any()
        return cls(ConditionKind.EXACT, accepted)

    def is_wildcard(self) -> bool:
        return self.kind is ConditionKind.WILDCARD

    def accepts(self, topic: Topic) -> bool:
        """
        Check whether a topic satisfies this condition.

        Args:
            topic: Topic found at this position of a message.

        Returns:
            True for wildcards, otherwise set membership.
        """
        return self.kind is ConditionKind.WILDCARD or topic in self.topics
