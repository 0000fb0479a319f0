"""Batch topic derivation and filtering over polars DataFrames."""

import logging

import polars as pl

from hashtopic.topics.domain.topic import Topic
from hashtopic.topics.domain.topic_deriver import TopicDeriver
from hashtopic.topics.infrastructure.default_deriver import get_default_deriver
from hashtopic.topics.utils.topic_matcher import TopicMatcher

logger = logging.getLogger(__name__)

_MATCH_MASK = "__topic_match__"


def derive_topic_column(
    df: pl.DataFrame,
    source: str,
    target: str = "topic",
    deriver: TopicDeriver | None = None,
) -> pl.DataFrame:
    """
    Derive a topic for every row of a payload column.

    Args:
        df: Input frame.
        source: Column holding the payloads (Binary or Utf8).
        target: Name of the topic column to add (Binary, 4 bytes per row).
        deriver: Deriver to use (default: shared SHA3-256 deriver).

    Returns:
        A new frame with the topic column added. Null payloads stay null.

    Examples:
        >>> df = pl.DataFrame({"payload": [b"a", b"b"]})
        >>> derive_topic_column(df, "payload").columns
        ['payload', 'topic']
    """
    deriver = deriver if deriver is not None else get_default_deriver()
    topics = [
        None if payload is None else bytes(deriver.derive(payload))
        for payload in df.get_column(source).to_list()
    ]
    return df.with_columns(pl.Series(target, topics, dtype=pl.Binary))


def match_topic_column(
    df: pl.DataFrame,
    matcher: TopicMatcher,
    column: str = "topics",
    target: str = "matched",
) -> pl.DataFrame:
    """
    Evaluate a matcher against a column of topic lists.

    Args:
        df: Input frame.
        matcher: Compiled topic filter.
        column: List(Binary) column holding each row's topics.
        target: Name of the Boolean result column to add.

    Returns:
        A new frame with the result column added. A null list counts as a
        message without topics.

    Raises:
        ValueError: If a stored topic is not exactly 4 bytes.
    """
    matched = [
        matcher.matches([Topic(value) for value in row or []])
        for row in df.get_column(column).to_list()
    ]
    return df.with_columns(pl.Series(target, matched, dtype=pl.Boolean))


def filter_matching(
    df: pl.DataFrame,
    matcher: TopicMatcher,
    column: str = "topics",
) -> pl.DataFrame:
    """
    Keep only the rows whose topic list passes the matcher.

    Args:
        df: Input frame.
        matcher: Compiled topic filter.
        column: List(Binary) column holding each row's topics.

    Returns:
        The matching rows, in their original order.
    """
    result = (
        match_topic_column(df, matcher, column, target=_MATCH_MASK)
        .filter(pl.col(_MATCH_MASK))
        .drop(_MATCH_MASK)
    )
    logger.debug(f"{result.height}/{df.height} rows matched {matcher!r}")
    return result
