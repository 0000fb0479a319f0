import logging
import sys

import polars as pl

from hashtopic.settings import configure_logging, load_settings
from hashtopic.topics.domain.topic import Topic
from hashtopic.topics.utils.topic_frame import derive_topic_column, filter_matching
from hashtopic.topics.utils.topic_matcher import TopicMatcher

logger = logging.getLogger(__name__)


def main(config_path: str | None = None) -> None:
    """
    Derives topics for a few messages and shows which subscriptions accept them.
    """
    settings = load_settings(config_path)
    configure_logging(settings)
    deriver = settings.build_deriver()
    logger.info(f"Deriving topics with {deriver!r}")

    # 1. Publishers classify their messages
    messages = {
        "chat/general": deriver.derive_many([b"chat", b"general", b"en"]),
        "chat/random": deriver.derive_many([b"chat", b"random"]),
        "status/node-1": deriver.derive_many([b"status", b"node-1", b"up", b"v2"]),
        "chat": deriver.derive_many([b"chat"]),
    }
    for name, topics in messages.items():
        logger.info(f"{name}: {[topic.hex() for topic in topics]}")

    # 2. Subscribers compile their filters once
    subscriptions = {
        "all chat": TopicMatcher.from_data([[b"chat"], None], deriver=deriver),
        "general or status": TopicMatcher.from_data(
            [[b"chat", b"status"], [b"general", b"node-1"]], deriver=deriver
        ),
        "everything": TopicMatcher.compile([]),
    }

    # 3. Every incoming message is evaluated against every subscription
    for subscription, matcher in subscriptions.items():
        accepted = [name for name, topics in messages.items() if matcher.matches(topics)]
        print(f"[{subscription}] {matcher!r} accepts {accepted}")

    # 4. The same filter, applied to a batch of messages
    frame = pl.DataFrame(
        {
            "name": list(messages),
            "topics": [[bytes(topic) for topic in topics] for topics in messages.values()],
        }
    )
    frame = derive_topic_column(frame, "name", target="name_topic", deriver=deriver)
    matched = filter_matching(frame, subscriptions["all chat"])
    print(f"\nBatch filter 'all chat' kept {matched.height}/{frame.height} rows:")
    for name, name_topic in matched.select("name", "name_topic").iter_rows():
        print(f"  {name} (name topic {Topic(name_topic).hex()})")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
