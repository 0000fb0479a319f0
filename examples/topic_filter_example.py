"""
Topic Filter Example

This example demonstrates how to:
1. Derive topics for outgoing messages
2. Compile subscriber filters with exact, set and wildcard positions
3. Route incoming messages to the subscriptions whose filters they pass
"""

from hashtopic.topics import (
    FilterCondition,
    TopicMatcher,
    derive_topic,
    derive_topics,
    match_topics,
)

# Publishers: each message carries topics derived from its classification data
outbox = {
    "eth price": derive_topics(b"market", b"ETH", b"USD"),
    "btc price": derive_topics(b"market", b"BTC", b"EUR"),
    "node alert": derive_topics(b"ops", b"node-7", b"disk"),
    "bare market": derive_topics(b"market"),
}

# Subscribers: one compiled matcher per subscription
subscriptions = {
    # market messages about ETH or BTC, any quote currency, trailing topics ignored
    "majors": TopicMatcher.compile(
        [
            {derive_topic(b"market")},
            {derive_topic(b"ETH"), derive_topic(b"BTC")},
        ]
    ),
    # any three-topic message whose last constrained topic is "disk"
    "disk alerts": TopicMatcher.compile(
        [FilterCondition.any(), FilterCondition.any(), FilterCondition.exact(derive_topic(b"disk"))]
    ),
    # same payload-based filter, built without deriving by hand
    "market feed": TopicMatcher.from_data([[b"market"]]),
}


def route() -> dict[str, list[str]]:
    """Return, for every subscription, the messages it receives."""
    return {
        name: [message for message, topics in outbox.items() if matcher.matches(topics)]
        for name, matcher in subscriptions.items()
    }


if __name__ == "__main__":
    for subscription, messages in route().items():
        print(f"{subscription:12} <- {messages}")

    # One-shot matching without keeping a compiled matcher around
    eur_quotes = [None, None, {derive_topic(b"EUR")}]
    print("EUR quotes:", [m for m, topics in outbox.items() if match_topics(eur_quotes, topics)])
