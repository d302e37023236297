from dataclasses import dataclass

import pytest

from swbattle.pipeline import Intent, IntentChain, IntentResolver


@dataclass
class Ping(Intent):
    value: int


@dataclass
class Pong(Intent):
    value: int


WORLD = object()


def _cancelling_resolver(reason, only_value=None):
    resolver = IntentResolver()

    def hook(world, intent):
        if only_value is None or intent.value == only_value:
            intent.cancel(reason)

    resolver.subscribe(Ping, hook, is_post=False)
    resolver.set_executor(Ping, lambda w, i: None)
    return resolver


def test_intent_cancel_records_reason():
    intent = Ping(1)
    resolver = _cancelling_resolver("blocked")
    assert resolver.resolve(WORLD, intent) is True
    assert intent.cancelled is True
    assert intent.cancel_reason == "blocked"


def test_cancel_does_not_leak_to_other_instances():
    first, second = Ping(1), Ping(2)
    resolver = _cancelling_resolver("x", only_value=1)
    resolver.resolve(WORLD, first)
    resolver.resolve(WORLD, second)
    assert first.cancelled is True
    assert second.cancelled is False


def test_chain_preserves_order_and_chains_calls():
    chain = IntentChain().add(Ping).add(Pong).add(Ping)
    assert list(chain) == [Ping, Pong, Ping]
    assert len(chain) == 3


def test_get_planner_missing_returns_none():
    assert IntentResolver().get_planner(Ping) is None


def test_set_planner_is_returned():
    resolver = IntentResolver()

    def planner(world, unit_id):
        return Ping(unit_id)

    resolver.set_planner(Ping, planner)
    assert resolver.get_planner(Ping) is planner
    assert resolver.get_planner(Pong) is None


def test_resolve_unregistered_type_returns_false():
    assert IntentResolver().resolve(WORLD, Ping(1)) is False


def test_resolve_runs_pre_executor_post_in_order():
    resolver = IntentResolver()
    log = []
    resolver.subscribe(Ping, lambda w, i: log.append(("pre", i.value)), is_post=False)
    resolver.set_executor(Ping, lambda w, i: log.append(("exec", i.value)))
    resolver.subscribe(Ping, lambda w, i: log.append(("post", i.value)))
    assert resolver.resolve(WORLD, Ping(7)) is True
    assert log == [("pre", 7), ("exec", 7), ("post", 7)]


def test_executor_receives_world():
    resolver = IntentResolver()
    seen = []
    resolver.set_executor(Ping, lambda w, i: seen.append(w))
    resolver.resolve(WORLD, Ping(1))
    assert seen == [WORLD]


def test_cancelled_intent_counts_as_handled_but_skips_executor():
    resolver = IntentResolver()
    log = []
    resolver.subscribe(Ping, lambda w, i: i.cancel("nope"), is_post=False)
    resolver.set_executor(Ping, lambda w, i: log.append("exec"))
    resolver.subscribe(Ping, lambda w, i: log.append("post"))
    intent = Ping(1)
    assert resolver.resolve(WORLD, intent) is True
    assert log == []
    assert intent.cancel_reason == "nope"


def test_missing_executor_raises():
    resolver = IntentResolver()
    resolver.set_planner(Ping, lambda w, uid: None)
    with pytest.raises(LookupError):
        resolver.resolve(WORLD, Ping(1))


def test_dispatch_is_by_exact_type():
    resolver = IntentResolver()
    log = []
    resolver.set_executor(Ping, lambda w, i: log.append("ping"))
    resolver.set_executor(Pong, lambda w, i: log.append("pong"))
    resolver.resolve(WORLD, Pong(1))
    resolver.resolve(WORLD, Ping(1))
    assert log == ["pong", "ping"]