import pytest

from depthchart.config import get_taxonomy
from depthchart.engine import DepthChartEngine
from depthchart.errors import UnknownPlayer, UnknownPosition


@pytest.fixture
def engine() -> DepthChartEngine:
    return DepthChartEngine(get_taxonomy("NFL"))


def _ids(engine: DepthChartEngine, tag: str) -> list[int]:
    return [entry.player_id for entry in engine.get_full_chart()[tag]]


def _register(engine: DepthChartEngine, *names: str) -> list[int]:
    return [engine.registry.add_or_get(name).player_id for name in names]


def test_every_taxonomy_tag_has_an_empty_slot(engine: DepthChartEngine):
    chart = engine.get_full_chart()
    assert list(chart) == list(get_taxonomy("NFL").tags)
    assert all(entries == [] for entries in chart.values())


def test_add_position_inserts_at_depth(engine: DepthChartEngine):
    (bob,) = _register(engine, "Bob")
    engine.add_position(bob, "QB", 0)

    chart = engine.get_full_chart()
    assert len(chart["QB"]) == 1
    assert chart["QB"][0].player_id == bob
    assert chart["QB"][0].depth == 0
    assert chart["QB"][0].position == "QB"


def test_add_position_unknown_player_raises(engine: DepthChartEngine):
    with pytest.raises(UnknownPlayer):
        engine.add_position(7, "QB", 0)
    assert _ids(engine, "QB") == []


def test_add_position_unknown_tag_raises(engine: DepthChartEngine):
    (bob,) = _register(engine, "Bob")
    with pytest.raises(UnknownPosition):
        engine.add_position(bob, "SS", 0)


def test_readding_relocates_without_duplicates(engine: DepthChartEngine):
    (bob,) = _register(engine, "Bob")
    engine.add_position(bob, "QB", 1)
    engine.add_position(bob, "QB", 0)

    chart = engine.get_full_chart()
    assert _ids(engine, "QB") == [bob]
    assert chart["QB"][0].depth == 0


def test_relocation_preserves_relative_order_of_others(engine: DepthChartEngine):
    a, b, c, d = _register(engine, "A", "B", "C", "D")
    for player in (a, b, c, d):
        engine.add_position(player, "WR")

    engine.add_position(d, "WR", 1)
    assert _ids(engine, "WR") == [a, d, b, c]

    engine.add_position(a, "WR", 3)
    assert _ids(engine, "WR") == [d, b, c, a]


@pytest.mark.parametrize("depth", [None, 5, 100, -1])
def test_out_of_range_or_missing_depth_appends(engine: DepthChartEngine, depth):
    bob, alice = _register(engine, "Bob", "Alice")
    engine.add_position(bob, "RB", 0)
    engine.add_position(alice, "RB", depth)

    assert _ids(engine, "RB") == [bob, alice]


def test_depth_equal_to_length_appends(engine: DepthChartEngine):
    bob, alice = _register(engine, "Bob", "Alice")
    engine.add_position(bob, "TE", 0)
    engine.add_position(alice, "TE", 1)
    assert _ids(engine, "TE") == [bob, alice]


def test_player_appears_at_most_once_after_many_adds(engine: DepthChartEngine):
    ids = _register(engine, "A", "B", "C")
    for depth in (0, 3, 1, None, 2, 0, 9):
        for player in ids:
            engine.add_position(player, "K", depth)
            slot = _ids(engine, "K")
            assert len(slot) == len(set(slot))
    assert sorted(_ids(engine, "K")) == sorted(ids)


def test_same_player_may_hold_several_positions(engine: DepthChartEngine):
    (bob,) = _register(engine, "Bob")
    engine.add_position(bob, "KR", 0)
    engine.add_position(bob, "PR", 0)
    assert _ids(engine, "KR") == [bob]
    assert _ids(engine, "PR") == [bob]


def test_remove_position(engine: DepthChartEngine):
    bob, alice = _register(engine, "Bob", "Alice")
    engine.add_position(bob, "QB", 0)
    engine.add_position(alice, "QB", 1)

    engine.remove_position("bob", "QB")
    assert _ids(engine, "QB") == [alice]


def test_remove_position_is_noop_for_unknown_or_absent_players(engine: DepthChartEngine):
    bob, alice = _register(engine, "Bob", "Alice")
    engine.add_position(alice, "QB", 0)

    engine.remove_position("Bob", "QB")
    engine.remove_position("Nobody", "QB")

    assert _ids(engine, "QB") == [alice]
    assert engine.registry.find("Nobody") is None


def test_full_chart_is_a_snapshot(engine: DepthChartEngine):
    (bob,) = _register(engine, "Bob")
    engine.add_position(bob, "QB", 0)

    chart = engine.get_full_chart()
    chart["QB"].clear()
    chart.pop("WR")

    fresh = engine.get_full_chart()
    assert [entry.player_id for entry in fresh["QB"]] == [bob]
    assert "WR" in fresh


def test_get_players_under_returns_suffix(engine: DepthChartEngine):
    bob, alice, carl = _register(engine, "Bob", "Alice", "Carl")
    engine.add_position(bob, "QB", 0)
    engine.add_position(alice, "QB", 1)
    engine.add_position(carl, "QB", 2)

    assert [e.player_id for e in engine.get_players_under("Bob", "QB")] == [alice, carl]
    assert [e.player_id for e in engine.get_players_under("ALICE", "QB")] == [carl]
    assert engine.get_players_under("Carl", "QB") == []


def test_get_players_under_empty_for_unknown_or_absent(engine: DepthChartEngine):
    bob, alice = _register(engine, "Bob", "Alice")
    engine.add_position(bob, "QB", 0)

    assert engine.get_players_under("Alice", "QB") == []
    assert engine.get_players_under("Nobody", "QB") == []


def test_get_players_under_result_does_not_alias_slot(engine: DepthChartEngine):
    bob, alice = _register(engine, "Bob", "Alice")
    engine.add_position(bob, "QB", 0)
    engine.add_position(alice, "QB", 1)

    under = engine.get_players_under("Bob", "QB")
    under.clear()
    assert _ids(engine, "QB") == [bob, alice]
