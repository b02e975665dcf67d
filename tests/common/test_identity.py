from src.school_register.school_register.common.identity import IdentityGenerator


def test_ids_are_distinct_when_clock_is_frozen():
    ids = IdentityGenerator(clock=lambda: 1_700_000_000_000)

    issued = [ids.next() for _ in range(50)]

    assert len(set(issued)) == 50
    assert issued[0] == "1700000000000"
    assert issued[1] == "1700000000001"


def test_clock_going_backwards_still_yields_new_ids():
    ticks = iter([500, 400, 300, 900])
    ids = IdentityGenerator(clock=lambda: next(ticks))

    assert [ids.next() for _ in range(4)] == ["500", "501", "502", "900"]


def test_broken_clock_falls_back_to_counter():
    ids = IdentityGenerator(clock=lambda: None)

    assert [ids.next() for _ in range(3)] == ["1", "2", "3"]


def test_default_clock_ids_are_unique():
    ids = IdentityGenerator()
    issued = [ids() for _ in range(1000)]
    assert len(set(issued)) == 1000
