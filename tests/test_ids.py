"""Tests for entry id sources."""

from listkeeper.ids import CounterIds, TimestampIds, _now_ms, make_id_source
from listkeeper.settings import IdStrategy


class TestCounterIds:
    """Test CounterIds."""

    def test_counts_up_from_start(self):
        """Ids increase by one from the start value."""
        ids = CounterIds(start=4)
        assert [ids.next_id() for _ in range(3)] == [4, 5, 6]

    def test_defaults_to_one(self):
        """The first id is 1 by default."""
        assert CounterIds().next_id() == 1


class TestTimestampIds:
    """Test TimestampIds."""

    def test_uses_clock(self):
        """Ids come from the clock when it has moved on."""
        ids = TimestampIds(clock=lambda: 1_700_000_000_000)
        assert ids.next_id() == 1_700_000_000_000

    def test_same_millisecond_still_unique(self):
        """Several ids within one millisecond stay unique and increasing."""
        ids = TimestampIds(clock=lambda: 1000)
        assert [ids.next_id() for _ in range(4)] == [1000, 1001, 1002, 1003]

    def test_clock_going_backwards(self):
        """A clock step backwards never reissues an id."""
        ticks = iter([500, 100])
        ids = TimestampIds(last=0, clock=lambda: next(ticks))
        assert ids.next_id() == 500
        assert ids.next_id() == 501

    def test_now_ms_is_milliseconds(self):
        """_now_ms is on the millisecond scale."""
        assert 10**12 < _now_ms() < 10**14


class TestMakeIdSource:
    """Test make_id_source."""

    def test_counter_starts_after_existing(self):
        """A counter never collides with loaded ids."""
        ids = make_id_source(IdStrategy.COUNTER, [3, 9, 2])
        assert ids.next_id() == 10

    def test_counter_without_existing(self):
        """A counter over an empty list starts at 1."""
        assert make_id_source(IdStrategy.COUNTER).next_id() == 1

    def test_timestamp_after_existing(self):
        """A timestamp source never issues an id at or below existing ones."""
        far_future = 10**15
        ids = make_id_source(IdStrategy.TIMESTAMP, [far_future])
        assert ids.next_id() == far_future + 1

    def test_ids_are_unique(self):
        """Many ids in a row are pairwise distinct for both strategies."""
        for strategy in IdStrategy:
            ids = make_id_source(strategy)
            issued = [ids.next_id() for _ in range(200)]
            assert len(set(issued)) == len(issued)
