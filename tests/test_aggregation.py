"""
Tests for grouping submissions by game and by mapper.
"""

import pytest

from gbhwdb.components.cartridge.aggregation_comp import aggregate, group_by_game, group_by_mapper
from gbhwdb.helpers.dto.config_dto import MapperId
from gbhwdb.helpers.logging_helper import WarningCollector


@pytest.fixture
def batch(make_submission):
    """Mixed batch: explicit kinds, layout fallback, unknown kind and unknown game."""
    records = [
        ("tetris", None),  # no-mapper via layout
        ("kirby-dream-land", "MBC1B"),
        ("tetris", None),
        ("zelda-links-awakening", None),  # mapper slot, no revision -> unclassified
        ("pokemon-gold", "MBC3"),
        ("kirby-dream-land", "XYZ-UNKNOWN"),  # warning -> unclassified
        ("alleyway", "MBC1"),
    ]
    return [make_submission(game_type, kind=kind, index=i, slug=f"s{i}") for i, (game_type, kind) in enumerate(records)]


@pytest.mark.unit
class TestGroupByGame:
    def test_keys_are_distinct_types(self, batch):
        """Test by_game has exactly one key per distinct type."""
        groups = group_by_game(batch)
        assert set(groups) == {s.type for s in batch}

    def test_every_submission_exactly_once(self, batch):
        """Test groups partition the input."""
        groups = group_by_game(batch)
        members = [s.index for group in groups.values() for s in group]
        assert sorted(members) == list(range(len(batch)))

    def test_load_order_within_group(self, batch):
        """Test members keep their load order."""
        groups = group_by_game(batch)
        assert [s.index for s in groups["tetris"]] == [0, 2]
        assert [s.index for s in groups["kirby-dream-land"]] == [1, 5]

    def test_unconfigured_game_is_still_grouped(self, make_submission):
        """Test grouping by game needs no game config."""
        groups = group_by_game([make_submission("not-a-game")])
        assert list(groups) == ["not-a-game"]

    def test_empty(self):
        """Test an empty batch yields no groups."""
        assert group_by_game([]) == {}


@pytest.mark.unit
class TestGroupByMapper:
    def test_none_is_excluded_and_counted(self, make_submission):
        """Test submissions classified to None are counted, not keyed."""
        submissions = [make_submission("tetris", index=i) for i in range(3)]
        verdicts = iter([MapperId.MBC5, None, MapperId.MBC5])
        groups, unclassified = group_by_mapper(submissions, lambda s: next(verdicts))
        assert list(groups) == [MapperId.MBC5]
        assert [s.index for s in groups[MapperId.MBC5]] == [0, 2]
        assert unclassified == 1

    def test_classifier_called_once_per_submission(self, make_submission):
        """Test each submission is classified exactly once."""
        calls = []

        def classifier(submission):
            calls.append(submission.index)
            return MapperId.MBC1

        group_by_mapper([make_submission("tetris", index=i) for i in range(4)], classifier)
        assert calls == [0, 1, 2, 3]


@pytest.mark.unit
class TestAggregate:
    def test_mapper_keys_are_lazy(self, batch, store):
        """Test only populated mappers appear as keys."""
        groups = aggregate(batch, store)
        assert set(groups.by_mapper) == {MapperId.NO_MAPPER, MapperId.MBC1, MapperId.MBC3}
        assert all(groups.by_mapper.values())
        assert None not in groups.by_mapper

    def test_mapper_groups(self, batch, store):
        """Test members of each mapper group."""
        groups = aggregate(batch, store)
        assert [s.index for s in groups.by_mapper[MapperId.NO_MAPPER]] == [0, 2]
        assert [s.index for s in groups.by_mapper[MapperId.MBC1]] == [1, 6]
        assert [s.index for s in groups.by_mapper[MapperId.MBC3]] == [4]

    def test_unclassified_count(self, batch, store):
        """Test unclassifiable submissions are only in by_game."""
        groups = aggregate(batch, store)
        in_mapper_groups = sum(len(group) for group in groups.by_mapper.values())
        assert groups.unclassified == 2
        assert in_mapper_groups + groups.unclassified == groups.submission_count == len(batch)

    def test_by_mapper_is_subset_of_by_game(self, batch, store):
        """Test every classified submission also appears in by_game."""
        groups = aggregate(batch, store)
        by_game_ids = {id(s) for group in groups.by_game.values() for s in group}
        assert all(id(s) in by_game_ids for group in groups.by_mapper.values() for s in group)

    def test_warnings_are_collected(self, batch, store):
        """Test unknown revisions end up in the collector."""
        warnings = WarningCollector()
        aggregate(batch, store, warnings)
        assert len(warnings) == 1
        assert "XYZ-UNKNOWN" in warnings.messages[0]
        assert "s5" in warnings.messages[0]

    def test_empty_batch(self, store):
        """Test an empty batch aggregates to empty views."""
        groups = aggregate([], store)
        assert groups.by_game == {}
        assert groups.by_mapper == {}
        assert groups.unclassified == 0

    def test_aggregation_is_deterministic(self, batch, store):
        """Test repeated aggregation of the same input is identical."""
        first = aggregate(batch, store)
        second = aggregate(batch, store)
        assert first.by_game == second.by_game
        assert first.by_mapper == second.by_mapper
        assert list(first.by_mapper) == list(second.by_mapper)
