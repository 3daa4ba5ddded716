"""Tests for the challenge session engine."""

import random

import pytest

from uht_challenge.catalog import EntityCatalog
from uht_challenge.engine import ChallengeSession, Layer
from uht_challenge.errors import EmptyCatalogError, NoActiveChallengeError


class TestStart:
    """Tests for drawing entities."""

    def test_initial_state(self, session):
        """Test that a new session has no challenge."""
        assert session.current_entity is None
        assert session.selected_traits == set()
        assert session.result is None
        assert not session.hint_used

    def test_start_sets_entity(self, session, small_entities):
        """Test that start draws an entity from the catalog."""
        entity = session.start()
        assert entity is session.current_entity
        assert entity.name in small_entities.get_names()
        assert session.state.seen_entity_names == {entity.name}

    def test_full_rotation_without_repeats(self, session, small_entities):
        """Test that each entity is drawn once per rotation."""
        drawn = [session.start().name for _ in range(len(small_entities))]
        assert sorted(drawn) == sorted(small_entities.get_names())

    def test_rotation_restarts(self, session, small_entities):
        """Test that the rotation resets once every entity has been seen."""
        size = len(small_entities)
        for _ in range(size):
            session.start()
        assert len(session.state.seen_entity_names) == size

        entity = session.start()
        assert session.state.seen_entity_names == {entity.name}

        second = [entity.name] + [session.start().name for _ in range(size - 1)]
        assert sorted(second) == sorted(small_entities.get_names())

    def test_many_rotations(self, small_entities, small_traits):
        """Test the no-repeat guarantee over several rotations."""
        session = ChallengeSession(small_entities, small_traits, rng=random.Random(123))
        size = len(small_entities)
        for _ in range(5):
            rotation = {session.start().name for _ in range(size)}
            assert rotation == set(small_entities.get_names())

    def test_same_seed_same_order(self, small_entities, small_traits):
        """Test that seeded sessions draw reproducibly."""
        first = ChallengeSession(small_entities, small_traits, seed=99)
        second = ChallengeSession(small_entities, small_traits, seed=99)
        assert [first.start().name for _ in range(6)] == [second.start().name for _ in range(6)]

    def test_start_resets_challenge_state(self, widget_session):
        """Test that starting again clears selection, hint and result."""
        widget_session.toggle_trait("B")
        widget_session.request_hint()
        widget_session.score()

        widget_session.start()
        assert widget_session.selected_traits == set()
        assert not widget_session.hint_used
        assert widget_session.result is None

    def test_empty_catalog(self, small_traits):
        """Test that an empty entity catalog cannot start."""
        session = ChallengeSession(EntityCatalog([]), small_traits)
        with pytest.raises(EmptyCatalogError):
            session.start()
        assert session.current_entity is None


class TestToggleTrait:
    """Tests for trait selection."""

    def test_toggle_on_and_off(self, widget_session):
        """Test that toggling twice restores the selection."""
        widget_session.toggle_trait("A")
        before = widget_session.selected_traits

        assert widget_session.toggle_trait("C") == before | {"C"}
        assert widget_session.toggle_trait("C") == before

    def test_unknown_trait_allowed(self, widget_session):
        """Test that names outside the catalog can be toggled."""
        widget_session.toggle_trait("Z")
        assert "Z" in widget_session.selected_traits

    def test_toggle_clears_result(self, widget_session):
        """Test that changing the selection drops the stored result."""
        widget_session.toggle_trait("B")
        widget_session.score()
        assert widget_session.result is not None

        widget_session.toggle_trait("D")
        assert widget_session.result is None

    def test_selection_is_copied(self, widget_session):
        """Test that callers cannot mutate the selection directly."""
        selection = widget_session.toggle_trait("B")
        selection.add("C")
        assert widget_session.selected_traits == {"B"}

    def test_requires_challenge(self, session):
        """Test toggling before start."""
        with pytest.raises(NoActiveChallengeError):
            session.toggle_trait("A")


class TestRequestHint:
    """Tests for hints."""

    def test_hint_counts(self, widget_session):
        """Test that hints report per-layer counts."""
        hints = widget_session.request_hint()
        assert widget_session.hint_used
        assert hints[Layer.PHYSICAL] == 2
        assert hints[Layer.SOCIAL] == 0

    def test_hint_is_one_shot(self, widget_session):
        """Test that repeated requests change nothing."""
        first = widget_session.request_hint()
        state = widget_session.snapshot()
        second = widget_session.request_hint()
        assert first == second
        assert widget_session.snapshot() == state

    def test_hint_penalty_without_looking(self, widget_session):
        """Test that the penalty applies once a hint is granted."""
        widget_session.toggle_trait("B")
        widget_session.toggle_trait("D")
        widget_session.request_hint()
        assert widget_session.score().score == 90

    def test_requires_challenge(self, session):
        """Test hints before start."""
        with pytest.raises(NoActiveChallengeError):
            session.request_hint()

    def test_layer_hints_without_challenge(self, session):
        """Test that layer hints are zero before start."""
        assert set(session.layer_hints().values()) == {0}


class TestScore:
    """Tests for scoring through the session."""

    def test_worked_example(self, widget_session):
        """Test truth {B, D} against guess {B, C}."""
        widget_session.toggle_trait("B")
        widget_session.toggle_trait("C")
        result = widget_session.score()

        assert result.correct_matches == ["B"]
        assert result.missed_traits == ["D"]
        assert result.extra_traits == ["C"]
        assert result.score == 90
        assert widget_session.result == result
        assert widget_session.hex_code == "6"

    def test_perfect(self, widget_session):
        """Test that the exact answer scores 100."""
        widget_session.toggle_trait("D")
        widget_session.toggle_trait("B")
        assert widget_session.score().score == 100

    def test_deterministic(self, widget_session):
        """Test that scoring twice gives the same result."""
        widget_session.toggle_trait("A")
        assert widget_session.score() == widget_session.score()

    def test_requires_challenge(self, session):
        """Test scoring before start."""
        with pytest.raises(NoActiveChallengeError):
            session.score()


class TestSnapshot:
    """Tests for state snapshots."""

    def test_snapshot_is_independent(self, widget_session):
        """Test that snapshots do not change with the session."""
        snapshot = widget_session.snapshot()
        widget_session.toggle_trait("A")
        assert snapshot.selected_traits == set()
        assert widget_session.state.selected_traits == {"A"}
