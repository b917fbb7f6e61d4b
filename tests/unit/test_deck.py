"""Tests for fixed-capacity decks."""

from collections import Counter

import pytest
from warsim.cards import DECK_SIZE, FACES, SUITS
from warsim.rng import make_rng
from warsim.simulation.deck import Deck, DeckContractError, split


def test_full_deck_canonical_order() -> None:
    """Full deck runs from four twos at the bottom to four aces on top."""
    deck = Deck.full()
    assert len(deck) == DECK_SIZE
    assert deck.cards() == tuple(face for face in range(FACES) for _ in range(SUITS))
    assert deck.top() == FACES - 1


def test_full_deck_render() -> None:
    """Render lists cards from top to bottom."""
    assert Deck.full().render() == "".join(g * 4 for g in "AKQJ098765432")


def test_render_glyph_mapping() -> None:
    """Ten renders as '0', court cards and ace as letters."""
    deck = Deck.of([0, 7, 8, 9, 10, 11, 12])
    assert deck.render() == "AKQJ092"


def test_render_is_idempotent() -> None:
    """Rendering twice without mutation gives the same string."""
    deck = Deck.of([4, 1, 9])
    assert deck.render() == deck.render()
    assert len(deck) == 3


def test_empty_deck_renders_empty() -> None:
    assert Deck.empty().render() == ""


def test_clear_keeps_capacity() -> None:
    """Cleared deck is empty but can still hold a full deck."""
    deck = Deck.full().clear()
    assert len(deck) == 0
    for face in range(FACES):
        for _ in range(SUITS):
            deck.push(face)
    assert len(deck) == deck.capacity


def test_push_and_pop() -> None:
    """Cards come off in reverse push order."""
    deck = Deck.empty()
    deck.push(3)
    deck.push(7)
    assert deck.top() == 7
    assert deck.pop() == 7
    assert deck.pop() == 3
    assert deck.pop() is None


def test_push_past_capacity_raises() -> None:
    deck = Deck.full()
    with pytest.raises(DeckContractError):
        deck.push(0)


@pytest.mark.parametrize("bad", [-1, FACES, "A", True])
def test_push_invalid_card_raises(bad) -> None:
    with pytest.raises(DeckContractError):
        Deck.empty().push(bad)


class TestShuffle:
    """Tests for Fisher-Yates shuffle."""

    def test_preserves_cards(self):
        """Shuffle keeps length and multiset of cards."""
        deck = Deck.full()
        deck.shuffle(make_rng(0))
        assert len(deck) == DECK_SIZE
        assert Counter(deck) == Counter(Deck.full())

    def test_permutes(self):
        """A full deck almost never shuffles into canonical order."""
        deck = Deck.full()
        deck.shuffle(make_rng(3))
        assert deck.cards() != Deck.full().cards()

    def test_same_stream_same_order(self):
        """Same seed sequence gives same shuffle."""
        a, b = Deck.full(), Deck.full()
        a.shuffle(make_rng(11))
        b.shuffle(make_rng(11))
        assert a.cards() == b.cards()

    def test_small_decks(self):
        """Empty and single-card decks are untouched."""
        rng = make_rng(0)
        empty = Deck.empty()
        empty.shuffle(rng)
        assert len(empty) == 0
        single = Deck.of([5])
        single.shuffle(rng)
        assert single.cards() == (5,)


class TestSplit:
    """Tests for split."""

    def test_split_preserves_order(self):
        source = Deck.of([0, 1, 2, 3, 4])
        a, b = Deck.empty(), Deck.empty()
        split(source, 2, a, b)
        assert a.cards() == (0, 1)
        assert b.cards() == (2, 3, 4)
        assert a.cards() + b.cards() == source.cards()

    @pytest.mark.parametrize("where", [0, 1, 26, 51, 52])
    def test_aliasing_matches_separate(self, where):
        """Splitting into the source deck gives the same halves."""
        shuffled = Deck.full()
        shuffled.shuffle(make_rng(7))

        a, b = Deck.empty(), Deck.empty()
        split(shuffled, where, a, b)

        aliased = Deck.of(list(shuffled))
        other = Deck.empty()
        split(aliased, where, aliased, other)

        assert aliased.cards() == a.cards()
        assert other.cards() == b.cards()
        assert len(aliased) == where
        assert len(other) == DECK_SIZE - where

    def test_split_all_into_other_deck_empties_source(self):
        """Moving a whole pile with the source as second half."""
        discard = Deck.of([1, 2, 3])
        play = Deck.empty()
        split(discard, len(discard), play, discard)
        assert play.cards() == (1, 2, 3)
        assert len(discard) == 0

    @pytest.mark.parametrize("where", [-1, 4])
    def test_out_of_range_raises(self, where):
        source = Deck.of([1, 2, 3])
        with pytest.raises(DeckContractError):
            split(source, where, Deck.empty(), Deck.empty())
        assert source.cards() == (1, 2, 3)


class TestSort:
    """Tests for ordering spoils before a war is resolved."""

    def test_highest_on_top(self):
        deck = Deck.of([3, 12, 0, 5])
        deck.sort()
        assert deck.cards() == (0, 3, 5, 12)
        assert deck.render() == "A752"
        assert deck.pop() == 12

    def test_empty_is_noop(self):
        deck = Deck.empty()
        deck.sort()
        assert len(deck) == 0

    def test_keeps_cards(self):
        deck = Deck.full()
        deck.shuffle(make_rng(1))
        deck.sort()
        assert deck.cards() == Deck.full().cards()
