"""Tests for CONT'D inference."""

from screenwrite.models import Element, ElementType
from screenwrite.screenplay.continuation import (
    apply_continuation,
    resolve_continuations,
    should_continue,
)


def seq(*pairs):
    """Build an element list from (type, text) pairs."""
    return [Element(type=kind, text=text) for kind, text in pairs]


CHAR = ElementType.CHARACTER
DIAL = ElementType.DIALOGUE
ACT = ElementType.ACTION
PAREN = ElementType.PARENTHETICAL
SCENE = ElementType.SCENE_HEADING
TRANS = ElementType.TRANSITION


class TestShouldContinue:
    """Test the backward scan for the previous cue."""

    def test_no_interruption(self):
        """Test that consecutive speech of one character does not continue."""
        elements = seq((CHAR, "BOB"), (DIAL, "hi"))
        assert should_continue("BOB", 2, elements) is False

    def test_action_interruption(self):
        """Test that an action between two cues of one character continues."""
        elements = seq((CHAR, "BOB"), (DIAL, "hi"), (ACT, "He sits."), (CHAR, "BOB"))
        assert should_continue("BOB", 3, elements) is True

    def test_parenthetical_is_not_an_interruption(self):
        """Test that parentheticals and dialogue alone do not continue."""
        elements = seq((CHAR, "BOB"), (PAREN, "(beat)"), (DIAL, "hi"))
        assert should_continue("BOB", 3, elements) is False

    def test_other_character_in_between(self):
        """Test that another speaker breaks continuation."""
        elements = seq(
            (CHAR, "BOB"),
            (DIAL, "hi"),
            (CHAR, "ALICE"),
            (DIAL, "hey"),
            (ACT, "Pause."),
        )
        assert should_continue("BOB", 5, elements) is False

    def test_scene_heading_severs(self):
        """Test that a scene heading between the cues stops the scan."""
        elements = seq(
            (CHAR, "BOB"),
            (DIAL, "hi"),
            (ACT, "He leaves."),
            (SCENE, "EXT. STREET - DAY"),
            (ACT, "Bob walks."),
        )
        assert should_continue("BOB", 5, elements) is False

    def test_transition_severs(self):
        """Test that a transition between the cues stops the scan."""
        elements = seq((CHAR, "BOB"), (ACT, "Beat."), (TRANS, "CUT TO:"), (ACT, "X."))
        assert should_continue("BOB", 4, elements) is False

    def test_case_and_suffix_insensitive(self):
        """Test names compare without case or suffix."""
        elements = seq((CHAR, "BOB (CONT'D)"), (DIAL, "hi"), (ACT, "He sits."))
        assert should_continue("bob", 3, elements) is True
        assert should_continue("Bob (cont'd)", 3, elements) is True

    def test_invalid_input(self):
        """Test that invalid arguments yield False."""
        elements = seq((CHAR, "BOB"), (ACT, "He sits."))
        assert should_continue("", 2, elements) is False
        assert should_continue(None, 2, elements) is False
        assert should_continue("BOB", 0, elements) is False
        assert should_continue("BOB", 3, elements) is False
        assert should_continue("BOB", -1, elements) is False
        assert should_continue("BOB", 1, []) is False

    def test_no_previous_cue(self):
        """Test a first cue in the scene."""
        elements = seq((SCENE, "INT. HALL"), (ACT, "Quiet."))
        assert should_continue("BOB", 2, elements) is False


class TestApplyContinuation:
    """Test adding and removing the suffix."""

    def test_adds_suffix(self):
        """Test the suffix is appended when speech continues."""
        elements = seq((CHAR, "BOB"), (DIAL, "hi"), (ACT, "He sits."), (CHAR, "BOB"))
        assert apply_continuation("BOB", 3, elements) == "BOB (CONT'D)"

    def test_removes_stale_suffix(self):
        """Test a suffix is dropped when speech no longer continues."""
        elements = seq((CHAR, "BOB"), (DIAL, "hi"), (CHAR, "BOB (CONT'D)"))
        assert apply_continuation("BOB (CONT'D)", 2, elements) == "BOB"

    def test_does_not_double_suffix(self):
        """Test an existing suffix is replaced, not repeated."""
        elements = seq((CHAR, "BOB"), (ACT, "Beat."), (CHAR, "BOB (CONT'D)"))
        assert apply_continuation("BOB (CONT'D)", 2, elements) == "BOB (CONT'D)"


class TestResolveContinuations:
    """Test whole-sequence resolution."""

    def test_resolves_every_cue(self):
        """Test suffixes are added and removed across the sequence."""
        elements = seq(
            (CHAR, "BOB (CONT'D)"),
            (DIAL, "hi"),
            (ACT, "He sits."),
            (CHAR, "BOB"),
            (DIAL, "So."),
            (CHAR, "ALICE"),
        )
        resolved = resolve_continuations(elements)
        assert [e.text for e in resolved] == [
            "BOB",
            "hi",
            "He sits.",
            "BOB (CONT'D)",
            "So.",
            "ALICE",
        ]

    def test_unchanged_elements_are_reused(self):
        """Test elements that need no change are the same objects."""
        elements = seq((CHAR, "BOB"), (DIAL, "hi"))
        resolved = resolve_continuations(elements)
        assert resolved[0] is elements[0]
        assert resolved[1] is elements[1]

    def test_input_not_mutated(self):
        """Test the input sequence is left alone."""
        elements = seq((CHAR, "BOB"), (ACT, "Beat."), (CHAR, "BOB"))
        resolve_continuations(elements)
        assert elements[2].text == "BOB"

    def test_ids_preserved(self):
        """Test updated cues keep their ids."""
        elements = seq((CHAR, "BOB"), (ACT, "Beat."), (CHAR, "BOB"))
        resolved = resolve_continuations(elements)
        assert [e.id for e in resolved] == [e.id for e in elements]
