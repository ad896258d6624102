"""Tests for element type inference."""

import pytest

from screenwrite.models import ElementType
from screenwrite.screenplay.classifier import (
    classify,
    is_character_cue,
    is_parenthetical,
    is_scene_heading,
    is_transition,
)


class TestClassify:
    """Test the classification rules in priority order."""

    @pytest.mark.parametrize(
        "text",
        [
            "INT. KITCHEN - DAY",
            "EXT. PARK - NIGHT",
            "int. kitchen - day",
            "INT/EXT. CAR - MOVING",
            "I/E GARAGE",
            "EXT STREET",
        ],
    )
    def test_scene_headings(self, text):
        """Test INT/EXT prefixes followed by a separator."""
        assert classify(text) is ElementType.SCENE_HEADING

    def test_scene_heading_needs_separator(self):
        """Test that words merely starting with INT/EXT are not headings."""
        assert classify("EXTRA") is ElementType.CHARACTER
        assert classify("Interior design is hard.") is ElementType.ACTION

    @pytest.mark.parametrize("text", ["CUT TO:", "SMASH CUT TO:", "DISSOLVE TO:"])
    def test_transitions(self, text):
        """Test all-caps lines ending in TO:."""
        assert classify(text) is ElementType.TRANSITION

    def test_transition_is_case_sensitive(self):
        """Test that lowercase transitions fall through to action."""
        assert classify("cut to:") is ElementType.ACTION

    @pytest.mark.parametrize(
        "text",
        ["BOB", "MARY JANE", "O'BRIEN", "BOB (CONT'D)", "BOB (cont'd)"],
    )
    def test_character_cues(self, text):
        """Test all-caps names with an optional continuation suffix."""
        assert classify(text) is ElementType.CHARACTER

    def test_single_letter_is_not_a_cue(self):
        """Test that a cue needs at least two characters."""
        assert classify("I") is ElementType.ACTION

    def test_no_cue_directly_after_cue(self):
        """Test that caps text under a cue is treated as dialogue."""
        assert classify("NO", ElementType.CHARACTER) is ElementType.DIALOGUE

    def test_cue_after_dialogue(self):
        """Test that a new cue can follow dialogue."""
        assert classify("ALICE", ElementType.DIALOGUE) is ElementType.CHARACTER

    def test_parenthetical(self):
        """Test fully wrapped text."""
        assert classify("(beat)") is ElementType.PARENTHETICAL
        assert classify("(whispering)", ElementType.CHARACTER) is (
            ElementType.PARENTHETICAL
        )

    @pytest.mark.parametrize(
        "previous",
        [ElementType.CHARACTER, ElementType.PARENTHETICAL, ElementType.DIALOGUE],
    )
    def test_dialogue_context(self, previous):
        """Test that plain text inside a speech is dialogue."""
        assert classify("Hello there.", previous) is ElementType.DIALOGUE

    @pytest.mark.parametrize(
        "previous",
        [None, ElementType.ACTION, ElementType.SCENE_HEADING, ElementType.NOTE],
    )
    def test_action_fallback(self, previous):
        """Test that unmatched text outside a speech is action."""
        assert classify("Bob enters.", previous) is ElementType.ACTION

    def test_previous_type_as_string(self):
        """Test that the previous type may be given by name."""
        assert classify("Hi.", "character") is ElementType.DIALOGUE
        assert classify("Hi.", "not-a-type") is ElementType.ACTION

    def test_empty_and_none(self):
        """Test that missing text is action."""
        assert classify("") is ElementType.ACTION
        assert classify(None) is ElementType.ACTION
        assert classify("", ElementType.CHARACTER) is ElementType.DIALOGUE

    def test_scene_heading_wins_over_dialogue_context(self):
        """Test that a heading typed under a cue is still a heading."""
        assert classify("INT. HALL", ElementType.CHARACTER) is (
            ElementType.SCENE_HEADING
        )


class TestPredicates:
    """Test the individual pattern checks."""

    def test_is_scene_heading(self):
        """Test heading detection."""
        assert is_scene_heading("INT. OFFICE")
        assert not is_scene_heading("INTO THE WOODS")

    def test_is_transition(self):
        """Test transition detection."""
        assert is_transition("CUT TO:")
        assert not is_transition("CUT TO")

    def test_is_character_cue(self):
        """Test cue detection."""
        assert is_character_cue("BOB (CONT'D)")
        assert not is_character_cue("Bob")
        assert not is_character_cue("BOB (V.O.)")

    def test_is_parenthetical(self):
        """Test parenthetical detection."""
        assert is_parenthetical("(quietly)")
        assert not is_parenthetical("()")
        assert not is_parenthetical("(quietly")
