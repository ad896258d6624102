"""Property-based tests using Hypothesis.

Random element sequences and free-typed text exercise the invariants the
editor relies on: normalization is idempotent, continuation is derived
state, and pagination never loses or reorders an element.
"""

import string

from hypothesis import given, settings
from hypothesis import strategies as st
from hypothesis.stateful import (
    Bundle,
    RuleBasedStateMachine,
    initialize,
    invariant,
    rule,
)

from screenwrite.document import (
    change_element_type,
    delete_element,
    find_duplicate_ids,
    insert_element_after,
    move_element,
    update_element_text,
)
from screenwrite.models import Element, ElementType, ScriptContent
from screenwrite.screenplay import (
    classify,
    estimate_lines,
    normalize,
    page_count,
    paginate,
    resolve_continuations,
)
from screenwrite.screenplay.paginator import SPEECH_TYPES

printable_text = st.text(alphabet=string.printable, max_size=120)
element_types = st.sampled_from(list(ElementType))


@st.composite
def elements(draw, page_breaks=True):
    """Draw one element with text that suits its type most of the time."""
    kind = draw(element_types)
    samples = {
        ElementType.SCENE_HEADING: ["INT. KITCHEN - DAY", "EXT. PARK - NIGHT"],
        ElementType.CHARACTER: ["BOB", "ALICE", "BOB (CONT'D)"],
        ElementType.PARENTHETICAL: ["(beat)", "(quietly)"],
        ElementType.TRANSITION: ["CUT TO:"],
    }
    text = draw(
        st.one_of(st.sampled_from(samples.get(kind, ["Hello."])), printable_text)
    )
    page_break = draw(st.booleans()) if page_breaks else False
    return Element(type=kind, text=text, page_break=page_break)


element_lists = st.lists(elements(), max_size=40)
unbroken_element_lists = st.lists(elements(page_breaks=False), max_size=40)


class TestPropertyBasedFormatting:
    """Properties of classification and normalization."""

    @given(kind=element_types, text=printable_text)
    def test_normalize_idempotent(self, kind, text):
        """Normalizing twice is the same as normalizing once."""
        once = normalize(kind, text)
        assert normalize(kind, once) == once

    @given(kind=element_types, text=printable_text)
    def test_normalize_trims(self, kind, text):
        """Normalized text never keeps surrounding whitespace."""
        assert normalize(kind, text) == normalize(kind, text).strip()

    @given(text=printable_text)
    def test_parenthetical_wrapped(self, text):
        """Parentheticals always end up wrapped in parentheses."""
        result = normalize(ElementType.PARENTHETICAL, text)
        assert result.startswith("(")
        assert result.endswith(")")

    @given(text=printable_text, previous=st.none() | element_types)
    def test_classify_deterministic(self, text, previous):
        """The same input always yields the same type."""
        assert classify(text, previous) == classify(text, previous)
        assert isinstance(classify(text, previous), ElementType)

    @given(
        prefix=st.sampled_from(["INT.", "EXT.", "INT/EXT.", "I/E", "int."]),
        rest=printable_text,
        previous=st.none() | element_types,
    )
    def test_scene_heading_wins(self, prefix, rest, previous):
        """A heading prefix beats every other rule."""
        assert classify(f"{prefix} {rest}", previous) is ElementType.SCENE_HEADING

    @given(text=printable_text, kind=element_types)
    def test_estimate_lines_positive(self, text, kind):
        """Every element takes at least one line per explicit line break."""
        lines = estimate_lines(text, kind)
        assert lines >= 1
        assert lines >= text.replace("\r\n", "\n").count("\n") + 1


class TestPropertyBasedContinuation:
    """Properties of derived (CONT'D) suffixes."""

    @given(items=element_lists)
    def test_resolve_idempotent(self, items):
        """Resolving a resolved sequence changes nothing."""
        once = resolve_continuations(items)
        twice = resolve_continuations(once)
        assert [e.text for e in twice] == [e.text for e in once]

    @given(items=element_lists)
    def test_only_cues_change(self, items):
        """Resolution only touches character cues and keeps order."""
        resolved = resolve_continuations(items)
        assert [e.id for e in resolved] == [e.id for e in items]
        for before, after in zip(items, resolved, strict=True):
            if before.type is not ElementType.CHARACTER:
                assert after is before


class TestPropertyBasedPagination:
    """Properties of page-break placement."""

    @given(items=element_lists, lines_per_page=st.integers(1, 80))
    def test_every_element_once_in_order(self, items, lines_per_page):
        """Flattening the pages gives back the input sequence."""
        pages = paginate(items, lines_per_page)
        assert [e.id for page in pages for e in page] == [e.id for e in items]
        assert page_count(items, lines_per_page) == len(pages) >= 1

    @given(items=element_lists, lines_per_page=st.integers(1, 80))
    def test_no_empty_pages(self, items, lines_per_page):
        """Only an empty screenplay has an empty page."""
        pages = paginate(items, lines_per_page)
        if items:
            assert all(pages)
        else:
            assert pages == [[]]

    @given(items=element_lists, lines_per_page=st.integers(1, 80))
    def test_forced_breaks_start_pages(self, items, lines_per_page):
        """An element flagged with a page break is first on its page."""
        pages = paginate(items, lines_per_page)
        firsts = {page[0].id for page in pages if page}
        for element in items[1:]:
            if element.page_break:
                assert element.id in firsts

    @given(items=unbroken_element_lists, lines_per_page=st.integers(1, 80))
    def test_cue_not_orphaned(self, items, lines_per_page):
        """A cue never ends a page while its speech starts the next one."""
        pages = paginate(items, lines_per_page)
        for page, following in zip(pages, pages[1:]):
            if page[-1].type is ElementType.CHARACTER:
                assert following[0].type not in SPEECH_TYPES

    @given(items=unbroken_element_lists, lines_per_page=st.integers(1, 80))
    def test_pages_fit_unless_unsplittable(self, items, lines_per_page):
        """A page only overflows when it starts with an unsplittable block."""
        for page in paginate(items, lines_per_page):
            total = sum(estimate_lines(e.text, e.type) for e in page)
            if total > lines_per_page and len(page) > 1:
                assert page[0].type is ElementType.CHARACTER


class DocumentEditingStateMachine(RuleBasedStateMachine):
    """Random edit sessions keep the document consistent."""

    ids = Bundle("ids")

    def __init__(self):
        super().__init__()
        self.content = ScriptContent()

    @initialize(target=ids)
    def start(self):
        result = insert_element_after(self.content, None, "scene-heading", "int. a")
        self.content = result.content
        return result.element.id

    @rule(target=ids, after=ids, kind=st.none() | element_types, text=printable_text)
    def insert(self, after, kind, text):
        result = insert_element_after(self.content, after, kind, text)
        if not result.success:
            return after
        self.content = result.content
        return result.element.id

    @rule(element_id=ids, text=printable_text)
    def edit(self, element_id, text):
        self._apply(update_element_text(self.content, element_id, text))

    @rule(element_id=ids, kind=element_types)
    def retype(self, element_id, kind):
        self._apply(change_element_type(self.content, element_id, kind))

    @rule(element_id=ids, index=st.integers(0, 40))
    def move(self, element_id, index):
        self._apply(move_element(self.content, element_id, index))

    @rule(element_id=ids)
    def delete(self, element_id):
        self._apply(delete_element(self.content, element_id))

    def _apply(self, result):
        if result.success:
            self.content = result.content
        else:
            assert result.content == self.content
            assert result.error

    @invariant()
    def ids_unique(self):
        assert find_duplicate_ids(self.content) == []

    @invariant()
    def continuations_resolved(self):
        elements = self.content.elements
        assert [e.text for e in resolve_continuations(elements)] == [
            e.text for e in elements
        ]

    @invariant()
    def text_normalized(self):
        for element in self.content.elements:
            if element.type is not ElementType.CHARACTER:
                assert normalize(element.type, element.text) == element.text


DocumentEditingStateMachine.TestCase.settings = settings(
    max_examples=30, stateful_step_count=25, deadline=None
)
TestDocumentEditing = DocumentEditingStateMachine.TestCase
