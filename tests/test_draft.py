"""
Property-based tests for the draft/ready title rule.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from gitlab_mr.draft import DRAFT_MARKER, draft_title, is_draft_title, toggled_title

title_strategy = st.text(max_size=80)
plain_title_strategy = title_strategy.filter(lambda t: not t.lstrip().startswith(DRAFT_MARKER))


@given(title=plain_title_strategy)
@settings(max_examples=200)
def test_marking_draft_prepends_marker(title: str) -> None:
    assert toggled_title(title, draft=True) == DRAFT_MARKER + title


@given(title=plain_title_strategy)
@settings(max_examples=200)
def test_marking_draft_twice_is_a_no_op(title: str) -> None:
    first = toggled_title(title, draft=True)

    assert first is not None
    assert toggled_title(first, draft=True) is None


@given(title=plain_title_strategy)
@settings(max_examples=100)
def test_ready_title_stays_ready(title: str) -> None:
    assert toggled_title(title, draft=False) is None


@given(title=title_strategy)
@settings(max_examples=100)
def test_draft_title_stays_draft(title: str) -> None:
    assert toggled_title(DRAFT_MARKER + title, draft=True) is None


@given(title=title_strategy)
@settings(max_examples=100)
def test_ready_removes_single_marker(title: str) -> None:
    result = toggled_title(DRAFT_MARKER + title, draft=False)

    assert result == (DRAFT_MARKER + title).strip()[len(DRAFT_MARKER):]


def test_ready_removes_prefix_exactly() -> None:
    assert toggled_title("Draft: fix bug", draft=False) == "fix bug"


def test_ready_removes_only_one_marker() -> None:
    assert toggled_title("Draft: Draft: fix bug", draft=False) == "Draft: fix bug"


def test_comparison_ignores_surrounding_whitespace() -> None:
    assert is_draft_title("  Draft: fix bug ")
    assert toggled_title("  Draft: fix bug ", draft=False) == "fix bug"


def test_marker_is_case_sensitive() -> None:
    assert not is_draft_title("draft: fix bug")
    assert toggled_title("draft: fix bug", draft=True) == "Draft: draft: fix bug"


def test_new_title() -> None:
    assert draft_title("Add feature", draft=True) == "Draft: Add feature"
    assert draft_title("Add feature", draft=False) == "Add feature"
