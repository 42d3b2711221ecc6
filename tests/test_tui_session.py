import pytest

pytest.importorskip("curses")

from apps.tui.editor import EMPTY_PATTERN, INCORRECT_SLOTS, EditorSession, list_rows  # noqa: E402
from packages.engine import CandidateFilter  # noqa: E402

WORDS = ["aaaaa", "bbbbb", "ccccc", "bbbbc", "bbcdb"]


@pytest.fixture
def session():
    return EditorSession(CandidateFilter(WORDS))


def test_defaults(session):
    assert session.exclude == ""
    assert session.include == EMPTY_PATTERN == "....."
    assert session.incorrect == ["....."] * INCORRECT_SLOTS == ["....."] * 8
    assert session.words.get_word_list() == WORDS


def test_edits_do_not_filter_until_update(session):
    session.set_exclude("a")
    session.set_include("bb...")
    session.set_incorrect(0, "....b")
    assert session.words.get_word_list() == WORDS

    assert session.update() == []
    assert session.words.get_word_list() == ["bbbbc"]
    assert session.message == "1 possible word(s)"
    assert session.error is False


def test_update_reapplies_from_full_list(session):
    session.set_exclude("a")
    session.update()
    assert "aaaaa" not in session.words.get_word_list()

    # loosening a constraint brings words back
    session.set_exclude("")
    session.update()
    assert session.words.get_word_list() == WORDS


def test_incorrect_slots_apply_in_order(session):
    session.set_incorrect(3, "....b")
    session.set_incorrect(7, "c....")
    session.update()
    assert session.words.get_word_list() == ["bbbbc"]


def test_bad_patterns_reported_and_skipped(session):
    session.set_include("bb")
    session.set_incorrect(1, "...")
    session.set_exclude("a")
    errors = session.update()
    assert [e.split(":")[0] for e in errors] == ["Include", "Incorrect 2"]
    assert session.error is True
    assert session.message == errors[0]
    assert session.words.get_word_list() == ["bbbbb", "ccccc", "bbbbc", "bbcdb"]


def test_edits_truncate_to_word_length(session):
    session.set_include("abcdefg")
    session.set_incorrect(0, "xyzxyzxyz")
    assert session.include == "abcde"
    assert session.incorrect[0] == "xyzxy"


def test_set_incorrect_rejects_bad_slot(session):
    with pytest.raises(IndexError):
        session.set_incorrect(INCORRECT_SLOTS, ".....")


def test_reset_restores_everything(session):
    session.set_exclude("a")
    session.set_include("bb...")
    session.set_incorrect(2, "....b")
    session.update()
    session.scroll = 2

    session.reset()
    assert session.exclude == ""
    assert session.include == "....."
    assert session.incorrect == ["....."] * 8
    assert session.scroll == 0
    assert session.words.get_word_list() == WORDS


def test_scroll_is_clamped():
    s = EditorSession(CandidateFilter([f"w{i:04d}" for i in range(30)]))
    s.scroll_by(-5, page=10)
    assert s.scroll == 0
    s.scroll_by(10, page=10)
    assert s.scroll == 10
    s.scroll_by(100, page=10)
    assert s.scroll == 20
    s.update()
    assert s.scroll == 0


@pytest.mark.parametrize("height,rows", [(24, 19), (6, 1), (5, 1), (2, 1), (0, 1)])
def test_list_rows_never_below_one(height, rows):
    assert list_rows(height) == rows


def test_paging_on_a_tiny_screen_still_moves():
    s = EditorSession(CandidateFilter(WORDS))
    page = list_rows(4)
    s.scroll_by(page, page)
    assert s.scroll == 1
    s.scroll_by(-page, page)
    assert s.scroll == 0
