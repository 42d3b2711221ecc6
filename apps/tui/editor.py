# apps/tui/editor.py
"""
Interactive Wordle word editor (curses).

Left column: the Exclude letters, the Include pattern (correct letters) and
eight Incorrect patterns, one per earlier guess (eight leaves room for
Dordle). Right pane: the scrollable list of possible words.

Keys:
  e=Exclude  i=Include  n=Incorrect  u=Update  r=Reset  q=Quit
  PgUp/PgDn/Up/Down scroll the word list

Edits only change the fields; press u to re-run the filters from the full
list. EditorSession holds all of that state and has no curses dependency.

Usage:
    python -m apps.tui.editor wordle.list --log editor.log -v
"""

from __future__ import annotations

import argparse
import curses
import logging
import sys
from typing import List, Optional

from apps.cli.filter import (
    DEFAULT_WORDLIST, add_logging_args, close_logging, configure_logging, load_filter,
)
from packages.engine import WILDCARD, WORD_LENGTH, CandidateFilter

INCORRECT_SLOTS = 8
EMPTY_PATTERN = WILDCARD * WORD_LENGTH
FIELD_LABELS = {"correct": "Include"}

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Session state (no curses dependency)
# ---------------------------------------------------------------------------
class EditorSession:
    """Field values, the engine they drive, and the word-list scroll offset."""

    def __init__(self, words: CandidateFilter):
        self.words = words
        self.exclude = ""
        self.include = EMPTY_PATTERN
        self.incorrect: List[str] = [EMPTY_PATTERN] * INCORRECT_SLOTS
        self.scroll = 0
        self.message = ""
        self.error = False

    def set_exclude(self, text: str) -> None:
        self.exclude = text

    def set_include(self, text: str) -> None:
        self.include = text[:WORD_LENGTH]

    def set_incorrect(self, slot: int, text: str) -> None:
        """`slot` is 0-based."""
        if not 0 <= slot < INCORRECT_SLOTS:
            raise IndexError(f"incorrect slot {slot} out of range 0..{INCORRECT_SLOTS - 1}")
        self.incorrect[slot] = text[:WORD_LENGTH]

    def update(self) -> List[str]:
        """
        Re-run every filter from the full list: exclude, include, then the
        incorrect slots in order. Bad patterns are skipped and returned as
        messages (also shown in the status line).
        """
        self.words.reset()
        skipped = self.words.apply(exclude=self.exclude, correct=self.include,
                                   incorrect=self.incorrect, skip_errors=True)
        errors = [f"{FIELD_LABELS.get(field, field.capitalize())}: {e}" for field, e in skipped]

        for msg in errors:
            log.error(msg)
        self.scroll = 0
        self.error = bool(errors)
        self.message = errors[0] if errors else f"{len(self.words)} possible word(s)"
        return errors

    def reset(self) -> None:
        """Back to the full list and empty fields."""
        self.words.reset()
        self.exclude = ""
        self.include = EMPTY_PATTERN
        self.incorrect = [EMPTY_PATTERN] * INCORRECT_SLOTS
        self.scroll = 0
        self.error = False
        self.message = "Reset"

    def scroll_by(self, delta: int, page: int) -> None:
        """Move the word-list view; `page` is the number of visible rows."""
        last = max(0, len(self.words) - max(1, page))
        self.scroll = min(max(0, self.scroll + delta), last)


# ---------------------------------------------------------------------------
# Drawing helpers
# ---------------------------------------------------------------------------
COLOR_TITLE = 1
COLOR_FIELD = 2
COLOR_STATUS = 3
COLOR_ERROR = 4

KEY_BAR = " e=Exclude  i=Include  n=Incorrect  u=Update  r=Reset  q=Quit  PgUp/PgDn=Scroll "
LEFT_WIDTH = 22


def init_colors():
    """Initialize curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_TITLE, curses.COLOR_CYAN, -1)
    curses.init_pair(COLOR_FIELD, curses.COLOR_YELLOW, -1)
    curses.init_pair(COLOR_STATUS, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_ERROR, curses.COLOR_RED, -1)


def safe_addstr(win, y, x, text, attr=0):
    """addstr that silently ignores curses errors at screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def list_rows(height: int) -> int:
    """Words shown per page for a screen `height` rows tall (at least one)."""
    return max(1, height - 5)


def draw_fields(win, session: EditorSession):
    title = curses.color_pair(COLOR_TITLE) | curses.A_BOLD
    field = curses.color_pair(COLOR_FIELD) | curses.A_BOLD

    safe_addstr(win, 1, 1, "Exclude", title)
    safe_addstr(win, 2, 3, session.exclude or "-", field)
    safe_addstr(win, 4, 1, "Include", title)
    safe_addstr(win, 5, 3, session.include, field)
    safe_addstr(win, 7, 1, "Incorrect", title)
    for i, patt in enumerate(session.incorrect):
        safe_addstr(win, 8 + i, 3, f"{i + 1} {patt}", field)


def draw_words(win, session: EditorSession, height: int, width: int):
    x = LEFT_WIDTH + 2
    words = session.words.get_word_list()
    rows = list_rows(height)
    header = f"Possible ({len(words)})"
    safe_addstr(win, 1, x, header, curses.color_pair(COLOR_TITLE) | curses.A_BOLD)
    for row, w in enumerate(words[session.scroll:session.scroll + rows]):
        safe_addstr(win, 2 + row, x, w[:max(0, width - x - 1)])


def draw_status_bar(win, session: EditorSession, height: int, width: int):
    safe_addstr(win, height - 2, 0, KEY_BAR[:width - 1],
                curses.color_pair(COLOR_STATUS) | curses.A_BOLD)
    if session.message:
        attr = curses.color_pair(COLOR_ERROR if session.error else COLOR_STATUS)
        safe_addstr(win, height - 1, 1, session.message[:width - 2], attr)


def edit_line(stdscr, title: str, initial: str, max_len: Optional[int] = None) -> Optional[str]:
    """
    Pop-up single-line editor. Returns the new text on Enter, None on Esc.
    """
    height, width = stdscr.getmaxyx()
    box_w = max(len(title) + 4, (max_len or 20) + 4)
    win = curses.newwin(4, box_w, max(0, height // 2 - 2), max(0, (width - box_w) // 2))
    win.keypad(True)
    text = initial[:max_len] if max_len else initial
    curses.curs_set(1)
    try:
        while True:
            win.erase()
            win.box()
            safe_addstr(win, 0, 2, f" {title} ", curses.color_pair(COLOR_TITLE) | curses.A_BOLD)
            safe_addstr(win, 1, 2, text)
            safe_addstr(win, 2, 2, "Enter=Done Esc=Cancel"[:box_w - 3])
            win.move(1, min(2 + len(text), box_w - 2))
            win.refresh()
            ch = win.getch()
            if ch == 27:
                return None
            if ch in (curses.KEY_ENTER, 10, 13):
                return text
            if ch in (curses.KEY_BACKSPACE, 127, 8):
                text = text[:-1]
            elif 32 <= ch <= 126 and (max_len is None or len(text) < max_len):
                text += chr(ch)
    finally:
        curses.curs_set(0)
        del win
        stdscr.touchwin()


def pick_slot(stdscr) -> Optional[int]:
    """Ask for an incorrect slot 1..INCORRECT_SLOTS; returns it 0-based or None."""
    height, width = stdscr.getmaxyx()
    prompt = f" Incorrect slot (1-{INCORRECT_SLOTS}, Esc=Cancel) "
    safe_addstr(stdscr, height - 1, 0, " " * (width - 1))
    safe_addstr(stdscr, height - 1, 1, prompt[:width - 2],
                curses.color_pair(COLOR_TITLE) | curses.A_BOLD)
    stdscr.refresh()
    while True:
        ch = stdscr.getch()
        if ch == 27:
            return None
        if ord("1") <= ch < ord("1") + INCORRECT_SLOTS:
            return ch - ord("1")


# ---------------------------------------------------------------------------
# Main loop
# ---------------------------------------------------------------------------
def run(stdscr, session: EditorSession):
    """Main curses loop."""
    stdscr.clear()
    init_colors()
    curses.curs_set(0)
    stdscr.keypad(True)
    curses.set_escdelay(25)

    while True:
        height, width = stdscr.getmaxyx()
        stdscr.erase()
        draw_fields(stdscr, session)
        draw_words(stdscr, session, height, width)
        draw_status_bar(stdscr, session, height, width)
        stdscr.refresh()

        ch = stdscr.getch()
        page = list_rows(height)

        if ch in (ord("q"), ord("Q")):
            break
        elif ch == ord("e"):
            text = edit_line(stdscr, "Excluded Letters", session.exclude)
            if text is not None:
                session.set_exclude(text)
        elif ch == ord("i"):
            text = edit_line(stdscr, "Included Letters", session.include, WORD_LENGTH)
            if text is not None:
                session.set_include(text)
        elif ch == ord("n"):
            slot = pick_slot(stdscr)
            if slot is not None:
                text = edit_line(stdscr, f"Incorrect Letters {slot + 1}",
                                 session.incorrect[slot], WORD_LENGTH)
                if text is not None:
                    session.set_incorrect(slot, text)
        elif ch == ord("u"):
            session.update()
        elif ch == ord("r"):
            session.reset()
        elif ch == curses.KEY_PPAGE:
            session.scroll_by(-page, page)
        elif ch == curses.KEY_NPAGE:
            session.scroll_by(page, page)
        elif ch == curses.KEY_UP:
            session.scroll_by(-1, page)
        elif ch == curses.KEY_DOWN:
            session.scroll_by(1, page)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Interactive editor for possible Wordle words")
    ap.add_argument("filename", nargs="?", default=DEFAULT_WORDLIST,
                    help=f"file with the list of possible Wordle words (default: {DEFAULT_WORDLIST})")
    # Log lines would scribble over the screen; only log when asked to
    add_logging_args(ap, default_log=None)
    args = ap.parse_args(argv)
    configure_logging(args)

    try:
        words = load_filter(args.filename)
    except FileNotFoundError as e:
        close_logging(args)
        sys.stderr.write(f"word list not found: {e}\n")
        return 1

    session = EditorSession(words)
    session.message = f"{len(words)} possible word(s)"
    try:
        curses.wrapper(run, session)
    finally:
        close_logging(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
