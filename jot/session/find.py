"""Incremental literal-substring search over the active buffer.

Matches are ``(row, column)`` pairs in row-major, left-to-right order;
occurrences on a line do not overlap. Navigation wraps in both directions.
"""

from __future__ import annotations

from .state import Session


def find_matches(lines: list[str], query: str) -> list[tuple[int, int]]:
    """Return every non-overlapping occurrence of ``query`` in ``lines``."""
    if not query:
        return []
    matches: list[tuple[int, int]] = []
    for row, line in enumerate(lines):
        cursor = 0
        while True:
            column = line.find(query, cursor)
            if column < 0:
                break
            matches.append((row, column))
            cursor = column + len(query)
    return matches


def jump_to_current_match(session: Session) -> bool:
    """Move the active buffer's cursor onto the selected match."""
    page = session.active_page()
    if page is None or not session.find_matches:
        return False
    row, column = session.find_matches[session.current_match_index]
    page.move_cursor_to(row, column)
    session.reveal_cursor = True
    return True


def recompute_matches(session: Session) -> None:
    """Re-index matches for the current query and jump to the first one.

    An empty query clears the matches and leaves the cursor where it is.
    """
    page = session.active_page()
    session.current_match_index = 0
    if page is None or not session.find_query:
        session.find_matches = []
        return
    session.find_matches = find_matches(page.all_lines(), session.find_query)
    if not session.find_matches:
        session.status_message = f'No matches for "{session.find_query}"'
        return
    jump_to_current_match(session)


def append_to_query(session: Session, text: str) -> None:
    session.find_navigation_active = False
    session.find_query += text
    recompute_matches(session)


def backspace_query(session: Session) -> None:
    session.find_navigation_active = False
    session.find_query = session.find_query[:-1]
    recompute_matches(session)


def commit_query(session: Session) -> None:
    """Enter: switch to n/N navigation and re-jump to the current match."""
    session.find_navigation_active = True
    if not session.find_matches and session.find_query:
        session.status_message = f'No matches for "{session.find_query}"'
    jump_to_current_match(session)


def step_match(session: Session, direction: int) -> bool:
    """Select the next (``1``) or previous (``-1``) match, wrapping around."""
    if not session.find_matches:
        return False
    count = len(session.find_matches)
    session.current_match_index = (session.current_match_index + direction) % count
    return jump_to_current_match(session)


__all__ = [
    "append_to_query",
    "backspace_query",
    "commit_query",
    "find_matches",
    "jump_to_current_match",
    "recompute_matches",
    "step_match",
]
