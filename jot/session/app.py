"""The editor's single input entry point.

``App.handle_event`` receives one key token at a time (see ``jot.input``) and
routes it by ``(active_pane, mode)``. Modal dialogs (delete confirmation and
the new-file/new-directory/rename prompts) take every key before pane routing
and ignore the mouse. Everything else is dispatched through per-mode key
tables; printable characters fall through to the mode's text handler.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from pathlib import Path

from ..editor import Page
from ..file_tree_model import build_directory_view
from ..input import KeyComboBinding, KeyComboRegistry
from ..layout import ScreenLayout, build_layout
from ..logging_config import get_logger
from .commands import cancel_save_prompt, execute_command, save_active, submit_save_prompt
from .find import append_to_query, backspace_query, commit_query, step_match
from .modes import (
    PANE_EDITOR,
    PANE_FILE_TREE,
    CommandMode,
    ConfirmDeleteMode,
    EditMode,
    FileTreeMode,
    FindMode,
    is_modal_dialog,
    is_save_prompt,
)
from .mouse import DOUBLE_CLICK_SECONDS, MouseRouter, is_mouse_token
from .state import Session
from .tree_commands import (
    cancel_delete,
    cancel_tree_prompt,
    delete_path,
    execute_tree_command,
    go_to_parent,
    submit_tree_prompt,
)

logger = get_logger("app")

TAB_SPACES = "    "


def is_text_key(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


class App:
    """Owns a ``Session`` and mutates it in response to input events."""

    def __init__(
        self,
        session: Session,
        *,
        tree_pane_percent: float | None = None,
        double_click_seconds: float = DOUBLE_CLICK_SECONDS,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self.session = session
        self.tree_pane_percent = tree_pane_percent
        self._page_rows = 1
        self._mouse = MouseRouter(
            session,
            double_click_seconds=double_click_seconds,
            monotonic=monotonic,
        )
        self._movement_keys = self._build_movement_keys()
        self._edit_keys = self._build_edit_keys()
        self._command_keys = self._build_command_keys()
        self._find_keys = self._build_find_keys()
        self._tree_keys = self._build_tree_keys()
        self._save_prompt_keys = self._build_prompt_keys(submit_save_prompt, cancel_save_prompt)
        self._tree_prompt_keys = self._build_prompt_keys(submit_tree_prompt, cancel_tree_prompt)

    @classmethod
    def start(
        cls,
        directory: Path,
        file_path: Path | None = None,
        *,
        show_hidden: bool = True,
        tree_pane_percent: float | None = None,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> App:
        """Build the startup session for ``directory`` and an optional file.

        With a file the session opens one tab focused for editing; without one
        it starts in the directory pane with no tabs. Raises ``OSError`` when
        ``directory`` cannot be listed.
        """
        session = Session(directory_view=build_directory_view(directory, show_hidden=show_hidden))
        if file_path is not None:
            session.open_tab(Page.from_file(file_path))
            session.active_pane = PANE_EDITOR
            session.mode = EditMode()
        return cls(session, tree_pane_percent=tree_pane_percent, monotonic=monotonic)

    def layout(self, columns: int, rows: int) -> ScreenLayout:
        return build_layout(columns, rows, self.tree_pane_percent)

    # Dispatch

    def handle_event(self, key: str, columns: int = 80, rows: int = 24) -> None:
        """Apply one input event to the session.

        The status message is cleared first, so it only ever describes the
        latest event. ``columns``/``rows`` are the terminal size and matter
        only for mouse geometry and page-sized moves.
        """
        if not key:
            return
        session = self.session
        session.status_message = ""
        if key == "CTRL_C":
            return

        mode = session.mode
        if is_modal_dialog(mode):
            self._handle_modal_dialog(key)
            return

        layout = self.layout(columns, rows)
        self._page_rows = layout.text_rows
        if key == "CTRL_S":
            save_active(session, None)
            return
        if key == "CTRL_Q":
            logger.info("quit requested")
            session.should_quit = True
            return
        if is_mouse_token(key):
            self._mouse.handle(key, layout)
            return

        if is_save_prompt(mode):
            self._dispatch(self._save_prompt_keys, key, self._type_into_buffer)
        elif session.active_pane == PANE_FILE_TREE or isinstance(mode, FileTreeMode):
            self._dispatch(self._tree_keys, key, self._type_into_buffer)
        elif isinstance(mode, EditMode):
            self._dispatch(self._edit_keys, key, self._type_into_page)
        elif isinstance(mode, CommandMode):
            self._dispatch(self._command_keys, key, self._type_into_buffer)
        elif isinstance(mode, FindMode):
            self._dispatch(self._find_keys, key, self._type_into_find)

    def _dispatch(
        self,
        registry: KeyComboRegistry,
        key: str,
        on_text: Callable[[str], None],
    ) -> None:
        if registry.dispatch(key) is not None:
            return
        if is_text_key(key):
            on_text(key)

    def _handle_modal_dialog(self, key: str) -> None:
        session = self.session
        mode = session.mode
        if isinstance(mode, ConfirmDeleteMode):
            if key in {"y", "Y"}:
                delete_path(session, mode.path)
            elif key in {"n", "N", "ESC"}:
                cancel_delete(session)
            return
        if is_mouse_token(key):
            return
        self._dispatch(self._tree_prompt_keys, key, self._type_into_buffer)

    # Key tables

    def _build_movement_keys(self) -> KeyComboRegistry:
        def page_action(action: Callable[[Page], None]) -> Callable[[], bool]:
            def run() -> bool:
                page = self.session.active_page()
                if page is None:
                    return True
                action(page)
                self.session.reveal_cursor = True
                return True

            return run

        def move_rows(page: Page, delta: int) -> None:
            page.move_cursor_to(max(0, page.cursor_row() + delta), page.cursor_column())

        return KeyComboRegistry().register_bindings(
            KeyComboBinding(("UP",), page_action(Page.move_up)),
            KeyComboBinding(("DOWN",), page_action(Page.move_down)),
            KeyComboBinding(("LEFT",), page_action(Page.move_left)),
            KeyComboBinding(("RIGHT",), page_action(Page.move_right)),
            KeyComboBinding(("HOME",), page_action(Page.move_line_start)),
            KeyComboBinding(("END",), page_action(Page.move_line_end)),
            KeyComboBinding(("PAGE_UP",), page_action(lambda page: move_rows(page, -self._page_rows))),
            KeyComboBinding(("PAGE_DOWN",), page_action(lambda page: move_rows(page, self._page_rows))),
        )

    def _with_movement(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        registry = KeyComboRegistry()
        for key in ("UP", "DOWN", "LEFT", "RIGHT", "HOME", "END", "PAGE_UP", "PAGE_DOWN"):
            registry.register_binding(KeyComboBinding((key,), lambda key=key: self._movement_keys.dispatch(key)))
        return registry.register_bindings(*bindings)

    def _build_edit_keys(self) -> KeyComboRegistry:
        session = self.session

        def edit(action: Callable[[Page], None]) -> Callable[[], None]:
            def run() -> None:
                page = session.active_page()
                if page is None:
                    return
                action(page)
                session.reveal_cursor = True

            return run

        def insert_tab(page: Page) -> None:
            for ch in TAB_SPACES:
                page.insert(ch)

        return self._with_movement(
            KeyComboBinding(("ESC",), session.focus_command),
            KeyComboBinding(("ENTER",), edit(Page.insert_newline)),
            KeyComboBinding(("TAB",), edit(insert_tab)),
            KeyComboBinding(("BACKSPACE",), edit(Page.delete)),
            KeyComboBinding(("DELETE",), edit(Page.delete_forward)),
        )

    def _build_command_keys(self) -> KeyComboRegistry:
        session = self.session

        def leave_command_line() -> None:
            if session.tabs:
                session.focus_editor()

        return self._with_movement(
            KeyComboBinding(("ESC",), leave_command_line),
            KeyComboBinding(("TAB",), session.focus_file_tree),
            KeyComboBinding(("ENTER",), lambda: execute_command(session)),
            KeyComboBinding(("BACKSPACE",), self._backspace_buffer),
        )

    def _build_find_keys(self) -> KeyComboRegistry:
        session = self.session

        def leave_find() -> None:
            session.clear_find()
            session.focus_command()

        return KeyComboRegistry().register_bindings(
            KeyComboBinding(("ESC",), leave_find),
            KeyComboBinding(("ENTER",), lambda: commit_query(session)),
            KeyComboBinding(("BACKSPACE",), lambda: backspace_query(session)),
        )

    def _build_tree_keys(self) -> KeyComboRegistry:
        session = self.session
        view = session.directory_view
        return KeyComboRegistry().register_bindings(
            KeyComboBinding(("ESC",), session.focus_command),
            KeyComboBinding(("TAB",), session.focus_editor),
            KeyComboBinding(("ENTER",), lambda: execute_tree_command(session)),
            KeyComboBinding(("BACKSPACE",), self._backspace_buffer),
            KeyComboBinding(("UP",), view.move_up),
            KeyComboBinding(("DOWN",), view.move_down),
            KeyComboBinding(("HOME",), view.move_first),
            KeyComboBinding(("END",), view.move_last),
            KeyComboBinding(("LEFT",), lambda: go_to_parent(session)),
        )

    def _build_prompt_keys(
        self,
        submit: Callable[[Session], None],
        cancel: Callable[[Session], None],
    ) -> KeyComboRegistry:
        session = self.session
        return KeyComboRegistry().register_bindings(
            KeyComboBinding(("ESC",), lambda: cancel(session)),
            KeyComboBinding(("ENTER",), lambda: submit(session)),
            KeyComboBinding(("BACKSPACE",), self._backspace_buffer),
        )

    # Text input

    def _backspace_buffer(self) -> None:
        self.session.command_buffer = self.session.command_buffer[:-1]

    def _type_into_buffer(self, key: str) -> None:
        self.session.command_buffer += key

    def _type_into_page(self, key: str) -> None:
        page = self.session.active_page()
        if page is None:
            return
        page.insert(key)
        self.session.reveal_cursor = True

    def _type_into_find(self, key: str) -> None:
        session = self.session
        if session.find_navigation_active and key == "n":
            step_match(session, 1)
        elif session.find_navigation_active and key == "N":
            step_match(session, -1)
        else:
            append_to_query(session, key)


__all__ = ["App", "is_text_key"]
