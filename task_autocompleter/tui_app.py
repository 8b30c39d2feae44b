# tui_app.py - Task Autocompleter TUI Application
# -------------------------------------------------------
# Full-screen task list with live word suggestions.
# Features:
#  - Suggestions for the word being typed (shown from 2 chars, hidden when empty)
#  - Accept the top suggestion with TAB, or pick one from the dropdown
#  - ENTER adds the task; its words are learned before it is saved
#  - Toggle / remove tasks from the table
#  - Latency readout for the last lookup
# -------------------------------------------------------

from __future__ import annotations
import time

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import DataTable, Footer, Header, Input, OptionList, Static

from task_autocompleter.context.composer import InputComposer
from task_autocompleter.core.engine import AutocompleteEngine
from task_autocompleter.utils.config_manager import Config
from task_autocompleter.utils.logger_utils import configure_logging, log
from task_autocompleter.utils.task_store import load_task_list, save_tasks


class SuggestionList(OptionList):
    """Dropdown under the input box; hidden whenever there is nothing to offer."""

    def show_words(self, words):
        self.clear_options()
        if words:
            self.add_options(words)
            self.highlighted = 0
        self.display = bool(words)


class TaskTable(DataTable):
    """One row per task: done mark + text (struck through when complete)."""

    def show_tasks(self, tasks):
        row = self.cursor_row
        self.clear()
        for task in tasks:
            mark = Text("✔", style="green") if task.complete else Text("")
            style = "dim strike" if task.complete else ""
            self.add_row(mark, Text(task.text, style=style))
        if len(tasks):
            self.move_cursor(row=min(max(row, 0), len(tasks) - 1))


class TypingLatency(Static):
    """Bottom-left readout showing how long the last lookup took."""

    def set_latency(self, seconds: float):
        self.update(Text(f"Lookup: {seconds * 1000:.2f}ms", style="dim"))


# Main Application -----------------------------------------------------------------
class TaskApp(App):
    """
    The Textual app.
    Architecture:
     - Input events -> InputComposer -> engine
     - reactive suggestions -> dropdown
     - TaskList mutations -> task store -> table refresh
    """

    CSS = """
    #main { height: 1fr; padding: 0 1; }
    #task_input { margin-bottom: 0; }
    #suggestions { height: auto; max-height: 7; border: round $accent; }
    #tasks { height: 1fr; margin-top: 1; }
    #bottom { height: 1; padding: 0 1; }
    #latency { width: 22; }
    """

    TITLE = "Task Autocompleter"

    # keyboard shortcuts for user
    BINDINGS = [
        Binding("tab", "accept_top", "Accept suggestion", priority=True),
        Binding("escape", "hide_suggestions", "Hide suggestions", show=False),
        ("ctrl+t", "toggle_task", "Toggle done"),
        ("delete", "remove_task", "Remove"),
        ("ctrl+s", "save", "Save"),
    ]

    # reactive values that refresh widgets when changed
    suggestions = reactive(list, init=False, always_update=True)
    latency = reactive(0.0, init=False)

    def __init__(self, cfg: Config = None):
        super().__init__()
        self.cfg = cfg if cfg is not None else Config()
        # console output would draw over the screen
        configure_logging(echo=False)
        self.tasks = load_task_list(self.cfg["tasks_path"])
        self.engine = AutocompleteEngine.from_records(self.tasks.texts())
        self.composer = InputComposer(
            self.engine,
            max_suggestions=self.cfg["max_suggestions"],
            min_query_length=self.cfg["min_query_length"],
        )

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="main"):
            yield Input(placeholder="New task… (Enter to add, Tab to complete)", id="task_input")
            yield SuggestionList(id="suggestions")
            yield TaskTable(id="tasks", cursor_type="row")
        with Horizontal(id="bottom"):
            yield TypingLatency(id="latency")
            yield Static(id="status")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one(TaskTable)
        table.add_columns("Done", "Task")
        self.query_one(SuggestionList).display = False
        self.refresh_tasks()
        self.query_one(Input).focus()
        log.info(f"[TaskApp] started with {len(self.tasks)} tasks, {len(self.engine)} words")

    # Typing: input changed so update suggestions -------------------------------
    def on_input_changed(self, event: Input.Changed) -> None:
        start = time.perf_counter()
        words = list(self.composer.on_change(event.value))
        self.latency = time.perf_counter() - start
        self.suggestions = words

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """ENTER: learn from the text, then store it as a task."""
        text = self.composer.commit(event.value)
        self.suggestions = []
        if text is None:
            return
        self.tasks.add(text)
        if self._save():
            self.set_status(f"Added: {text}", "green")
        event.input.value = ""
        self.refresh_tasks()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.accept_word(str(event.option.prompt))

    # Reactive state (watcher functions) ---------------------------------------
    def watch_suggestions(self, suggestions):
        self.query_one(SuggestionList).show_words(suggestions)

    def watch_latency(self, latency):
        self.query_one(TypingLatency).set_latency(latency)

    # Actions ----------------------------------------------------------------------
    def action_accept_top(self) -> None:
        """TAB = accept the highlighted (default: top) suggestion, else move focus."""
        if not self.suggestions:
            self.action_focus_next()
            return
        dropdown = self.query_one(SuggestionList)
        index = dropdown.highlighted or 0
        self.accept_word(self.suggestions[min(index, len(self.suggestions) - 1)])

    def action_hide_suggestions(self) -> None:
        self.composer.suggestions = []
        self.suggestions = []

    def action_toggle_task(self) -> None:
        if not len(self.tasks):
            return
        task = self.tasks.toggle(self.query_one(TaskTable).cursor_row)
        self._save()
        self.refresh_tasks()
        self.set_status(f"{'Done' if task.complete else 'Reopened'}: {task.text}", "cyan")

    def action_remove_task(self) -> None:
        if not len(self.tasks):
            return
        task = self.tasks.remove(self.query_one(TaskTable).cursor_row)
        self._save()
        self.refresh_tasks()
        self.set_status(f"Removed: {task.text}", "yellow")

    def action_save(self) -> None:
        if self._save():
            self.set_status("Saved", "green")

    # Helpers ---------------------------------------------------------------------
    def accept_word(self, word: str) -> None:
        """Replace the word being typed with `word` and close the dropdown."""
        inp = self.query_one(Input)
        inp.value = self.composer.select(inp.value, word)
        inp.cursor_position = len(inp.value)
        self.suggestions = []
        inp.focus()

    def refresh_tasks(self) -> None:
        self.query_one(TaskTable).show_tasks(self.tasks)
        self.sub_title = f"{self.tasks.pending()} pending / {len(self.tasks)} total"

    def set_status(self, msg: str, style: str = "") -> None:
        self.query_one("#status", Static).update(Text(msg, style=style))

    def _save(self) -> bool:
        try:
            save_tasks(self.cfg["tasks_path"], self.tasks)
        except OSError as e:
            self.set_status(f"Save failed: {e}", "red")
            return False
        return True


if __name__ == "__main__":
    TaskApp().run()
