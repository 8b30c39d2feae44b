"""
cli.py - command line interface for the task list
Features:
- One-shot commands: add / list / done / remove / suggest / vocab / config / stats
- Interactive shell with word suggestions for the task being typed
- Launches the Textual TUI (default command)
- Uses Rich for tables and formatting
"""

import argparse
import shlex
import time
from typing import List, Optional

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from task_autocompleter.context.composer import InputComposer
from task_autocompleter.core.engine import AutocompleteEngine
from task_autocompleter.utils.config_manager import DEFAULT_CONFIG_PATH, Config
from task_autocompleter.utils.logger_utils import configure_logging, log
from task_autocompleter.utils.metrics_tracker import Metrics
from task_autocompleter.utils.task_store import load_task_list, save_tasks

# initialise console for rich output
console = Console()

HELP = (
    "Commands: /list /done <n> /rm <n> /suggest <word> /vocab [n] /stats /help /quit\n"
    "Anything else is added as a task."
)


class CLI:
    """Loads tasks, seeds the engine from them and serves the commands."""

    def __init__(self, cfg: Config):
        self.cfg = cfg
        self.metrics = Metrics(cfg["metrics_path"])
        self.tasks = load_task_list(cfg["tasks_path"])
        with log.time_block("seed_engine"):
            self.engine = AutocompleteEngine.from_records(self.tasks.texts())
        self.composer = InputComposer(
            self.engine,
            max_suggestions=cfg["max_suggestions"],
            min_query_length=cfg["min_query_length"],
        )
        self.running = True

    # TASK COMMANDS -------------------------------------------------------------
    def add(self, text: str) -> bool:
        """Learn from the text, then persist it as a new task."""
        committed = self.composer.commit(text)
        if committed is None:
            console.print("[yellow]Nothing to add.[/yellow]")
            return False
        task = self.tasks.add(committed)
        self._save()
        console.print(f"[green]Added:[/green] {escape(task.text)}")
        return True

    def toggle(self, position: int) -> bool:
        try:
            task = self.tasks.toggle(position - 1)
        except IndexError as e:
            console.print(f"[red]{e}[/red]")
            return False
        self._save()
        state = "done" if task.complete else "not done"
        console.print(f"[cyan]{escape(task.text)}[/cyan] marked {state}")
        return True

    def remove(self, position: int) -> bool:
        try:
            task = self.tasks.remove(position - 1)
        except IndexError as e:
            console.print(f"[red]{e}[/red]")
            return False
        self._save()
        console.print(f"[yellow]Removed:[/yellow] {escape(task.text)}")
        return True

    def _save(self):
        save_tasks(self.cfg["tasks_path"], self.tasks)

    def _record(self, key, val):
        self.metrics.record(key, val)
        try:
            self.metrics.save()
        except OSError as e:
            log.warning(f"[CLI] could not save metrics to {self.metrics.path}: {e}")

    # DISPLAY -------------------------------------------------------------------------------
    def show_tasks(self):
        if not len(self.tasks):
            console.print("[dim](no tasks yet)[/dim]")
            return
        table = Table(title="Tasks", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Done", justify="center")
        table.add_column("Task")
        for i, task in enumerate(self.tasks, 1):
            mark = "[green]x[/green]" if task.complete else " "
            style = "dim strike" if task.complete else ""
            table.add_row(str(i), mark, Text(task.text, style=style))
        console.print(table)
        console.print(f"[dim]{self.tasks.pending()} pending / {len(self.tasks)} total[/dim]")

    def suggest(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        limit = self.cfg["max_suggestions"] if limit is None else limit
        t0 = time.perf_counter()
        words = self.engine.search(prefix, limit)
        self._record("suggest_time", time.perf_counter() - t0)
        if not words:
            console.print("[dim](no suggestions)[/dim]")
        else:
            self._display_suggestions(words)
        return words

    def _display_suggestions(self, words: List[str]):
        table = Table(title="Suggestions", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        for i, w in enumerate(words, 1):
            table.add_row(str(i), w)
        console.print(table)

    def show_vocab(self, top: int = 20):
        seeds = set(self.engine.seed_actions) | set(self.engine.seed_objects)
        table = Table(title="Vocabulary", box=box.MINIMAL)
        table.add_column("Word")
        table.add_column("Freq", justify="right", style="magenta")
        table.add_column("Source", style="dim")
        for w, f in self.engine.vocabulary()[:top]:
            table.add_row(w, str(f), "seed" if w in seeds else "learned")
        console.print(table)
        console.print(f"[dim]{len(self.engine)} words indexed[/dim]")

    def show_stats(self):
        table = Table(title="Stats", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Count", justify="right")
        table.add_column("Avg", justify="right")
        for key, (count, avg) in self.metrics.summary().items():
            table.add_row(key, str(count), f"{avg * 1000:.3f} ms")
        table.add_row("tasks", str(len(self.tasks)), "")
        table.add_row("vocabulary", str(len(self.engine)), "")
        console.print(table)

    # INTERACTIVE SHELL -----------------------------------------------------------
    def run(self):
        """
        Main interactive loop:
        type a task -> suggestions for its last word -> optional pick -> add + learn.
        """
        console.rule("[bold magenta]Task Autocompleter[/bold magenta]")
        console.print(f"[cyan]{HELP}[/cyan]\n")

        while self.running:
            try:
                line = Prompt.ask("[green]Task[/green]", default="")
                if not line.strip():
                    continue
                if line.startswith("/"):
                    self._handle_command(line)
                    continue
                self._process_input(line)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break

    def _process_input(self, line: str):
        t0 = time.perf_counter()
        suggestions = self.composer.on_change(line)
        self._record("suggest_time", time.perf_counter() - t0)

        if suggestions:
            self._display_suggestions(suggestions)
            chosen = Prompt.ask("Pick # / Enter to keep as typed", default="")
            if chosen.isdigit():
                picked = self.composer.select_index(line, int(chosen) - 1)
                if picked is None:
                    console.print("[red]No such suggestion, keeping your text.[/red]")
                else:
                    line = picked
        self.add(line)

    def _handle_command(self, line: str):
        try:
            parts = shlex.split(line)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            return
        if not parts:
            return
        c, args = parts[0].lower(), parts[1:]

        if c in ("/q", "/quit", "/exit"):
            self._exit()
        elif c == "/help":
            console.print(HELP)
        elif c == "/list":
            self.show_tasks()
        elif c in ("/done", "/rm") and len(args) == 1 and args[0].isdigit():
            if c == "/done":
                self.toggle(int(args[0]))
            else:
                self.remove(int(args[0]))
        elif c == "/suggest" and len(args) == 1:
            self.suggest(args[0])
        elif c == "/vocab":
            self.show_vocab(int(args[0]) if args and args[0].isdigit() else 20)
        elif c == "/stats":
            self.show_stats()
        else:
            console.print(f"[red]Unknown command:[/red] {line}")

    def _exit(self):
        console.rule("[red]Exiting[/red]")
        self.running = False


# ENTRY POINT -------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="task-autocompleter",
        description="Task list with word suggestions learned from your tasks.",
    )
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        default=DEFAULT_CONFIG_PATH,
        help="Path to config.json (created with defaults if missing).",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Echo DEBUG log lines to the console.",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("tui", help="Open the full-screen task list (default).")
    sub.add_parser("shell", help="Line-based interactive task shell.")

    p = sub.add_parser("add", help="Add a task.")
    p.add_argument("text", nargs="+")

    sub.add_parser("list", help="Show all tasks.")

    p = sub.add_parser("done", help="Toggle a task's done flag.")
    p.add_argument("position", type=int, help="1-based task number")

    p = sub.add_parser("remove", help="Delete a task.")
    p.add_argument("position", type=int, help="1-based task number")

    p = sub.add_parser("suggest", help="Show completions for a prefix.")
    p.add_argument("prefix")
    p.add_argument("-n", "--limit", type=int, default=None)

    sub.add_parser("stats", help="Show average lookup times and counts.")

    p = sub.add_parser("vocab", help="Show the most frequent indexed words.")
    p.add_argument("--top", type=int, default=20)

    p = sub.add_parser("config", help="Show config, or set KEY VALUE.")
    p.add_argument("key", nargs="?")
    p.add_argument("value", nargs="?")

    return parser


def _config_command(cfg: Config, key, value) -> int:
    if key is None:
        table = Table(title=f"Config ({cfg.path})", box=box.MINIMAL)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        for k, v in cfg.items():
            table.add_row(k, str(v))
        console.print(table)
        return 0
    if value is None:
        console.print("[red]usage: config KEY VALUE[/red]")
        return 2
    try:
        cfg.set(key, value)
    except KeyError:
        console.print(f"[red]No such option:[/red] {key}")
        return 1
    except ValueError:
        console.print(f"[red]Bad value for {key}:[/red] {value}")
        return 1
    console.print(f"[green]{key}[/green] = {cfg[key]}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config, defer_warnings=True)
    command = args.command or "tui"
    configure_logging(
        path=cfg["log_path"],
        level="DEBUG" if args.verbose else cfg["log_level"],
        echo=args.verbose and command != "tui",
    )
    cfg.flush_warnings()

    if command == "config":
        return _config_command(cfg, args.key, args.value)

    if command == "tui":
        # Imported here so the plain commands never load Textual
        from task_autocompleter.tui_app import TaskApp

        TaskApp(cfg).run()
        return 0

    cli = CLI(cfg)
    if command == "shell":
        cli.run()
        return 0
    if command == "add":
        return 0 if cli.add(" ".join(args.text)) else 1
    if command == "list":
        cli.show_tasks()
        return 0
    if command == "done":
        return 0 if cli.toggle(args.position) else 1
    if command == "remove":
        return 0 if cli.remove(args.position) else 1
    if command == "suggest":
        cli.suggest(args.prefix, args.limit)
        return 0
    if command == "vocab":
        cli.show_vocab(args.top)
        return 0
    if command == "stats":
        cli.show_stats()
        return 0
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
