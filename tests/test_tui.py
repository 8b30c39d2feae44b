# tests/test_tui.py - headless smoke test of the Textual app

import asyncio

from textual.widgets import Input

from task_autocompleter.tui_app import SuggestionList, TaskApp
from task_autocompleter.utils.task_store import load_tasks


def test_type_accept_and_commit(cfg):
    app = TaskApp(cfg)

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("b", "u")
            await pilot.pause()
            assert app.suggestions == ["buy"]
            assert app.query_one(SuggestionList).display

            await pilot.press("tab")
            await pilot.pause()
            assert app.query_one(Input).value == "buy "
            assert not app.query_one(SuggestionList).display

            await pilot.press("s", "o", "a", "p", "enter")
            await pilot.pause()
            assert app.query_one(Input).value == ""

    asyncio.run(scenario())
    assert app.tasks.texts() == ["buy soap"]
    assert [t.text for t in load_tasks(cfg["tasks_path"])] == ["buy soap"]
    assert app.engine.frequency("soap") == 1
