# task_store.py - persistence for task records

# Tasks are stored as a JSON list of {"text": str, "complete": bool}.
# The autocomplete vocabulary itself is never stored; it is rebuilt from
# the seed lists and these records on every start.

import json
import os
from typing import List

from task_autocompleter.tasks import Task, TaskList
from task_autocompleter.utils.logger_utils import log


def load_tasks(path: str) -> List[Task]:
    """
    Load task records from disk.
    Returns:
        list[Task]: the records, or an empty list if the file is missing or unreadable.
    """
    if not os.path.exists(path):
        log.info(f"[task_store] no task file at {path}; starting empty")
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        log.error(f"[task_store] could not read {path}: {e}")
        return []
    if not isinstance(raw, list):
        log.error(f"[task_store] {path} does not hold a list of tasks")
        return []

    tasks: List[Task] = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict) or not isinstance(item.get("text"), str):
            log.warning(f"[task_store] skipping malformed record #{i}: {item!r}")
            continue
        tasks.append(Task(item["text"], bool(item.get("complete", False))))
    log.info(f"[task_store] loaded {len(tasks)} tasks from {path}")
    return tasks


def save_tasks(path: str, tasks) -> None:
    """
    Save task records to disk in JSON format.
    Args:
        tasks: iterable of Task (a TaskList works too)
    Raises:
        OSError: if the file cannot be written (after logging it).
    """
    records = [t.to_dict() for t in tasks]
    folder = os.path.dirname(path)
    try:
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2, ensure_ascii=False)
    except OSError as e:
        log.error(f"[task_store] save to {path} failed: {e}")
        raise
    log.debug(f"[task_store] saved {len(records)} tasks to {path}")


def load_task_list(path: str) -> TaskList:
    return TaskList(load_tasks(path))
