#!/usr/bin/env python3
"""
TASKDASH - CLI Interface
========================
Command-line dashboard for the personal task tracker.

Usage:
    taskdash add "Write report" --due 2024-01-10 --priority High
    taskdash list --status "In Progress" --sort desc
    taskdash status 3 Completed
    taskdash delete 3
    taskdash stats
    taskdash dashboard
    taskdash theme toggle
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .config import Settings
from .errors import TaskError
from .persistence import JsonFileStorage, JsonTaskRepository, ThemePreference
from .schema import ALL, SortDirection, Task, TaskPriority, TaskStats, TaskStatus
from .stats import compute_stats, status_breakdown
from .store import Commit, TaskStore
from .view import derive_view

STATUS_ICONS = {
    TaskStatus.TODO: "⬜",
    TaskStatus.IN_PROGRESS: "🔵",
    TaskStatus.COMPLETED: "✅",
}

EMPTY_VIEW_MESSAGE = "No tasks found matching your filters."


def format_task(task: Task) -> str:
    icon = STATUS_ICONS.get(task.status, "❓")
    due = task.due_date.isoformat() if task.due_date else "not set"
    line = f"  {icon} [{task.id}] {task.title} | {task.priority.value} | Due: {due} | {task.status.value}"
    if task.description:
        line += f"\n      {task.description}"
    return line


def format_view(tasks: Iterable[Task]) -> str:
    lines = [format_task(t) for t in tasks]
    return "\n".join(lines) if lines else f"  {EMPTY_VIEW_MESSAGE}"


def format_stats(stats: TaskStats) -> str:
    bar = f"{'█' * (stats.progress_pct // 10)}{'░' * (10 - stats.progress_pct // 10)}"
    return "\n".join([
        f"Total Tasks: {stats.total}",
        f"Pending:     {stats.pending}",
        f"Completed:   {stats.completed}",
        f"Progress:    {bar} {stats.progress_pct}%",
    ])


def _add_view_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--status", default=ALL, choices=[ALL] + TaskStatus.values(), help="Status filter")
    p.add_argument("--priority", default=ALL, choices=[ALL] + [p.value for p in TaskPriority], help="Priority filter")
    p.add_argument("--sort", default=SortDirection.ASC.value, choices=[d.value for d in SortDirection], help="Due date order")


def _report_commit(commit: Commit) -> None:
    if not commit.persisted:
        print(f"⚠️ Change kept in memory but not saved: {commit.save_error}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskdash",
        description="Smart Task Dashboard - personal task tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  taskdash add "Pay rent" --due 2024-02-01 --priority High
  taskdash list --status "To Do" --sort desc    Filtered, sorted list
  taskdash status 2 "In Progress"               Move task 2 along
  taskdash delete 2                             Remove task 2
  taskdash stats --json                         Totals as JSON
  taskdash dashboard                            Summary cards + task list
  taskdash theme dark                           Set theme preference
        """
    )
    parser.add_argument("--file", help="Storage file (default: $TASKDASH_DATA_FILE or .taskdash/storage.json)")
    parser.add_argument("--log-level", help="Logging level (default: $TASKDASH_LOG_LEVEL or INFO)")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ADD command
    add_parser = subparsers.add_parser("add", help="Create a new task")
    add_parser.add_argument("title", help="Task title")
    add_parser.add_argument("--due", required=True, help="Due date (YYYY-MM-DD)")
    add_parser.add_argument("-d", "--description", default="", help="Task description")
    add_parser.add_argument("-p", "--priority", default=TaskPriority.MEDIUM.value, help="High, Medium or Low")

    # LIST command
    list_parser = subparsers.add_parser("list", help="Show the filtered, sorted task list")
    _add_view_arguments(list_parser)
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # STATUS command
    status_parser = subparsers.add_parser("status", help="Change a task's status")
    status_parser.add_argument("task_id", type=int, help="Task ID")
    status_parser.add_argument("new_status", help="To Do, In Progress or Completed")

    # DELETE command
    delete_parser = subparsers.add_parser("delete", help="Delete a task")
    delete_parser.add_argument("task_id", type=int, help="Task ID")

    # STATS command
    stats_parser = subparsers.add_parser("stats", help="Show total/pending/completed counts")
    stats_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # DASHBOARD command
    dashboard_parser = subparsers.add_parser("dashboard", help="Summary cards and task list")
    _add_view_arguments(dashboard_parser)

    # THEME command
    theme_parser = subparsers.add_parser("theme", help="Show or change the theme preference")
    theme_parser.add_argument("mode", nargs="?", choices=["dark", "light", "toggle"], help="New theme")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    settings = Settings.from_env()
    log_level = (args.log_level or settings.log_level).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        parser.error(f"unknown log level: {log_level}")
    logging.basicConfig(level=log_level, format="%(levelname)s %(name)s: %(message)s")

    storage = JsonFileStorage(Path(args.file) if args.file else settings.data_file)
    theme = ThemePreference(storage)

    store = TaskStore(JsonTaskRepository(storage))
    if args.command != "theme":
        store.load()

    try:
        if args.command == "theme":
            if args.mode == "toggle":
                dark = theme.toggle()
            elif args.mode:
                dark = args.mode == "dark"
                theme.set(dark)
            else:
                dark = theme.get()
            print("🌙 Dark" if dark else "☀️ Light")

        elif args.command == "add":
            commit = store.create({
                "title": args.title,
                "description": args.description,
                "priority": args.priority,
                "dueDate": args.due,
            })
            task = commit.snapshot[-1]
            print(f"✅ Created: [{task.id}] {task.title} (due {task.due_date.isoformat()})")
            _report_commit(commit)

        elif args.command == "list":
            tasks = derive_view(
                store.snapshot,
                status_filter=args.status,
                priority_filter=args.priority,
                sort_direction=args.sort,
            )
            if args.json:
                print(json.dumps([t.model_dump(mode="json", by_alias=True) for t in tasks], indent=2))
            else:
                print(format_view(tasks))

        elif args.command == "status":
            commit = store.set_status(args.task_id, args.new_status)
            task = store.get(args.task_id)
            print(f"🔄 [{task.id}] {task.title}: {task.status.value}")
            _report_commit(commit)

        elif args.command == "delete":
            before = len(store)
            commit = store.delete(args.task_id)
            if len(commit.snapshot) < before:
                print(f"🗑️ Deleted: {args.task_id}")
            else:
                print(f"Nothing to delete: {args.task_id}")
            _report_commit(commit)

        elif args.command == "stats":
            stats = compute_stats(store.snapshot)
            if args.json:
                data = stats.model_dump()
                data["by_status"] = status_breakdown(store.snapshot)
                print(json.dumps(data, indent=2))
            else:
                print(format_stats(stats))

        elif args.command == "dashboard":
            tasks = derive_view(
                store.snapshot,
                status_filter=args.status,
                priority_filter=args.priority,
                sort_direction=args.sort,
            )
            arrow = "↑" if args.sort == SortDirection.ASC.value else "↓"
            print("=" * 60)
            print(f"📋 Smart Task Dashboard ({'🌙 Dark' if theme.get() else '☀️ Light'})")
            print("=" * 60)
            print(format_stats(compute_stats(store.snapshot)))
            print("-" * 60)
            print(f"Status: {args.status} | Priority: {args.priority} | Sort by Date ({arrow})")
            print(format_view(tasks))
            print("=" * 60)

    except TaskError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
