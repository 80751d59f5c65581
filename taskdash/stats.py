"""
TASKDASH - Stats Aggregator
===========================
Counts always cover the full snapshot, independent of any view filter.
"""

from typing import Dict, Iterable

from .schema import Task, TaskStats, TaskStatus


def compute_stats(snapshot: Iterable[Task]) -> TaskStats:
    tasks = list(snapshot)
    completed = sum(1 for t in tasks if t.status == TaskStatus.COMPLETED)
    return TaskStats(total=len(tasks), completed=completed, pending=len(tasks) - completed)


def status_breakdown(snapshot: Iterable[Task]) -> Dict[str, int]:
    summary = {status.value: 0 for status in TaskStatus}
    for task in snapshot:
        summary[task.status.value] += 1
    return summary
