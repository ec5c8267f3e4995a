"""Task cycle for aircraft under tower control.

Typical usage:
    from towersim.tasks import Task, TaskList, TaskType

    tasks = TaskList([Task(TaskType.WAIT), Task(TaskType.LOAD, 50)])
"""

from towersim.tasks.task import Task, TaskList, TaskType

__all__ = [
    "Task",
    "TaskList",
    "TaskType",
]
