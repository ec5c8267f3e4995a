"""Aircraft tasks and circular task lists.

Each aircraft repeatedly cycles through a fixed list of tasks describing
where it is in its operational life: away from the airport, queued to land,
waiting or loading at a gate, and queued to take off.

Typical usage:
    from towersim.tasks import Task, TaskList, TaskType

    tasks = TaskList([
        Task(TaskType.AWAY),
        Task(TaskType.LAND),
        Task(TaskType.LOAD, 70),
        Task(TaskType.TAKEOFF),
    ])
    tasks.advance()
    print(tasks.current_task())  # LAND
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from towersim.core.exceptions import ValidationError


class TaskType(Enum):
    """Kinds of task an aircraft can be performing.

    The value of each member is its written description.
    """

    AWAY = "Flying outside the airport"
    LAND = "Waiting in queue to land"
    WAIT = "Waiting idle at gate"
    LOAD = "Loading at gate"
    TAKEOFF = "Waiting in queue to take off"

    @property
    def description(self) -> str:
        """Written description of this task type."""
        return self.value

    @property
    def at_gate(self) -> bool:
        """True for task types performed while parked at a gate."""
        return self in (TaskType.WAIT, TaskType.LOAD)


@dataclass(frozen=True)
class Task:
    """A single task assigned to an aircraft.

    Attributes:
        type: Kind of task.
        load_percent: Percentage of maximum capacity to load. Only
            meaningful for LOAD tasks, 0 otherwise.

    Examples:
        >>> str(Task(TaskType.LOAD, 65))
        'LOAD at 65%'
        >>> str(Task(TaskType.AWAY))
        'AWAY'
    """

    type: TaskType
    load_percent: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.load_percent <= 100:
            raise ValidationError(
                f"Load percent must be between 0 and 100, got {self.load_percent}"
            )

    def __str__(self) -> str:
        if self.type == TaskType.LOAD:
            return f"LOAD at {self.load_percent}%"
        return self.type.name


class TaskList:
    """Circular list of tasks with a cursor on the current one.

    Advancing past the last task wraps around to the first. The tick logic
    only reads the current task; moving on is up to whoever controls the
    aircraft.

    Examples:
        >>> tasks = TaskList([Task(TaskType.AWAY), Task(TaskType.LAND)])
        >>> tasks.next_task()
        Task(type=<TaskType.LAND: 'Waiting in queue to land'>, load_percent=0)
        >>> tasks.advance()
        >>> tasks.next_task().type
        <TaskType.AWAY: 'Flying outside the airport'>
    """

    def __init__(self, tasks: Iterable[Task]) -> None:
        """Initialize task list.

        Args:
            tasks: Tasks in the order they are performed.

        Raises:
            ValidationError: If tasks is empty.
        """
        self._tasks: list[Task] = list(tasks)
        if not self._tasks:
            raise ValidationError("Task list must contain at least one task")
        self._position = 0

    @property
    def position(self) -> int:
        """Index of the current task."""
        return self._position

    def __len__(self) -> int:
        return len(self._tasks)

    def tasks(self) -> list[Task]:
        """Get all tasks in order.

        Returns:
            Copy of the task sequence.
        """
        return list(self._tasks)

    def current_task(self) -> Task:
        """Get the task currently being performed."""
        return self._tasks[self._position]

    def next_task(self) -> Task:
        """Get the task after the current one, wrapping to the first.

        Does not move the cursor.
        """
        return self._tasks[(self._position + 1) % len(self._tasks)]

    def advance(self) -> None:
        """Move the cursor forward by one, wrapping past the last task."""
        self._position = (self._position + 1) % len(self._tasks)

    def __str__(self) -> str:
        return (
            f"TaskList currently on {self.current_task()} "
            f"[{self._position + 1}/{len(self._tasks)}]"
        )
