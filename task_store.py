"""
In-memory task store used by the Flask API.
"""

import threading
import uuid
from typing import Any, Dict, List

TASK_FIELDS = ("title", "status")


class TaskNotFoundError(LookupError):
    def __init__(self, task_id: str):
        super().__init__("Task not found")
        self.task_id = task_id


class TaskDecodeError(ValueError):
    pass


def decode_task(data: Any) -> Dict[str, str]:
    """
    Coerce a parsed JSON body into a task with only "title" and "status".

    Keys match case-insensitively, the last matching key wins. Missing or
    null fields become empty strings; unknown fields (including "id") are
    dropped. Raises TaskDecodeError when the shape is wrong.
    """
    if not isinstance(data, dict):
        raise TaskDecodeError(
            f"cannot decode JSON {type(data).__name__} into a task object"
        )

    task = {field: "" for field in TASK_FIELDS}
    for key, value in data.items():
        field = key.lower()
        if field not in task:
            continue
        if value is None:
            value = ""
        elif not isinstance(value, str):
            raise TaskDecodeError(
                f'field "{field}" must be a string, got {type(value).__name__}'
            )
        task[field] = value
    return task


class TaskStore:
    def __init__(self):
        self._tasks: List[Dict[str, str]] = []
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._tasks)

    def _index_of(self, task_id: str) -> int:
        for i, task in enumerate(self._tasks):
            if task["id"] == task_id:
                return i
        raise TaskNotFoundError(task_id)

    def list_tasks(self) -> List[Dict[str, str]]:
        with self._lock:
            return [dict(task) for task in self._tasks]

    def get_task(self, task_id: str) -> Dict[str, str]:
        with self._lock:
            return dict(self._tasks[self._index_of(task_id)])

    def add_task(self, task: Dict[str, str]) -> Dict[str, str]:
        new_task = {
            "id": str(uuid.uuid4()),
            "title": task.get("title", ""),
            "status": task.get("status", ""),
        }
        with self._lock:
            self._tasks.append(new_task)
        return dict(new_task)

    def update_task(self, task_id: str, task: Dict[str, str]) -> Dict[str, str]:
        with self._lock:
            index = self._index_of(task_id)
            # Keep the stored id whatever the caller sent
            updated = {
                "id": self._tasks[index]["id"],
                "title": task.get("title", ""),
                "status": task.get("status", ""),
            }
            self._tasks[index] = updated
        return dict(updated)

    def delete_task(self, task_id: str) -> Dict[str, str]:
        with self._lock:
            return self._tasks.pop(self._index_of(task_id))
