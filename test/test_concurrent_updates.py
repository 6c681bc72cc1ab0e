"""
Updates are read-then-write with no locking: two concurrent PUTs on the same
id both read the same prior state and the second write silently discards the
first one's change. This test pins that behaviour down deterministically.
"""

import threading

from fakes import InMemoryTaskRepository

from backend_fastapi.api.deps import build_task_api
from core.domain.models.task import Task
from infrastructure.settings import Settings


class BarrierOnReadRepository(InMemoryTaskRepository):
    """Holds every reader until `parties` reads are in flight."""

    def __init__(self, parties: int) -> None:
        super().__init__()
        self.barrier = threading.Barrier(parties, timeout=5)
        self.armed = False

    def get_by_key(self, task_id: int) -> Task | None:
        task = super().get_by_key(task_id)
        if self.armed:
            self.barrier.wait()
        return task


def test_concurrent_updates_lose_a_write():
    repository = BarrierOnReadRepository(parties=2)
    api = build_task_api(repository, Settings())
    created = api.handle(
        "POST", "/tasks", {"task": "Original", "description": "d", "status": "Todo"}
    ).body
    path = f"/tasks/{created['id']}"

    repository.armed = True
    results = {}

    def update(name, body):
        results[name] = api.handle("PUT", path, body)

    threads = [
        threading.Thread(target=update, args=("status", {"status": "Completed"})),
        threading.Thread(target=update, args=("task", {"task": "Renamed"})),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)
        assert not thread.is_alive(), "update thread did not finish"

    repository.armed = False
    assert set(results) == {"status", "task"}
    assert results["status"].status == 200
    assert results["task"].status == 200

    final = api.handle("GET", path).body
    status_applied = final["status"] == "Completed"
    task_applied = final["task"] == "Renamed"
    # Exactly one of the two changes survives.
    assert status_applied != task_applied
