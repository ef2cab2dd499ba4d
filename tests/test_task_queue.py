"""Tests for the priority queue with identity removal."""

import random

from tasktrack.task_engine import TaskQueue


def drain(queue: TaskQueue) -> list:
    out = []
    while (task := queue.extract_min()) is not None:
        out.append(task)
    return out


class TestTaskQueue:
    def test_empty_extract_returns_none(self):
        queue = TaskQueue()
        assert queue.extract_min() is None
        assert len(queue) == 0
        assert not queue

    def test_extract_in_priority_order(self, make_task):
        queue = TaskQueue()
        for title, prio in [("c", 3), ("a", 1), ("b", 2)]:
            queue.insert(make_task(title, prio))
        assert [t.title for t in drain(queue)] == ["a", "b", "c"]

    def test_random_sequences_never_decrease(self, make_task):
        rng = random.Random(7)
        queue = TaskQueue()
        pending = []
        for i in range(300):
            if rng.random() < 0.6:
                task = make_task(f"t{i}", rng.randint(-5, 20))
                queue.insert(task)
                pending.append(task.priority)
            else:
                task = queue.extract_min()
                if task is None:
                    assert not pending
                    continue
                assert task.priority == min(pending)
                pending.remove(task.priority)
        rest = [t.priority for t in drain(queue)]
        assert rest == sorted(pending)
        assert rest == sorted(rest)

    def test_remove_by_identity_not_title(self, make_task):
        queue = TaskQueue()
        first = make_task("Same", 1)
        second = make_task("Same", 1)
        queue.insert(first)
        queue.insert(second)
        assert queue.remove(first)
        assert first not in queue
        assert second in queue
        assert drain(queue) == [second]

    def test_remove_missing_returns_false(self, make_task):
        queue = TaskQueue()
        assert not queue.remove(make_task("ghost"))

    def test_remove_keeps_heap_order(self, make_task):
        queue = TaskQueue()
        tasks = [make_task(f"t{p}", p) for p in [5, 1, 4, 2, 3, 0, 6]]
        for t in tasks:
            queue.insert(t)
        queue.remove(tasks[1])  # priority 1
        queue.remove(tasks[5])  # priority 0
        assert [t.priority for t in drain(queue)] == [2, 3, 4, 5, 6]

    def test_many_removals_compact(self, make_task):
        queue = TaskQueue()
        tasks = [make_task(f"t{i}", i) for i in range(20)]
        for t in tasks:
            queue.insert(t)
        for t in tasks[:15]:
            queue.remove(t)
        assert len(queue) == 5
        assert len(queue._heap) < 20
        assert [t.priority for t in drain(queue)] == [15, 16, 17, 18, 19]

    def test_snapshot_sorted_does_not_mutate(self, make_task):
        queue = TaskQueue()
        for title, prio in [("Write spec", 2), ("Fix bug", 1), ("Review", 2)]:
            queue.insert(make_task(title, prio))
        snapshot = queue.snapshot_sorted()
        assert [t.title for t in snapshot] == ["Fix bug", "Write spec", "Review"]
        assert len(queue) == 3

    def test_iteration_skips_removed(self, make_task):
        queue = TaskQueue()
        keep = make_task("keep", 2)
        gone = make_task("gone", 1)
        queue.insert(keep)
        queue.insert(gone)
        queue.remove(gone)
        assert list(queue) == [keep]

    def test_peek(self, make_task):
        queue = TaskQueue()
        assert queue.peek() is None
        low = make_task("low", 9)
        high = make_task("high", 0)
        queue.insert(low)
        queue.insert(high)
        assert queue.peek() is high
        queue.remove(high)
        assert queue.peek() is low
        assert len(queue) == 1

    def test_reinsert_live_task_replaces_entry(self, make_task):
        queue = TaskQueue()
        task = make_task("once", 1)
        queue.insert(task)
        queue.insert(task)
        assert len(queue) == 1
        assert drain(queue) == [task]

    def test_reinsert_after_extract(self, make_task):
        queue = TaskQueue()
        task = make_task("back", 1)
        queue.insert(task)
        assert queue.extract_min() is task
        queue.insert(task)
        assert task in queue
