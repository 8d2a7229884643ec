"""Tests for execution strategies."""

import threading
import time

import pytest

from openai_release_notes.core.execution import SequentialStrategy, ThreadPoolStrategy


class TestExecutionStrategies:
	def test_sequential_strategy_executes_in_order(self):
		calls = []

		def task(value):
			def _task():
				calls.append(value)
				return value

			return _task

		results = SequentialStrategy().execute_parallel([task(i) for i in range(5)])

		assert calls == [0, 1, 2, 3, 4]
		assert results == [0, 1, 2, 3, 4]

	def test_thread_pool_keeps_task_order(self):
		"""Results follow the task list, not the completion order."""

		def task(value):
			def _task():
				time.sleep(0.01 * (5 - value))
				return value

			return _task

		results = ThreadPoolStrategy(max_workers=5).execute_parallel([task(i) for i in range(5)])

		assert results == [0, 1, 2, 3, 4]

	def test_thread_pool_with_empty_tasks(self):
		assert ThreadPoolStrategy().execute_parallel([]) == []

	def test_thread_pool_limits_concurrent_workers(self):
		active_workers = {"count": 0, "max": 0}
		lock = threading.Lock()

		def task():
			with lock:
				active_workers["count"] += 1
				active_workers["max"] = max(active_workers["max"], active_workers["count"])

			time.sleep(0.05)

			with lock:
				active_workers["count"] -= 1

			return True

		ThreadPoolStrategy(max_workers=3).execute_parallel([task for _ in range(10)])

		assert active_workers["max"] <= 3

	@pytest.mark.parametrize("strategy", [SequentialStrategy(), ThreadPoolStrategy()])
	def test_strategies_propagate_exceptions(self, strategy):
		def failing_task():
			raise ValueError("Task failed")

		with pytest.raises(ValueError, match="Task failed"):
			strategy.execute_parallel([lambda: "ok", failing_task])
