"""Execution strategies for independent lookups."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any


class ExecutionStrategy(ABC):
	"""Run independent tasks and return their results in task order."""

	@abstractmethod
	def execute_parallel(
		self,
		tasks: list[Callable[[], Any]],
	) -> list[Any]:
		"""Execute tasks and return results in the order of `tasks`."""
		pass


class ThreadPoolStrategy(ExecutionStrategy):
	"""Bounded thread pool. The first failing task's exception propagates."""

	def __init__(self, max_workers: int = 10):
		self.max_workers = max_workers

	def execute_parallel(
		self,
		tasks: list[Callable[[], Any]],
	) -> list[Any]:
		if not tasks:
			return []

		# Limit concurrency to avoid overwhelming DNS/HTTP clients
		max_workers = min(self.max_workers, len(tasks))
		with ThreadPoolExecutor(max_workers=max_workers) as executor:
			futures = [executor.submit(task) for task in tasks]
			return [future.result() for future in futures]


class SequentialStrategy(ExecutionStrategy):
	"""Sequential execution for debugging or environments without threading."""

	def execute_parallel(
		self,
		tasks: list[Callable[[], Any]],
	) -> list[Any]:
		return [task() for task in tasks]
