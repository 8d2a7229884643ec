import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Literal

EventType = Literal["info", "success", "error", "release_notes"]

LOG_LEVELS: dict[str, int] = {
	"info": logging.INFO,
	"success": logging.INFO,
	"error": logging.ERROR,
	"release_notes": logging.DEBUG,
}


@dataclass
class ProgressEvent:
	type: EventType
	message: str
	metadata: dict[str, Any] | None = None


class ProgressReporter(ABC):
	@abstractmethod
	def report(self, event: ProgressEvent) -> None:
		"""Report a progress event."""
		pass

	def info(self, message: str) -> None:
		self.report(ProgressEvent(type="info", message=message))

	def success(self, message: str) -> None:
		self.report(ProgressEvent(type="success", message=message))

	def error(self, message: str) -> None:
		self.report(ProgressEvent(type="error", message=message))


class NullProgressReporter(ProgressReporter):
	"""No-op reporter for library usage."""

	def report(self, event: ProgressEvent) -> None:
		pass


class LoggingProgressReporter(ProgressReporter):
	"""Forward progress events to a standard library logger."""

	def __init__(self, logger: logging.Logger | None = None):
		self.logger = logger or logging.getLogger("openai_release_notes")

	def report(self, event: ProgressEvent) -> None:
		self.logger.log(LOG_LEVELS.get(event.type, logging.INFO), event.message)


class CompositeProgressReporter(ProgressReporter):
	"""Combine multiple reporters."""

	def __init__(self, reporters: list[ProgressReporter]):
		self.reporters = reporters

	def report(self, event: ProgressEvent) -> None:
		for reporter in self.reporters:
			reporter.report(event)
