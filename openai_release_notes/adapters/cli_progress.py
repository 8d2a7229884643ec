"""CLI adapter for progress reporting."""

from ..core.interfaces import ProgressEvent, ProgressReporter
from ..ui import CLI


class CLIProgressReporter(ProgressReporter):
	"""Print progress events of a run to the terminal (or the Actions log).

	Plain info lines are printed unless `quiet` is set; errors, successes and
	the final release notes are always shown.
	"""

	def __init__(self, cli: CLI, quiet: bool = False):
		self.cli = cli
		self.quiet = quiet

	def report(self, event: ProgressEvent) -> None:
		if event.type == "release_notes":
			heading = (event.metadata or {}).get("heading", "Release Notes")
			self.cli.show_release_notes(heading, event.message)
		elif event.type == "error":
			self.cli.show_error(event.message)
		elif event.type == "success":
			self.cli.show_success(event.message)
		elif self.quiet:
			return
		else:
			self.cli.show_text(event.message)
