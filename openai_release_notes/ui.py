import os

import typer
from rich.console import Console
from rich.markdown import Markdown


class CLI:
	def __init__(self, console: Console | None = None):
		self.console = console or Console()

	@property
	def in_github_actions(self) -> bool:
		return os.environ.get("GITHUB_ACTIONS") == "true"

	def show_markdown_text(self, text: str) -> None:
		self.console.print(Markdown(text))

	def show_text(self, text: str) -> None:
		"""Print text as is, without markdown rendering."""
		self.console.print(text, markup=False, highlight=False, soft_wrap=True)

	def show_release_notes(self, heading: str, release_notes: str) -> None:
		"""Show release notes in a markdown format.

		Args:
			heading (str): The heading of the release notes (without leading #).
			release_notes (str): The release notes to show (in markdown format).
		"""
		self.show_markdown_text(f"# {heading}")
		self.show_markdown_text(release_notes)

	def show_error(self, message: str) -> None:
		"""Show a red error message, to stderr.

		Inside a GitHub Actions runner the message is emitted as an error
		annotation on stdout instead, which marks the step as failed in the UI.

		Args:
			message (str): The error message to show.
		"""
		if self.in_github_actions:
			typer.echo(f"::error::{message}")
			return

		typer.secho(message, err=True, fg=typer.colors.RED)

	def show_success(self, message: str) -> None:
		"""Show a green success message, to stdout.

		Args:
			message (str): The success message to show.
		"""
		typer.secho(message, fg=typer.colors.GREEN)
