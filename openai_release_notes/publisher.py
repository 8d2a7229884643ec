from .exceptions import EmptyCompletionError
from .github_client import GitHubClient
from .models import ReleaseSubmission, Repository


class ReleasePublisher:
	"""Create the GitHub release that carries the generated notes."""

	def __init__(self, github: GitHubClient, repository: Repository):
		self.github = github
		self.repository = repository

	def publish(self, version: str, completion: str | None) -> ReleaseSubmission:
		"""Create a release named and tagged `version`, with the completion as its body.

		The body is used exactly as returned by the completion service.

		Raises:
			EmptyCompletionError: If there is no text to publish. Nothing is written then.
		"""
		if completion is None or not completion.strip():
			raise EmptyCompletionError("Failed to generate release notes")

		submission = ReleaseSubmission(tag_name=version, display_name=version, body=completion)
		self.github.create_release(self.repository, submission)
		return submission
