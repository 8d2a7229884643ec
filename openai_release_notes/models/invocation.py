import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from ..exceptions import ConfigurationError, InvalidEventError
from .repository import Repository

PULL_REQUEST_EVENT = "pull_request"


@dataclass(frozen=True)
class InvocationContext:
	"""What triggered the run and on which repository.

	Mirrors the variables the GitHub Actions runner exports, so the collector
	never reads process-wide state itself.
	"""

	event_name: str
	owner: str
	repo: str
	sha: str
	pull_request_number: int | None = None

	@property
	def repository(self) -> Repository:
		return Repository.from_owner_and_name(self.owner, self.repo)

	def require_pull_request(self) -> int:
		"""Return the pull request number, or raise if not run on a pull request."""
		if self.event_name != PULL_REQUEST_EVENT:
			raise InvalidEventError("This action can only be run on pull requests")
		if self.pull_request_number is None:
			raise InvalidEventError("The event payload has no pull request number")

		return self.pull_request_number

	@classmethod
	def from_environment(cls, environ: Mapping[str, str] | None = None) -> "InvocationContext":
		"""Read the invocation context from the GitHub Actions environment.

		Raises:
			ConfigurationError: If GITHUB_REPOSITORY is missing or malformed
		"""
		if environ is None:
			environ = os.environ

		slug = environ.get("GITHUB_REPOSITORY", "")
		try:
			repository = Repository.from_slug(slug)
		except ValueError as e:
			raise ConfigurationError(f"GITHUB_REPOSITORY is not set correctly: {e}") from e

		payload = _load_event_payload(environ.get("GITHUB_EVENT_PATH"))
		pull_request = payload.get("pull_request") or {}

		return cls(
			event_name=environ.get("GITHUB_EVENT_NAME", ""),
			owner=repository.owner,
			repo=repository.name,
			sha=environ.get("GITHUB_SHA", ""),
			pull_request_number=pull_request.get("number"),
		)


def _load_event_payload(event_path: str | None) -> dict:
	if not event_path:
		return {}

	path = Path(event_path)
	if not path.exists():
		return {}

	with open(path, encoding="utf-8") as f:
		return json.load(f)
