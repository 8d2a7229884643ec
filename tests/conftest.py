from unittest.mock import Mock

import pytest

from openai_release_notes.github_client import GitHubClient
from openai_release_notes.models import InvocationContext, PRReference


def commit_data(sha: str, message: str, name: str = "Alice Doe", login: str | None = "alice") -> dict:
	"""A commit object as returned by GET /repos/{owner}/{repo}/pulls/{pr}/commits."""
	return {
		"sha": sha,
		"html_url": f"https://github.com/acme/rockets/commit/{sha}",
		"commit": {
			"message": message,
			"author": {"name": name, "email": f"{sha}@example.com"},
		},
		"author": {"login": login, "html_url": f"https://github.com/{login}"} if login else None,
	}


def pr_reference(number: int) -> PRReference:
	return PRReference(label=f"#{number}", url=f"https://github.com/acme/rockets/pull/{number}")


@pytest.fixture
def invocation() -> InvocationContext:
	return InvocationContext(
		event_name="pull_request",
		owner="acme",
		repo="rockets",
		sha="0123abcd",
		pull_request_number=7,
	)


@pytest.fixture
def github() -> Mock:
	return Mock(spec=GitHubClient)
