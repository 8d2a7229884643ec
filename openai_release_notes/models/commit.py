from dataclasses import dataclass, field

from .pull_request import PRReference


@dataclass(frozen=True)
class CommitRecord:
	"""A commit of the pull request under release."""

	sha: str
	message: str
	author_name: str
	author_url: str = ""
	prs: tuple[PRReference, ...] = field(default_factory=tuple)

	@classmethod
	def from_dict(cls, data: dict, prs: list[PRReference] | tuple[PRReference, ...] = ()) -> "CommitRecord":
		"""Build a record from a commit object of the GitHub REST API.

		The git author name is preferred over the GitHub login. `author` is null
		when the commit email is not linked to a GitHub account.
		"""
		account = data.get("author") or {}
		git_author = data["commit"].get("author") or {}
		return cls(
			sha=data["sha"],
			message=data["commit"]["message"],
			author_name=git_author.get("name") or account.get("login") or "",
			author_url=account.get("html_url") or "",
			prs=tuple(prs),
		)

	def __str__(self):
		return f"""Commit Message: {self.message}"""
