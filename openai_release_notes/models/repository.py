from dataclasses import dataclass

GITHUB_API_URL = "https://api.github.com"
GITHUB_URL = "https://github.com"


@dataclass
class Repository:
	owner: str
	name: str
	url: str
	html_url: str

	@classmethod
	def from_slug(cls, slug: str) -> "Repository":
		"""Build a repository from its "owner/name" form."""
		owner, sep, name = slug.partition("/")
		if not sep or not owner or not name:
			raise ValueError(f"Invalid repository: {slug!r}, expected 'owner/name'")

		return cls.from_owner_and_name(owner, name)

	@classmethod
	def from_owner_and_name(cls, owner: str, name: str) -> "Repository":
		return cls(
			owner=owner,
			name=name,
			url=f"{GITHUB_API_URL}/repos/{owner}/{name}",
			html_url=f"{GITHUB_URL}/{owner}/{name}",
		)

	def __str__(self):
		return f"{self.owner}/{self.name}"
