import requests
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

from .models import PRReference, ReleaseSubmission, Repository

JSON_ACCEPT = {"Accept": "application/vnd.github+json"}


class GitHubClient:
	"""Client to interact with the GitHub REST API."""

	def __init__(self, token: str | None = None, timeout: float = 30.0, max_retries: int = 0):
		self.timeout = timeout
		self.session = requests.Session()
		self.session.headers.update(
			{
				"X-GitHub-Api-Version": "2022-11-28",
			}
		)
		if token:
			self.session.headers["Authorization"] = f"Bearer {token}"

		retries = Retry(
			total=max_retries,
			backoff_factor=0.1,
			status_forcelist=[500, 502, 503, 504],
			allowed_methods=None,
		)
		self.session.mount("https://", HTTPAdapter(max_retries=retries))

	def get_pr_commits(self, repository: Repository, pr_no: int) -> list[dict]:
		"""Return the commits of a pull request, in the order GitHub lists them."""
		return self._get_all_pages(f"{repository.url}/pulls/{pr_no}/commits")

	def get_prs_for_commit(self, repository: Repository, sha: str) -> list[PRReference]:
		"""Return the pull requests associated with a commit."""
		r = self.session.get(
			f"{repository.url}/commits/{sha}/pulls",
			headers=JSON_ACCEPT,
			timeout=self.timeout,
		)
		r.raise_for_status()
		return [PRReference.from_dict(pr) for pr in r.json()]

	def get_latest_release(self, repository: Repository) -> dict | None:
		"""Return the latest published release, or None if there is none yet."""
		r = self.session.get(
			f"{repository.url}/releases/latest",
			headers=JSON_ACCEPT,
			timeout=self.timeout,
		)
		if r.status_code == 404:
			return None

		r.raise_for_status()
		return r.json()

	def generate_release_notes(
		self,
		repository: Repository,
		tag: str,
		target_commitish: str | None = None,
		previous_tag_name: str | None = None,
	) -> dict:
		"""Generate release notes for a given tag.

		Args:
			repository: Repository object
			tag: Tag name for the release
			target_commitish: Commit the tag will point to, if the tag does not exist yet
			previous_tag_name: Optional previous tag to use as starting point for comparison
		"""
		json_payload = {"tag_name": tag}
		if target_commitish:
			json_payload["target_commitish"] = target_commitish
		if previous_tag_name:
			json_payload["previous_tag_name"] = previous_tag_name

		response = self.session.post(
			f"{repository.url}/releases/generate-notes",
			headers=JSON_ACCEPT,
			json=json_payload,
			timeout=self.timeout,
		)

		response.raise_for_status()
		return response.json()

	def create_release(self, repository: Repository, submission: ReleaseSubmission) -> dict:
		"""Create a published release."""
		response = self.session.post(
			f"{repository.url}/releases",
			headers=JSON_ACCEPT,
			json=submission.to_payload(),
			timeout=self.timeout,
		)
		response.raise_for_status()
		return response.json()

	def _get_all_pages(self, url: str) -> list[dict]:
		"""Follow the `next` links of a paginated list endpoint."""
		items: list[dict] = []
		next_url: str | None = url
		params: dict[str, int] | None = {"per_page": 100}

		while next_url:
			r = self.session.get(next_url, params=params, headers=JSON_ACCEPT, timeout=self.timeout)
			r.raise_for_status()
			items.extend(r.json())
			next_url = r.links.get("next", {}).get("url")
			# the next link already carries the query string
			params = None

		return items
