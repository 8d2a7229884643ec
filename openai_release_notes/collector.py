import logging

import requests

from .core.execution import ExecutionStrategy, ThreadPoolStrategy
from .core.interfaces import NullProgressReporter, ProgressReporter
from .exceptions import NoCommitsError
from .github_client import GitHubClient
from .models import CommitContext, CommitRecord, GeneratedNotesContext, InvocationContext, ReleaseContext

logger = logging.getLogger(__name__)


class ContextCollector:
	"""Gather the facts the release notes are written from."""

	def __init__(
		self,
		github: GitHubClient,
		invocation: InvocationContext,
		execution_strategy: ExecutionStrategy | None = None,
		progress_reporter: ProgressReporter | None = None,
	):
		self.github = github
		self.invocation = invocation
		self.repository = invocation.repository
		self.execution_strategy = execution_strategy or ThreadPoolStrategy()
		self.progress_reporter = progress_reporter or NullProgressReporter()

	def collect(self, use_github_generated_notes: bool, version: str) -> ReleaseContext:
		self.progress_reporter.info(
			f"Using context from {'Github Notes' if use_github_generated_notes else 'Commits'}"
		)
		if use_github_generated_notes:
			return self.collect_generated_notes(version)

		return self.collect_commits()

	def collect_commits(self) -> CommitContext:
		"""Return the commits of the pull request with their associated PRs.

		Raises:
			NoCommitsError: If the pull request has no commits
		"""
		pr_no = self.invocation.require_pull_request()
		commits = self.github.get_pr_commits(self.repository, pr_no)
		if not commits:
			raise NoCommitsError("No commits found in the pull request")

		logger.debug("Resolving pull requests of %d commits in %s", len(commits), self.repository)
		prs_per_commit = self.execution_strategy.execute_parallel(
			[self._prs_lookup(commit["sha"]) for commit in commits]
		)

		return CommitContext(
			commits=tuple(CommitRecord.from_dict(commit, prs) for commit, prs in zip(commits, prs_per_commit))
		)

	def collect_generated_notes(self, version: str) -> GeneratedNotesContext:
		"""Return the notes GitHub generates for `version`.

		Failures are reported and result in empty notes, they never abort the run.
		"""
		previous_tag = self.get_previous_tag()

		try:
			notes = self.github.generate_release_notes(
				self.repository,
				version,
				target_commitish=self.invocation.sha or None,
				previous_tag_name=previous_tag,
			)
			raw_notes = notes["body"] or ""
		except (requests.RequestException, ValueError, KeyError) as e:
			logger.warning("Failed to generate github notes: %s", e)
			self.progress_reporter.info(f"Failed to generate github notes: {e}")
			raw_notes = ""

		return GeneratedNotesContext(previous_tag=previous_tag, raw_notes=raw_notes)

	def get_previous_tag(self) -> str | None:
		"""Return the tag of the latest release, or None if there is no previous release."""
		try:
			release = self.github.get_latest_release(self.repository)
		except (requests.RequestException, ValueError) as e:
			logger.warning("No previous version found: %s", e)
			self.progress_reporter.info(f"No previous version found: {e}")
			return None

		if not release:
			self.progress_reporter.info("No previous version found")
			return None

		return release.get("tag_name")

	def _prs_lookup(self, sha: str):
		return lambda: self.github.get_prs_for_commit(self.repository, sha)
