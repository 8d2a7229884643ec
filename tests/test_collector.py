"""Tests for the context collector."""

import threading
import time
from unittest.mock import Mock

import pytest
import requests

from conftest import commit_data, pr_reference
from openai_release_notes.collector import ContextCollector
from openai_release_notes.core.execution import SequentialStrategy, ThreadPoolStrategy
from openai_release_notes.core.interfaces import ProgressEvent, ProgressReporter
from openai_release_notes.exceptions import InvalidEventError, NoCommitsError
from openai_release_notes.models import CommitContext, GeneratedNotesContext, InvocationContext


class EventCapturingReporter(ProgressReporter):
	def __init__(self):
		self.events = []

	def report(self, event: ProgressEvent) -> None:
		self.events.append(event)


class TestCommitPath:
	def test_collects_commits_with_their_prs(self, github, invocation):
		github.get_pr_commits.return_value = [
			commit_data("a1", "feat: add launch button"),
			commit_data("b2", "fix: fuel gauge", name="Bob", login="bob"),
		]
		github.get_prs_for_commit.side_effect = lambda repository, sha: {
			"a1": [pr_reference(1)],
			"b2": [],
		}[sha]

		context = ContextCollector(github, invocation).collect(False, "v1.0.0")

		assert isinstance(context, CommitContext)
		assert [c.message for c in context.commits] == ["feat: add launch button", "fix: fuel gauge"]
		assert [c.author_name for c in context.commits] == ["Alice Doe", "Bob"]
		assert context.commits[0].prs == (pr_reference(1),)
		assert context.commits[1].prs == ()
		github.get_pr_commits.assert_called_once_with(invocation.repository, 7)
		github.generate_release_notes.assert_not_called()

	def test_keeps_commit_order_when_lookups_finish_out_of_order(self, github, invocation):
		shas = [f"sha{i}" for i in range(6)]
		github.get_pr_commits.return_value = [commit_data(sha, f"commit {sha}") for sha in shas]

		def slow_first(repository, sha):
			# the earliest commits answer last
			time.sleep(0.01 * (len(shas) - shas.index(sha)))
			return [pr_reference(shas.index(sha) + 1)]

		github.get_prs_for_commit.side_effect = slow_first
		collector = ContextCollector(github, invocation, execution_strategy=ThreadPoolStrategy(max_workers=6))

		context = collector.collect_commits()

		assert [c.sha for c in context.commits] == shas
		assert [c.prs[0].label for c in context.commits] == [f"#{i + 1}" for i in range(6)]

	def test_lookups_run_concurrently(self, github, invocation):
		github.get_pr_commits.return_value = [commit_data(f"s{i}", "msg") for i in range(4)]
		active = {"count": 0, "max": 0}
		lock = threading.Lock()

		def lookup(repository, sha):
			with lock:
				active["count"] += 1
				active["max"] = max(active["max"], active["count"])
			time.sleep(0.05)
			with lock:
				active["count"] -= 1
			return []

		github.get_prs_for_commit.side_effect = lookup

		ContextCollector(github, invocation).collect_commits()

		assert active["max"] > 1

	def test_no_commits_is_fatal(self, github, invocation):
		github.get_pr_commits.return_value = []

		with pytest.raises(NoCommitsError, match="No commits found in the pull request"):
			ContextCollector(github, invocation).collect(False, "v1.0.0")

		github.get_prs_for_commit.assert_not_called()

	def test_lookup_failure_propagates(self, github, invocation):
		github.get_pr_commits.return_value = [commit_data("a1", "feat: x")]
		github.get_prs_for_commit.side_effect = requests.HTTPError("500 Server Error")

		with pytest.raises(requests.HTTPError):
			ContextCollector(github, invocation, execution_strategy=SequentialStrategy()).collect_commits()

	def test_requires_pull_request_event(self, github):
		push = InvocationContext(event_name="push", owner="acme", repo="rockets", sha="abc")

		with pytest.raises(InvalidEventError):
			ContextCollector(github, push).collect_commits()

		github.get_pr_commits.assert_not_called()

	def test_commit_without_github_account(self, github, invocation):
		github.get_pr_commits.return_value = [commit_data("a1", "fix: x", name="Ghost", login=None)]
		github.get_prs_for_commit.return_value = []

		context = ContextCollector(github, invocation).collect_commits()

		assert context.commits[0].author_name == "Ghost"
		assert context.commits[0].author_url == ""


class TestGeneratedNotesPath:
	def test_generates_notes_since_previous_release(self, github, invocation):
		github.get_latest_release.return_value = {"tag_name": "v0.9.0"}
		github.generate_release_notes.return_value = {"name": "v1.0.0", "body": "## What's Changed\n* stuff"}

		context = ContextCollector(github, invocation).collect(True, "v1.0.0")

		assert context == GeneratedNotesContext(previous_tag="v0.9.0", raw_notes="## What's Changed\n* stuff")
		github.generate_release_notes.assert_called_once_with(
			invocation.repository,
			"v1.0.0",
			target_commitish="0123abcd",
			previous_tag_name="v0.9.0",
		)
		github.get_pr_commits.assert_not_called()

	def test_first_release_has_no_previous_tag(self, github, invocation):
		github.get_latest_release.return_value = None
		github.generate_release_notes.return_value = {"body": "notes"}

		context = ContextCollector(github, invocation).collect(True, "v1.0.0")

		assert context.previous_tag is None
		assert github.generate_release_notes.call_args.kwargs["previous_tag_name"] is None

	def test_previous_release_lookup_failure_is_soft(self, github, invocation):
		github.get_latest_release.side_effect = requests.ConnectionError("boom")
		github.generate_release_notes.return_value = {"body": "notes"}
		reporter = EventCapturingReporter()

		context = ContextCollector(github, invocation, progress_reporter=reporter).collect(True, "v1.0.0")

		assert context == GeneratedNotesContext(previous_tag=None, raw_notes="notes")
		assert any("No previous version found" in event.message for event in reporter.events)

	def test_generation_failure_degrades_to_empty_notes(self, github, invocation):
		"""Nothing found and nothing generated still yields a context, never an error."""
		github.get_latest_release.side_effect = requests.HTTPError("403 Forbidden")
		github.generate_release_notes.side_effect = requests.HTTPError("422 Unprocessable Entity")
		reporter = EventCapturingReporter()

		context = ContextCollector(github, invocation, progress_reporter=reporter).collect(True, "v1.0.0")

		assert context == GeneratedNotesContext(previous_tag=None, raw_notes="")
		assert any("Failed to generate github notes" in event.message for event in reporter.events)

	def test_never_checks_commits(self, github, invocation):
		github.get_pr_commits.return_value = []
		github.get_latest_release.return_value = None
		github.generate_release_notes.return_value = {"body": None}

		context = ContextCollector(github, invocation).collect(True, "v1.0.0")

		assert context.raw_notes == ""
		github.get_pr_commits.assert_not_called()

	def test_reports_context_source(self, github, invocation):
		github.get_latest_release.return_value = None
		github.generate_release_notes.return_value = {"body": ""}
		reporter = Mock(spec=ProgressReporter)

		ContextCollector(github, invocation, progress_reporter=reporter).collect(True, "v1.0.0")

		reporter.info.assert_any_call("Using context from Github Notes")
