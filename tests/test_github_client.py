"""Tests for the GitHub client, with the HTTP session mocked out."""

from unittest.mock import Mock

import pytest
import requests

from openai_release_notes.github_client import GitHubClient
from openai_release_notes.models import PRReference, ReleaseSubmission, Repository

REPOSITORY = Repository.from_slug("acme/rockets")


def make_response(status_code: int = 200, json_data=None, links: dict | None = None) -> Mock:
	response = Mock(spec=requests.Response)
	response.status_code = status_code
	response.json.return_value = json_data
	response.links = links or {}
	if status_code >= 400:
		response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
	return response


@pytest.fixture
def client() -> GitHubClient:
	client = GitHubClient("ghp_test", timeout=5)
	client.session = Mock(spec=requests.Session)
	return client


def test_authorization_header():
	assert GitHubClient("ghp_test").session.headers["Authorization"] == "Bearer ghp_test"
	assert "Authorization" not in GitHubClient(None).session.headers


def test_get_pr_commits_follows_pagination(client):
	next_url = "https://api.github.com/repositories/1/pulls/7/commits?per_page=100&page=2"
	client.session.get.side_effect = [
		make_response(json_data=[{"sha": "a1"}, {"sha": "b2"}], links={"next": {"url": next_url}}),
		make_response(json_data=[{"sha": "c3"}]),
	]

	commits = client.get_pr_commits(REPOSITORY, 7)

	assert [c["sha"] for c in commits] == ["a1", "b2", "c3"]
	first, second = client.session.get.call_args_list
	assert first.args[0] == "https://api.github.com/repos/acme/rockets/pulls/7/commits"
	assert first.kwargs["params"] == {"per_page": 100}
	assert second.args[0] == next_url
	assert second.kwargs["params"] is None
	assert first.kwargs["timeout"] == 5


def test_get_prs_for_commit(client):
	client.session.get.return_value = make_response(
		json_data=[{"number": 3, "html_url": "https://github.com/acme/rockets/pull/3"}]
	)

	prs = client.get_prs_for_commit(REPOSITORY, "a1")

	assert prs == [PRReference("#3", "https://github.com/acme/rockets/pull/3")]
	assert client.session.get.call_args.args[0] == "https://api.github.com/repos/acme/rockets/commits/a1/pulls"


def test_get_latest_release(client):
	client.session.get.return_value = make_response(json_data={"tag_name": "v0.9.0"})
	assert client.get_latest_release(REPOSITORY) == {"tag_name": "v0.9.0"}


def test_no_latest_release(client):
	client.session.get.return_value = make_response(status_code=404)
	assert client.get_latest_release(REPOSITORY) is None


def test_latest_release_error(client):
	client.session.get.return_value = make_response(status_code=500)
	with pytest.raises(requests.HTTPError):
		client.get_latest_release(REPOSITORY)


def test_generate_release_notes_payload(client):
	client.session.post.return_value = make_response(json_data={"body": "notes"})

	client.generate_release_notes(REPOSITORY, "v1.0.0", target_commitish="abc", previous_tag_name="v0.9.0")

	assert client.session.post.call_args.kwargs["json"] == {
		"tag_name": "v1.0.0",
		"target_commitish": "abc",
		"previous_tag_name": "v0.9.0",
	}


def test_generate_release_notes_without_previous_tag(client):
	client.session.post.return_value = make_response(json_data={"body": "notes"})

	client.generate_release_notes(REPOSITORY, "v1.0.0")

	assert client.session.post.call_args.kwargs["json"] == {"tag_name": "v1.0.0"}


def test_create_release(client):
	client.session.post.return_value = make_response(status_code=201, json_data={"id": 1})
	submission = ReleaseSubmission(tag_name="v1.0.0", display_name="v1.0.0", body="notes")

	assert client.create_release(REPOSITORY, submission) == {"id": 1}
	assert client.session.post.call_args.args[0] == "https://api.github.com/repos/acme/rockets/releases"
	assert client.session.post.call_args.kwargs["json"] == {"tag_name": "v1.0.0", "name": "v1.0.0", "body": "notes"}
