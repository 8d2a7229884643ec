"""Render the instructions and facts sent to the completion service.

Everything here is pure: the same context and config always give the same
prompt, byte for byte.
"""

import json
import re

from .core.config import PromptConfig
from .models import CommitContext, CommitRecord, GeneratedNotesContext, ReleaseContext, RenderedPrompt

PR_MARKER = re.compile(r"\s*\(#\d+\)|(?<!\S)#\d+\b|https://github\.com/[^/\s]+/[^/\s]+/pull/\d+")
TRAILER = re.compile(r"^[A-Za-z-]+-by:.*$\n?", re.MULTILINE)
ATTRIBUTION = re.compile(r" by @[\w-]+(?: in\b)?")

OUTPUT_SKELETON = """   ```
   ## Features
   * This is a feature
   ## Fixes
   * This is a fix
   ```"""


def build_prompt(context: ReleaseContext, config: PromptConfig) -> RenderedPrompt:
	"""Render the prompt for a release context."""
	return RenderedPrompt(
		system=build_instructions(config),
		user=build_payload(context, config),
	)


def build_instructions(config: PromptConfig) -> str:
	if config.mention_commits_and_prs:
		mentions = "mention commits or PRs when possible and add a link in markdown format."
	else:
		mentions = "do not mention commits or PRs."

	rules = [
		mentions,
		"do not mention the users who made the changes.",
		"notes must consist of useful information about the new features or bug fixes.",
		"must be clear and concise.",
		"group as features and fixes if possible.",
		"must be organized with features first and then bug fixes.",
		f"must be written in the following language '{config.language}'.",
		"must be written in a friendly and professional tone.",
		"must be exactly what the information provided says, without adding anything.",
		"must be written user friendly.",
		"must be written in a markdown format.",
		"must have the following structure (do not add title, footer or any other content):",
	]
	lines = ["Your task is to write the release notes of a new version of the software following these rules:"]
	lines.extend(f" - {rule}" for rule in rules)
	lines.append(OUTPUT_SKELETON)
	return "\n".join(lines)


def build_payload(context: ReleaseContext, config: PromptConfig) -> str:
	if isinstance(context, CommitContext):
		return _commits_payload(context.commits, config)
	if isinstance(context, GeneratedNotesContext):
		return _generated_notes_payload(context, config)

	raise TypeError(f"Unsupported release context: {type(context).__name__}")


def _commits_payload(commits: tuple[CommitRecord, ...], config: PromptConfig) -> str:
	pseudonyms: dict[str, str] = {}
	entries = []
	for commit in commits:
		author_key = commit.author_name or commit.author_url
		if author_key not in pseudonyms:
			pseudonyms[author_key] = f"contributor-{len(pseudonyms) + 1}"

		entry: dict = {
			"message": clean_message(commit.message, keep_pr_markers=config.mention_commits_and_prs),
			"author": pseudonyms[author_key],
		}
		if config.mention_commits_and_prs:
			entry["prs"] = [pr.to_dict() for pr in commit.prs]
		entries.append(entry)

	fields = "commit message, author, PRs" if config.mention_commits_and_prs else "commit message, author"
	return (
		f"Use the following commits data to write the release notes ({fields}):\n"
		f"{json.dumps(entries, indent=2, ensure_ascii=False)}"
	)


def _generated_notes_payload(context: GeneratedNotesContext, config: PromptConfig) -> str:
	intro = (
		"Use the following notes generated by GitHub to write the release notes. "
		"Improve them, but do not add anything they do not say."
	)
	if context.previous_tag:
		intro += f"\nThe notes cover the changes since version '{context.previous_tag}'."

	notes = clean_notes(context.raw_notes, keep_pr_markers=config.mention_commits_and_prs)
	return f"{intro}\n{json.dumps(notes, ensure_ascii=False)}"


def clean_notes(notes: str, keep_pr_markers: bool) -> str:
	"""Drop "by @login in <pull url>" attributions from GitHub generated notes.

	Notes are returned unchanged when PR markers are kept.
	"""
	if keep_pr_markers:
		return notes

	notes = PR_MARKER.sub("", ATTRIBUTION.sub("", notes))
	return "\n".join(line.rstrip() for line in notes.splitlines())


def clean_message(message: str, keep_pr_markers: bool) -> str:
	"""Drop trailers like "Co-authored-by:" and, optionally, PR markers.

	Examples:
	'feat: add export (#12)' -> 'feat: add export' (markers dropped)
	'fix: typo\\n\\nSigned-off-by: Jane <jane@example.com>' -> 'fix: typo'
	"""
	message = TRAILER.sub("", message)
	if not keep_pr_markers:
		message = PR_MARKER.sub("", message)
	return message.strip()
