from dataclasses import dataclass

from .commit import CommitRecord


@dataclass(frozen=True)
class CommitContext:
	"""Per-commit data of the pull request under release."""

	commits: tuple[CommitRecord, ...]


@dataclass(frozen=True)
class GeneratedNotesContext:
	"""Release notes generated by GitHub, to be refined by the model.

	`raw_notes` is empty when GitHub could not generate them.
	"""

	previous_tag: str | None
	raw_notes: str


ReleaseContext = CommitContext | GeneratedNotesContext
