class ReleaseNotesError(Exception):
	"""Base class for errors that abort a release notes run."""


class ConfigurationError(ReleaseNotesError, ValueError):
	"""Raised when a required input is missing or invalid."""


class InvalidEventError(ConfigurationError):
	"""Raised when the run was not triggered by a pull request."""


class NoCommitsError(ReleaseNotesError):
	"""Raised when the pull request under release has no commits."""


class EmptyCompletionError(ReleaseNotesError):
	"""Raised when the completion service returns no usable text."""
