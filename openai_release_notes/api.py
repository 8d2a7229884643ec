"""High-level API for library usage of openai_release_notes."""

from .core.config import (
	DEFAULT_LANGUAGE,
	DEFAULT_MODEL,
	GitHubConfig,
	OpenAIConfig,
	PromptConfig,
	ReleaseNotesConfig,
)
from .core.interfaces import LoggingProgressReporter, ProgressReporter
from .exceptions import ConfigurationError
from .generator import ReleaseNotesGenerator
from .models import InvocationContext, ReleaseSubmission, RenderedPrompt


class ReleaseNotesClient:
	"""High-level client for generating and publishing release notes."""

	def __init__(
		self,
		config: ReleaseNotesConfig,
		progress_reporter: ProgressReporter | None = None,
	):
		self.config = config
		self.progress_reporter = progress_reporter or LoggingProgressReporter()

	def render_prompt(self, invocation: InvocationContext) -> RenderedPrompt:
		"""Return the prompt for the pull request, without calling OpenAI."""
		return self._generator(invocation).build_prompt()

	def generate_release_notes(self, invocation: InvocationContext) -> str:
		"""Generate release notes for the pull request of `invocation`.

		Returns:
			The notes as returned by the model, in markdown. Empty if the model
			returned nothing.
		"""
		return self._generator(invocation).generate()

	def publish_release(self, invocation: InvocationContext) -> ReleaseSubmission:
		"""Generate release notes and create a release with them on GitHub."""
		return self._generator(invocation).run()

	def _generator(self, invocation: InvocationContext) -> ReleaseNotesGenerator:
		return ReleaseNotesGenerator(self.config, invocation, self.progress_reporter)


class ReleaseNotesBuilder:
	"""Builder pattern for constructing ReleaseNotesClient."""

	def __init__(self):
		self._github_token = None
		self._openai_key = None
		self._openai_model = DEFAULT_MODEL
		self._version = None
		self._language = DEFAULT_LANGUAGE
		self._mention_commits_and_prs = False
		self._use_github_generated_notes = False
		self._progress_reporter = None

	def with_github_token(self, token: str) -> "ReleaseNotesBuilder":
		"""Set GitHub authentication token."""
		self._github_token = token
		return self

	def with_openai(self, api_key: str, model: str = DEFAULT_MODEL) -> "ReleaseNotesBuilder":
		"""Set OpenAI configuration."""
		self._openai_key = api_key
		self._openai_model = model
		return self

	def with_version(self, version: str) -> "ReleaseNotesBuilder":
		"""Set the tag and name of the release to create."""
		self._version = version
		return self

	def with_language(self, language: str) -> "ReleaseNotesBuilder":
		self._language = language
		return self

	def with_mentions(self, mention: bool = True) -> "ReleaseNotesBuilder":
		"""Let the notes link the commits and PRs they describe."""
		self._mention_commits_and_prs = mention
		return self

	def with_github_generated_notes(self, use: bool = True) -> "ReleaseNotesBuilder":
		"""Refine the notes GitHub generates instead of reading the commits."""
		self._use_github_generated_notes = use
		return self

	def with_progress_reporter(self, reporter: ProgressReporter) -> "ReleaseNotesBuilder":
		"""Set custom progress reporter."""
		self._progress_reporter = reporter
		return self

	def build(self) -> ReleaseNotesClient:
		"""Build the client with configured options.

		Raises:
			ConfigurationError: If required configuration is missing
		"""
		if not self._openai_key:
			raise ConfigurationError("OpenAI API key is required")
		if not self._version:
			raise ConfigurationError("Release version is required")

		config = ReleaseNotesConfig(
			openai=OpenAIConfig(api_key=self._openai_key, model=self._openai_model),
			version=self._version,
			github=GitHubConfig(token=self._github_token),
			prompt=PromptConfig(
				language=self._language,
				mention_commits_and_prs=self._mention_commits_and_prs,
			),
			use_github_generated_notes=self._use_github_generated_notes,
		)

		return ReleaseNotesClient(config, self._progress_reporter)
