from dataclasses import dataclass, field

from ..exceptions import ConfigurationError

DEFAULT_MODEL = "gpt-4o"
DEFAULT_LANGUAGE = "en"


@dataclass
class GitHubConfig:
	"""GitHub API settings.

	Attributes:
		token: Token used for the API. Optional, but creating a release needs one.
		timeout: Seconds to wait for each API response.
		max_retries: Retries on 5xx responses. No retries by default.
	"""

	token: str | None = None
	timeout: float = 30.0
	max_retries: int = 0

	def __post_init__(self):
		if self.max_retries < 0:
			raise ConfigurationError("max_retries must not be negative")


@dataclass
class OpenAIConfig:
	api_key: str
	model: str = DEFAULT_MODEL
	max_attempts: int = 1

	def __post_init__(self):
		if not self.api_key:
			raise ConfigurationError("OpenAI API key is required")
		if not self.model:
			self.model = DEFAULT_MODEL
		if self.max_attempts < 1:
			raise ConfigurationError("max_attempts must be at least 1")


@dataclass(frozen=True)
class PromptConfig:
	"""Settings that shape the instructions sent to the model.

	`language` is passed to the model verbatim, e.g. "en" or "Portuguese".
	"""

	language: str = DEFAULT_LANGUAGE
	mention_commits_and_prs: bool = False


@dataclass
class ReleaseNotesConfig:
	openai: OpenAIConfig
	version: str
	github: GitHubConfig = field(default_factory=GitHubConfig)
	prompt: PromptConfig = field(default_factory=PromptConfig)
	use_github_generated_notes: bool = False

	def __post_init__(self):
		if not self.version:
			raise ConfigurationError("Release version is required")
