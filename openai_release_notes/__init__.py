"""OpenAI Release Notes - write GitHub release notes for a pull request with AI."""

# Public API exports for library usage
from .api import ReleaseNotesBuilder, ReleaseNotesClient
from .core.config import (
	GitHubConfig,
	OpenAIConfig,
	PromptConfig,
	ReleaseNotesConfig,
)
from .core.interfaces import (
	CompositeProgressReporter,
	LoggingProgressReporter,
	NullProgressReporter,
	ProgressEvent,
	ProgressReporter,
)
from .exceptions import (
	ConfigurationError,
	EmptyCompletionError,
	InvalidEventError,
	NoCommitsError,
	ReleaseNotesError,
)
from .prompt import build_prompt

__version__ = "1.0.0"

__all__ = [
	# Client classes
	"ReleaseNotesBuilder",
	"ReleaseNotesClient",
	"build_prompt",
	# Configuration
	"ReleaseNotesConfig",
	"GitHubConfig",
	"OpenAIConfig",
	"PromptConfig",
	# Errors
	"ReleaseNotesError",
	"ConfigurationError",
	"InvalidEventError",
	"NoCommitsError",
	"EmptyCompletionError",
	# Progress reporting
	"ProgressReporter",
	"ProgressEvent",
	"NullProgressReporter",
	"LoggingProgressReporter",
	"CompositeProgressReporter",
]
