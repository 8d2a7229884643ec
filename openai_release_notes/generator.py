import logging

from .collector import ContextCollector
from .core.config import ReleaseNotesConfig
from .core.execution import ExecutionStrategy
from .core.interfaces import NullProgressReporter, ProgressEvent, ProgressReporter
from .github_client import GitHubClient
from .models import InvocationContext, ReleaseSubmission, RenderedPrompt
from .openai_client import get_chat_response
from .prompt import build_prompt
from .publisher import ReleasePublisher

logger = logging.getLogger(__name__)


class ReleaseNotesGenerator:
	"""Run collector, prompt, completion and publisher, in that order."""

	def __init__(
		self,
		config: ReleaseNotesConfig,
		invocation: InvocationContext,
		progress_reporter: ProgressReporter | None = None,
		github: GitHubClient | None = None,
		execution_strategy: ExecutionStrategy | None = None,
	):
		self.config = config
		self.invocation = invocation
		self.progress_reporter = progress_reporter or NullProgressReporter()
		self.github = github or GitHubClient(
			config.github.token,
			timeout=config.github.timeout,
			max_retries=config.github.max_retries,
		)
		self.execution_strategy = execution_strategy

	def build_prompt(self) -> RenderedPrompt:
		"""Collect the release context and render the prompt for it."""
		self.invocation.require_pull_request()

		collector = ContextCollector(
			self.github,
			self.invocation,
			execution_strategy=self.execution_strategy,
			progress_reporter=self.progress_reporter,
		)
		context = collector.collect(self.config.use_github_generated_notes, self.config.version)
		return build_prompt(context, self.config.prompt)

	def generate(self) -> str:
		"""Return the release notes written by the model. May be empty."""
		prompt = self.build_prompt()

		self.progress_reporter.info(f"OpenAI key: {self.config.openai.api_key[:6]}...")
		logger.debug("Requesting completion from %s", self.config.openai.model)
		return get_chat_response(
			prompt.system,
			prompt.user,
			model=self.config.openai.model,
			api_key=self.config.openai.api_key,
			max_attempts=self.config.openai.max_attempts,
		)

	def run(self) -> ReleaseSubmission:
		"""Generate the release notes and publish them as a new release."""
		self.progress_reporter.info("Running ai release notes action")
		notes = self.generate()

		publisher = ReleasePublisher(self.github, self.invocation.repository)
		submission = publisher.publish(self.config.version, notes)

		self.progress_reporter.report(
			ProgressEvent(
				type="release_notes",
				message=submission.body,
				metadata={"heading": f"Release {submission.display_name}"},
			)
		)
		self.progress_reporter.success(f"Created release {submission.tag_name} in {self.invocation.repository}")
		return submission
