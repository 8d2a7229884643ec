#!/usr/bin/env python
"""OpenAI Release Notes CLI."""

import logging
from pathlib import Path

import typer

from .adapters.cli_progress import CLIProgressReporter
from .core.config import ReleaseNotesConfig
from .core.config_loader import ActionInputsConfigLoader, ConfigLoader, EnvConfigLoader, TomlConfigLoader
from .generator import ReleaseNotesGenerator
from .models import InvocationContext, Repository
from .models.invocation import PULL_REQUEST_EVENT
from .ui import CLI

logger = logging.getLogger(__name__)

app = typer.Typer(
	help="Write release notes for a pull request with OpenAI and publish them as a GitHub release",
	no_args_is_help=True,
)

ConfigPathOption = typer.Option(None, "--config-path", help="Read configuration from a TOML file")
EnvFileOption = typer.Option(None, "--env-file", help="Read configuration from a .env file")
ReleaseVersionOption = typer.Option(None, "--release-version", help="Override the release version")
RepoOption = typer.Option(None, "--repo", help="Repository as owner/name, instead of GITHUB_REPOSITORY")
PullRequestOption = typer.Option(None, "--pr", help="Pull request number, used together with --repo")
ShaOption = typer.Option("", "--sha", help="Target commit of the release, used together with --repo")


@app.callback()
def callback(
	log_level: str = typer.Option("WARNING", "--log-level", envvar="LOG_LEVEL", help="Python logging level"),
):
	"""Write release notes for a pull request with OpenAI."""
	level = log_level.upper()
	if level not in logging.getLevelNamesMapping():
		raise typer.BadParameter(f"Unknown log level: {log_level}", param_hint="--log-level")

	logging.basicConfig(
		level=level,
		format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
	)


@app.command()
def run(
	config_path: Path | None = ConfigPathOption,
	env_file: Path | None = EnvFileOption,
	release_version: str | None = ReleaseVersionOption,
	repo: str | None = RepoOption,
	pr: int | None = PullRequestOption,
	sha: str = ShaOption,
	quiet: bool = typer.Option(False, "--quiet", help="Only show errors and the result"),
):
	"""Generate the release notes and create the release.

	Without options, inputs are read the way a GitHub Action receives them
	(INPUT_* environment variables) and the pull request from the runner's
	GITHUB_* variables.
	"""
	reporter = CLIProgressReporter(CLI(), quiet=quiet)
	try:
		config = load_config(config_path, env_file, release_version)
		invocation = load_invocation(repo, pr, sha)
		ReleaseNotesGenerator(config, invocation, reporter).run()
	except Exception as e:
		logger.debug("Run failed", exc_info=True)
		reporter.error(f"Error in run function: {str(e) or 'Failed to run the action'}")
		raise typer.Exit(code=1) from e


@app.command()
def prompt(
	config_path: Path | None = ConfigPathOption,
	env_file: Path | None = EnvFileOption,
	release_version: str | None = ReleaseVersionOption,
	repo: str | None = RepoOption,
	pr: int | None = PullRequestOption,
	sha: str = ShaOption,
):
	"""Print the prompt that would be sent to OpenAI, without calling it or creating a release."""
	cli = CLI()
	try:
		config = load_config(config_path, env_file, release_version)
		invocation = load_invocation(repo, pr, sha)
		reporter = CLIProgressReporter(cli, quiet=True)
		rendered = ReleaseNotesGenerator(config, invocation, reporter).build_prompt()
	except Exception as e:
		logger.debug("Rendering the prompt failed", exc_info=True)
		cli.show_error(f"Error in run function: {str(e) or 'Failed to render the prompt'}")
		raise typer.Exit(code=1) from e

	cli.show_text(rendered.text)


def load_config(
	config_path: Path | None = None,
	env_file: Path | None = None,
	release_version: str | None = None,
) -> ReleaseNotesConfig:
	loader: ConfigLoader
	if config_path:
		loader = TomlConfigLoader(config_path, version=release_version)
	elif env_file:
		loader = EnvConfigLoader(env_file)
	else:
		loader = ActionInputsConfigLoader()

	config = loader.load()
	if release_version:
		config.version = release_version
	return config


def load_invocation(repo: str | None = None, pr: int | None = None, sha: str = "") -> InvocationContext:
	if not repo:
		return InvocationContext.from_environment()

	repository = Repository.from_slug(repo)
	return InvocationContext(
		event_name=PULL_REQUEST_EVENT,
		owner=repository.owner,
		repo=repository.name,
		sha=sha,
		pull_request_number=pr,
	)


if __name__ == "__main__":
	app()
