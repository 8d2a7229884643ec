import os
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from ..exceptions import ConfigurationError
from .config import (
	DEFAULT_LANGUAGE,
	DEFAULT_MODEL,
	GitHubConfig,
	OpenAIConfig,
	PromptConfig,
	ReleaseNotesConfig,
)

TRUE_VALUES = {"true", "True", "TRUE"}
FALSE_VALUES = {"false", "False", "FALSE"}


def parse_bool(name: str, value: Any, default: bool = False) -> bool:
	"""Parse a boolean input the way GitHub Actions does.

	Empty or missing values fall back to the default.
	"""
	if value is None or value == "":
		return default
	if isinstance(value, bool):
		return value
	if value in TRUE_VALUES:
		return True
	if value in FALSE_VALUES:
		return False

	raise ConfigurationError(
		f"Input does not meet YAML 1.2 Core Schema specification: {name}. "
		"Support boolean input list: `true | True | TRUE | false | False | FALSE`"
	)


class ConfigLoader(ABC):
	@abstractmethod
	def load(self) -> ReleaseNotesConfig:
		"""Load configuration from source."""
		pass


class DictConfigLoader(ConfigLoader):
	"""Load from dictionary (for programmatic usage)."""

	def __init__(self, config_dict: dict[str, Any]):
		self.config_dict = config_dict

	def load(self) -> ReleaseNotesConfig:
		if not self.config_dict.get("openai_api_key"):
			raise ConfigurationError("openai_api_key is required")

		return ReleaseNotesConfig(
			openai=OpenAIConfig(
				api_key=self.config_dict["openai_api_key"],
				model=self.config_dict.get("model") or DEFAULT_MODEL,
				max_attempts=self.config_dict.get("max_attempts", 1),
			),
			version=self.config_dict.get("version", ""),
			github=GitHubConfig(
				token=self.config_dict.get("github_token"),
				timeout=self.config_dict.get("github_timeout", 30.0),
				max_retries=self.config_dict.get("github_max_retries", 0),
			),
			prompt=PromptConfig(
				language=self.config_dict.get("language") or DEFAULT_LANGUAGE,
				mention_commits_and_prs=parse_bool(
					"use_mention_commits_prs", self.config_dict.get("use_mention_commits_prs")
				),
			),
			use_github_generated_notes=parse_bool(
				"use_github_generated_notes", self.config_dict.get("use_github_generated_notes")
			),
		)


class ActionInputsConfigLoader(ConfigLoader):
	"""Load the inputs a GitHub Action receives as INPUT_* environment variables.

	The runner keeps the hyphens of the input names ("INPUT_OPENAI-API-KEY");
	composite steps usually pass them with underscores instead. Both work.
	"""

	def __init__(self, environ: Mapping[str, str] | None = None):
		self.environ = os.environ if environ is None else environ

	def get_input(self, name: str) -> str:
		key = f"INPUT_{name.replace(' ', '_').upper()}"
		value = self.environ.get(key)
		if value is None:
			value = self.environ.get(key.replace("-", "_"), "")
		return value.strip()

	def load(self) -> ReleaseNotesConfig:
		openai_key = self.get_input("openai-api-key")
		version = self.get_input("version")

		if not openai_key:
			raise ConfigurationError("Input required and not supplied: openai-api-key")
		if not version:
			raise ConfigurationError("Input required and not supplied: version")

		return ReleaseNotesConfig(
			openai=OpenAIConfig(
				api_key=openai_key,
				model=self.get_input("model") or DEFAULT_MODEL,
			),
			version=version,
			github=GitHubConfig(token=self.get_input("token") or self.environ.get("GITHUB_TOKEN") or None),
			prompt=PromptConfig(
				language=self.get_input("language") or DEFAULT_LANGUAGE,
				mention_commits_and_prs=parse_bool(
					"use-mention-commits-prs", self.get_input("use-mention-commits-prs")
				),
			),
			use_github_generated_notes=parse_bool(
				"use-github-generated-notes", self.get_input("use-github-generated-notes")
			),
		)


class EnvConfigLoader(ConfigLoader):
	"""Load from .env file (for local runs)."""

	def __init__(self, env_path: str | Path = ".env"):
		self.env_path = env_path

	def load(self) -> ReleaseNotesConfig:
		config = dotenv_values(self.env_path)

		openai_key = config.get("OPENAI_API_KEY")
		version = config.get("RELEASE_VERSION")

		if not openai_key:
			raise ConfigurationError("OPENAI_API_KEY is required in .env file")
		if not version:
			raise ConfigurationError("RELEASE_VERSION is required in .env file")

		return ReleaseNotesConfig(
			openai=OpenAIConfig(
				api_key=openai_key,
				model=config.get("OPENAI_MODEL") or DEFAULT_MODEL,
				max_attempts=int(config.get("OPENAI_MAX_ATTEMPTS") or "1"),
			),
			version=version,
			github=GitHubConfig(
				token=config.get("GH_TOKEN") or None,
				timeout=float(config.get("GH_TIMEOUT") or "30"),
				max_retries=int(config.get("GH_MAX_RETRIES") or "0"),
			),
			prompt=PromptConfig(
				language=config.get("LANGUAGE") or DEFAULT_LANGUAGE,
				mention_commits_and_prs=parse_bool("USE_MENTION_COMMITS_PRS", config.get("USE_MENTION_COMMITS_PRS")),
			),
			use_github_generated_notes=parse_bool(
				"USE_GITHUB_GENERATED_NOTES", config.get("USE_GITHUB_GENERATED_NOTES")
			),
		)


class TomlConfigLoader(ConfigLoader):
	"""Load from TOML file."""

	DEFAULT_CONFIG_PATH = Path.home() / ".openai-release-notes" / "config.toml"

	def __init__(self, config_path: Path | str | None = None, version: str | None = None):
		"""Initialize TOML config loader.

		Args:
			config_path: Path to config file. If None, uses DEFAULT_CONFIG_PATH.
			version: Release version, overrides the `version` key of the file.
		"""
		if config_path is None:
			self.config_path = self.DEFAULT_CONFIG_PATH
		else:
			self.config_path = Path(config_path)
		self.version = version

	def load(self) -> ReleaseNotesConfig:
		"""Load configuration from TOML file.

		Raises:
			FileNotFoundError: If config file doesn't exist
			ConfigurationError: If required fields are missing or invalid
		"""
		if not self.config_path.exists():
			raise FileNotFoundError(
				f"Config file not found at {self.config_path}. "
				f"Create it with the required fields or use --config-path to specify a different location."
			)

		with open(self.config_path, "rb") as f:
			config = tomllib.load(f)

		github_config = config.get("github", {})
		openai_config = config.get("openai", {})
		prompt_config = config.get("prompt", {})

		openai_key = openai_config.get("api_key")
		if not openai_key:
			raise ConfigurationError("openai.api_key is required in config file")

		return ReleaseNotesConfig(
			openai=OpenAIConfig(
				api_key=openai_key,
				model=openai_config.get("model", DEFAULT_MODEL),
				max_attempts=openai_config.get("max_attempts", 1),
			),
			version=self.version or config.get("version", ""),
			github=GitHubConfig(
				token=github_config.get("token"),
				timeout=github_config.get("timeout", 30.0),
				max_retries=github_config.get("max_retries", 0),
			),
			prompt=PromptConfig(
				language=prompt_config.get("language", DEFAULT_LANGUAGE),
				mention_commits_and_prs=parse_bool(
					"prompt.mention_commits_and_prs", prompt_config.get("mention_commits_and_prs")
				),
			),
			use_github_generated_notes=parse_bool(
				"use_github_generated_notes", config.get("use_github_generated_notes")
			),
		)
