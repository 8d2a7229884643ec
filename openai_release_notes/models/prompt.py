from dataclasses import dataclass


@dataclass(frozen=True)
class RenderedPrompt:
	"""Instructions (system message) and facts (user message) for the model."""

	system: str
	user: str

	@property
	def text(self) -> str:
		return f"{self.system}\n\n{self.user}"

	def __str__(self):
		return self.text
