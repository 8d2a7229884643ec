from dataclasses import dataclass


@dataclass(frozen=True)
class PRReference:
	"""A pull request associated with a commit."""

	label: str  # display form, e.g. "#123"
	url: str

	@classmethod
	def from_dict(cls, data: dict) -> "PRReference":
		return cls(
			label=f"#{data['number']}",
			url=data["html_url"],
		)

	def to_dict(self) -> dict[str, str]:
		return {"label": self.label, "url": self.url}

	def __str__(self):
		return f"[{self.label}]({self.url})"
