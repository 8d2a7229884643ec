from dataclasses import dataclass


@dataclass(frozen=True)
class ReleaseSubmission:
	tag_name: str
	display_name: str
	body: str

	def to_payload(self) -> dict[str, str]:
		return {
			"tag_name": self.tag_name,
			"name": self.display_name,
			"body": self.body,
		}
