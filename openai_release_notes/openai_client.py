from openai import OpenAI
from tenacity import (
	Retrying,
	stop_after_attempt,
	wait_random_exponential,
)


def get_chat_response(
	system: str,
	user: str,
	model: str,
	api_key: str,
	max_attempts: int = 1,
) -> str:
	"""Get a chat completion from OpenAI.

	Returns an empty string if the API answers without any content. Failed
	calls are only retried when `max_attempts` is greater than one.

	Raises:
		openai.OpenAIError: If the OpenAI API call fails after all attempts
	"""
	client = OpenAI(api_key=api_key, timeout=900.0)

	for attempt in Retrying(
		wait=wait_random_exponential(min=1, max=60),
		stop=stop_after_attempt(max_attempts),
		reraise=True,
	):
		with attempt:
			chat_completion = client.chat.completions.create(
				messages=[
					{
						"role": "system",
						"content": system,
					},
					{
						"role": "user",
						"content": user,
					},
				],
				model=model,
			)

	if not chat_completion.choices:
		return ""

	response_content: str | None = chat_completion.choices[0].message.content
	return response_content or ""
