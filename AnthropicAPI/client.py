"""
Client API for AnthropicAPI.
"""

from typing import Optional
import os
import requests
from .RequestClient import RequestClient, DEFAULT_BASE_URL, DEFAULT_API_VERSION
from .endpoints.messages import MessagesApi
from .endpoints.text_completions import TextCompletionsApi
from .endpoints.embeddings import EmbeddingsApi

API_KEY_ENV = "ANTHROPIC_API_KEY"
BASE_URL_ENV = "ANTHROPIC_BASE_URL"

class AnthropicClient:
	"""Entry point exposing every endpoint through one request client."""

	def __init__(
		self,
		api_key: str,
		base_url: str = DEFAULT_BASE_URL,
		anthropic_version: str = DEFAULT_API_VERSION,
		session: Optional[requests.Session] = None
	):
		"""
		Initialize the client.

		Args:
			api_key: The API key to authenticate with
			base_url: The base URL of the API
			anthropic_version: Value sent in the anthropic-version header
			session: Optional requests session to send requests through
		"""
		self.request_client = RequestClient(api_key, base_url, anthropic_version, session)
		self.messages = MessagesApi(self.request_client)
		self.text_completions = TextCompletionsApi(self.request_client)
		self.embeddings = EmbeddingsApi(self.request_client)

	@property
	def base_url(self) -> str:
		return self.request_client.base_url

	@staticmethod
	def from_env(api_key_env: Optional[str] = None, base_url: Optional[str] = None, **kwargs) -> 'AnthropicClient':
		'''
		Create a client from environment variables.

		The key is read from api_key_env (ANTHROPIC_API_KEY by default) and the
		base url, when not passed, from ANTHROPIC_BASE_URL or the default.
		'''
		env_var = api_key_env or API_KEY_ENV
		api_key = os.environ.get(env_var)
		if api_key is None:
			raise ValueError(f"API key environment variable '{env_var}' not set!")
		base_url = base_url or os.environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL
		return AnthropicClient(api_key, base_url, **kwargs)

	def close(self):
		self.request_client.close()

	def __enter__(self) -> 'AnthropicClient':
		return self

	def __exit__(self, *exc_info):
		self.close()
