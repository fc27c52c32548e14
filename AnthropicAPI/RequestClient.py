"""
Authenticated HTTP transport for AnthropicAPI.
"""

from typing import Any, Dict, Optional
import logging
import json
import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
DEFAULT_API_VERSION = "2023-06-01"

class APIException(Exception):
	'''
	Base class for every failure raised by RequestClient.post.
	'''
	def __init__(self, url:str, exception:Optional[Exception], description:str):
		self.url = url
		self.exception = exception
		cause_str = ''
		if exception is not None:
			cause_str = f" with exception:\n```txt\n{str(exception)}\n```"
		super().__init__(f"Request to '{url}' {description}{cause_str}")

class APIConnectionError(APIException):
	'''The request never produced an HTTP response (DNS, TLS, refused, timeout...).'''
	def __init__(self, url:str, exception:Exception):
		super().__init__(url, exception, "failed to reach the API")

class APIStatusError(APIException):
	'''The API answered with a non 2xx status.'''
	def __init__(self, url:str, status_code:int, body:str):
		self.status_code = status_code
		self.body = body
		try:
			self.body_json = json.loads(body)
		except ValueError:
			self.body_json = None
		super().__init__(url, None, f"returned HTTP {status_code}:\n```txt\n{body}\n```")

class APIResponseParseError(APIException):
	'''The API answered 2xx but the body was not valid JSON.'''
	def __init__(self, url:str, exception:Exception, body:str):
		self.body = body
		super().__init__(url, exception, "returned a body that is not valid JSON")

class RequestClient:
	"""Performs authenticated JSON POST requests against the API."""

	def __init__(
		self,
		api_key: str,
		base_url: str = DEFAULT_BASE_URL,
		anthropic_version: str = DEFAULT_API_VERSION,
		session: Optional[requests.Session] = None
	):
		"""
		Initialize the request client.

		Args:
			api_key: Credential sent in the x-api-key header. It is sent as
				given, even when empty.
			base_url: Prefix every endpoint path is appended to
			anthropic_version: Value of the anthropic-version header
			session: Optional pre-configured requests session
		"""
		self._api_key = api_key
		self.base_url = base_url.rstrip('/')
		self.anthropic_version = anthropic_version
		self.session = session if session is not None else requests.Session()

	@property
	def api_key(self) -> str:
		return self._api_key

	def url_for(self, path: str) -> str:
		'''Full URL for an endpoint path such as "/messages".'''
		return f"{self.base_url}{path}"

	def headers(self) -> Dict[str, str]:
		return {
			"content-type": "application/json",
			"x-api-key": self._api_key,
			"anthropic-version": self.anthropic_version,
		}

	def post(self, path: str, body: Dict[str, Any]) -> Any:
		"""
		POST body as JSON to base_url + path and return the parsed response.

		Args:
			path: Endpoint suffix, eg "/messages"
			body: JSON serializable request body

		Returns:
			The decoded JSON response, untouched

		Raises:
			APIConnectionError: No response was received
			APIStatusError: The response status was not 2xx
			APIResponseParseError: The response body was not JSON
		"""
		url = self.url_for(path)
		try:
			response = self.session.post(url, headers=self.headers(), json=body)
		except requests.RequestException as e:
			raise APIConnectionError(url, e) from e

		logger.debug("POST %s -> %s", url, response.status_code)
		if not 200 <= response.status_code < 300:
			raise APIStatusError(url, response.status_code, response.text)

		try:
			return response.json()
		except ValueError as e:
			raise APIResponseParseError(url, e, response.text) from e

	def close(self):
		self.session.close()

	def __enter__(self) -> 'RequestClient':
		return self

	def __exit__(self, *exc_info):
		self.close()
