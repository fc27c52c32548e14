"""
Endpoint system for AnthropicAPI.
"""

from typing import Any, Dict, TypeVar
from dataclasses import field, replace
from dataclasses_json import config
from ..RequestClient import RequestClient

R = TypeVar('R', bound='ApiRequest')

def _is_unset(value: Any) -> bool:
	return value is None

def optional():
	'''
	Dataclass field that defaults to None and is left out
	of the request body for as long as it stays None.
	'''
	return field(default=None, metadata=config(exclude=_is_unset))

class ApiRequest:
	'''
	Mixin for the dataclass_json request records of each endpoint.
	'''
	def _set(self: R, name: str, value: Any) -> R:
		'''Copy of this request with name set to value. self is left unchanged.'''
		return replace(self, **{name: value})

	def to_body(self) -> Dict[str, Any]:
		"""The JSON request body, with unset optional fields omitted."""
		return self.to_dict()

class BaseEndpoint:
	"""Base class for all endpoint APIs."""

	path: str = None
	'''Suffix appended to the request client's base url.'''

	def __init__(self, request_client: RequestClient):
		self.request_client = request_client

	def create(self, request: ApiRequest) -> Any:
		"""
		Send request to this endpoint.

		Args:
			request: The request record to serialize

		Returns:
			The API's JSON response, unchanged
		"""
		return self.request_client.post(self.path, request.to_body())
