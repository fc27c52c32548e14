"""
Messages endpoint.
"""

from typing import Any, Dict, List, Optional
from dataclasses import dataclass
from dataclasses_json import dataclass_json
from . import ApiRequest, BaseEndpoint, optional

@dataclass_json
@dataclass
class MessageRequest(ApiRequest):
	'''
	Request for the messages endpoint.

	model and messages are required, everything else is left
	out of the request unless set, either by keyword or with
	the chained with_* setters:

		MessageRequest(model, messages).with_max_tokens(1024).with_temperature(1.0)

	Each setter returns a new request, so a shared base request
	is never changed by requests derived from it.
	'''

	model: str
	'''Model name to generate the next message with.'''

	messages: List[Dict[str, Any]]
	'''Conversation so far, in order. Sent verbatim.'''

	max_tokens: Optional[int] = optional()
	temperature: Optional[float] = optional()
	stop_sequences: Optional[List[str]] = optional()
	system: Optional[str] = optional()
	top_p: Optional[float] = optional()
	top_k: Optional[int] = optional()
	metadata: Optional[Dict[str, Any]] = optional()

	def with_max_tokens(self, max_tokens: int) -> 'MessageRequest':
		'''Maximum number of tokens to generate.'''
		return self._set('max_tokens', max_tokens)

	def with_temperature(self, temperature: float) -> 'MessageRequest':
		'''Sampling temperature.'''
		return self._set('temperature', temperature)

	def with_stop_sequences(self, stop_sequences: List[str]) -> 'MessageRequest':
		'''Sequences at which generation stops.'''
		return self._set('stop_sequences', list(stop_sequences))

	def with_system(self, system: str) -> 'MessageRequest':
		return self._set('system', system)

	def with_top_p(self, top_p: float) -> 'MessageRequest':
		return self._set('top_p', top_p)

	def with_top_k(self, top_k: int) -> 'MessageRequest':
		return self._set('top_k', top_k)

	def with_metadata(self, metadata: Dict[str, Any]) -> 'MessageRequest':
		'''Opaque request metadata, eg {"user_id": ...}.'''
		return self._set('metadata', metadata)

class MessagesApi(BaseEndpoint):
	"""Client for the messages endpoint."""
	path = "/messages"

	def create(self, request: MessageRequest) -> Dict[str, Any]:
		"""
		Send a message request.

		Args:
			request: The MessageRequest to send

		Returns:
			The API response as a dictionary
		"""
		return super().create(request)
