"""
Text completions endpoint.
"""

from typing import Any, Dict, List, Optional
from dataclasses import dataclass
from dataclasses_json import dataclass_json
from . import ApiRequest, BaseEndpoint, optional

@dataclass_json
@dataclass
class TextCompletionRequest(ApiRequest):
	'''
	Request for the legacy text completions endpoint.
	'''

	model: str
	prompt: str
	'''Prompt text the completion continues from.'''

	max_tokens_to_sample: Optional[int] = optional()
	stop_sequences: Optional[List[str]] = optional()
	temperature: Optional[float] = optional()
	top_p: Optional[float] = optional()
	'''Nucleus sampling parameter.'''
	top_k: Optional[int] = optional()
	'''Only sample from the top k most likely tokens.'''

	def with_max_tokens_to_sample(self, max_tokens_to_sample: int) -> 'TextCompletionRequest':
		return self._set('max_tokens_to_sample', max_tokens_to_sample)

	def with_stop_sequences(self, stop_sequences: List[str]) -> 'TextCompletionRequest':
		return self._set('stop_sequences', list(stop_sequences))

	def with_temperature(self, temperature: float) -> 'TextCompletionRequest':
		return self._set('temperature', temperature)

	def with_top_p(self, top_p: float) -> 'TextCompletionRequest':
		return self._set('top_p', top_p)

	def with_top_k(self, top_k: int) -> 'TextCompletionRequest':
		return self._set('top_k', top_k)

class TextCompletionsApi(BaseEndpoint):
	"""Client for the text completions endpoint."""
	path = "/complete"
