"""
Embeddings endpoint.
"""

from typing import List, Optional
from dataclasses import dataclass, field
from dataclasses_json import dataclass_json, config
from . import ApiRequest, BaseEndpoint, optional

@dataclass_json
@dataclass
class EmbeddingsRequest(ApiRequest):
	'''
	Request for embeddings of one or more input strings.
	'''

	model: str
	inputs: List[str] = field(metadata=config(field_name="input"))
	'''Strings to embed. Sent under the "input" key.'''

	input_type: Optional[str] = optional()
	truncation: Optional[bool] = optional()
	encoding_format: Optional[str] = optional()

	def with_input_type(self, input_type: str) -> 'EmbeddingsRequest':
		return self._set('input_type', input_type)

	def with_truncation(self, truncation: bool) -> 'EmbeddingsRequest':
		return self._set('truncation', truncation)

	def with_encoding_format(self, encoding_format: str) -> 'EmbeddingsRequest':
		return self._set('encoding_format', encoding_format)

class EmbeddingsApi(BaseEndpoint):
	"""Client for the embeddings endpoint."""
	path = "/embeddings"
