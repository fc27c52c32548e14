"""
AnthropicAPI - A small client for the Anthropic Messages, Text Completions and Embeddings APIs.
"""

__version__ = "0.1.0"

from .RequestClient import (
	RequestClient,
	APIException,
	APIConnectionError,
	APIStatusError,
	APIResponseParseError,
	DEFAULT_BASE_URL,
	DEFAULT_API_VERSION
)
from .endpoints.messages import MessageRequest, MessagesApi
from .endpoints.text_completions import TextCompletionRequest, TextCompletionsApi
from .endpoints.embeddings import EmbeddingsRequest, EmbeddingsApi
from .client import AnthropicClient
