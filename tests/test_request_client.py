import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

import requests
from AnthropicAPI.RequestClient import (
	RequestClient,
	APIException,
	APIConnectionError,
	APIStatusError,
	APIResponseParseError,
	DEFAULT_BASE_URL,
)
from stub_session import StubSession, make_response


class TestRequestClient(unittest.TestCase):
	"""Test the authenticated POST transport."""

	def test_post_sends_auth_and_json_headers(self):
		session = StubSession(make_response(200, '{"ok": true}'))
		client = RequestClient("secret-key", "https://example.test/v1", session=session)

		result = client.post("/messages", {"model": "m"})

		self.assertEqual(result, {"ok": True})
		self.assertEqual(len(session.calls), 1)
		call = session.calls[0]
		self.assertEqual(call["url"], "https://example.test/v1/messages")
		self.assertEqual(call["json"], {"model": "m"})
		self.assertEqual(call["headers"]["x-api-key"], "secret-key")
		self.assertEqual(call["headers"]["content-type"], "application/json")
		self.assertEqual(call["headers"]["anthropic-version"], "2023-06-01")

	def test_base_url_trailing_slash_is_stripped(self):
		client = RequestClient("k", "https://example.test/v1/", session=StubSession())
		self.assertEqual(client.url_for("/complete"), "https://example.test/v1/complete")
		self.assertEqual(RequestClient("k", session=StubSession()).base_url, DEFAULT_BASE_URL)

	def test_success_json_is_returned_verbatim(self):
		body = '{"id": "msg_1", "content": [{"type": "text", "text": "Hi"}], "usage": {"input_tokens": 3}}'
		client = RequestClient("k", session=StubSession(make_response(201, body)))

		result = client.post("/messages", {})

		self.assertEqual(result["content"], [{"type": "text", "text": "Hi"}])
		self.assertEqual(result["usage"], {"input_tokens": 3})

	def test_non_2xx_raises_status_error(self):
		for status in (301, 400, 401, 404, 429, 500, 529):
			body = '{"type": "error", "error": {"type": "x", "message": "nope"}}'
			client = RequestClient("k", session=StubSession(make_response(status, body)))
			with self.assertRaises(APIStatusError) as ctx:
				client.post("/messages", {})
			self.assertEqual(ctx.exception.status_code, status)
			self.assertEqual(ctx.exception.body, body)
			self.assertEqual(ctx.exception.body_json["error"]["message"], "nope")
			self.assertIn(str(status), str(ctx.exception))

	def test_non_2xx_with_non_json_body(self):
		client = RequestClient("k", session=StubSession(make_response(502, "<html>Bad Gateway</html>")))
		with self.assertRaises(APIStatusError) as ctx:
			client.post("/messages", {})
		self.assertIsNone(ctx.exception.body_json)
		self.assertEqual(ctx.exception.body, "<html>Bad Gateway</html>")

	def test_malformed_body_raises_parse_error(self):
		client = RequestClient("k", session=StubSession(make_response(200, "not json {")))
		with self.assertRaises(APIResponseParseError) as ctx:
			client.post("/messages", {})
		self.assertEqual(ctx.exception.body, "not json {")
		self.assertIsInstance(ctx.exception, APIException)

	def test_transport_failure_raises_connection_error(self):
		cause = requests.ConnectionError("connection refused")
		client = RequestClient("k", "https://example.test", session=StubSession(error=cause))
		with self.assertRaises(APIConnectionError) as ctx:
			client.post("/messages", {})
		self.assertIs(ctx.exception.exception, cause)
		self.assertIs(ctx.exception.__cause__, cause)
		self.assertEqual(ctx.exception.url, "https://example.test/messages")
		self.assertIn("connection refused", str(ctx.exception))

	def test_empty_credential_still_calls_and_surfaces_auth_error(self):
		body = '{"type": "error", "error": {"type": "authentication_error", "message": "invalid x-api-key"}}'
		session = StubSession(make_response(401, body))
		client = RequestClient("", session=session)

		with self.assertRaises(APIStatusError) as ctx:
			client.post("/messages", {"model": "m"})

		self.assertEqual(len(session.calls), 1)
		self.assertEqual(session.calls[0]["headers"]["x-api-key"], "")
		self.assertEqual(ctx.exception.status_code, 401)

	def test_client_is_reusable(self):
		session = StubSession(make_response(200, '{"n": 1}'))
		client = RequestClient("k", session=session)
		client.post("/a", {"x": 1})
		client.post("/b", {"x": 2})
		self.assertEqual([c["url"] for c in session.calls], [f"{DEFAULT_BASE_URL}/a", f"{DEFAULT_BASE_URL}/b"])
		self.assertEqual(client.api_key, "k")

	def test_context_manager_closes_session(self):
		session = StubSession()
		with RequestClient("k", session=session):
			pass
		self.assertTrue(session.closed)

	def test_post_logs_one_debug_record_without_the_api_key(self):
		client = RequestClient("sk-secret", "https://example.test/v1", session=StubSession(make_response(200, '{}')))

		with self.assertLogs("AnthropicAPI.RequestClient", level="DEBUG") as logs:
			client.post("/messages", {"model": "m"})

		self.assertEqual(len(logs.records), 1)
		message = logs.records[0].getMessage()
		self.assertIn("https://example.test/v1/messages", message)
		self.assertIn("200", message)
		for record in logs.records:
			self.assertNotIn("sk-secret", record.getMessage())

if __name__ == '__main__':
	unittest.main()
