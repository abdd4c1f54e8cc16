import unittest

from unified_chat.errors import MalformedResponse, UnsupportedProviderError
from unified_chat.providers import anthropic, get_provider, ollama, provider_names

ANTHROPIC_SUCCESS = {
    "id": "msg_013Zva2CMHLNnXjNJJKqJ2EF",
    "type": "message",
    "role": "assistant",
    "model": "claude-3-7-sonnet-20250219",
    "content": [{"type": "text", "text": "Hi! My name is Claude."}],
    "stop_reason": "end_turn",
    "stop_sequence": None,
    "usage": {"input_tokens": 10, "output_tokens": 12},
}


class RegistryTests(unittest.TestCase):
    def test_known_providers(self) -> None:
        self.assertEqual(set(provider_names()), {"anthropic", "ollama"})
        self.assertEqual(get_provider("anthropic").path, "messages")
        self.assertEqual(get_provider("ollama").path, "chat")

    def test_unknown_provider(self) -> None:
        with self.assertRaises(UnsupportedProviderError):
            get_provider("together")


class AnthropicErrorTests(unittest.TestCase):
    def test_nested_envelope(self) -> None:
        body = {"error": {"message": "Invalid request", "type": "invalid_request_error"}, "type": "error"}
        error = anthropic.normalize_error(body)
        self.assertEqual(error.message, "Invalid request")
        self.assertEqual(error.error_type, "invalid_request_error")
        self.assertEqual(error.type, "error")
        self.assertEqual(error.raw, body)

    def test_missing_message_is_malformed(self) -> None:
        for body in ({"error": {"type": "x"}, "type": "error"}, {"error": "flat"}, None, []):
            with self.subTest(body=body):
                with self.assertRaises(MalformedResponse):
                    anthropic.normalize_error(body)

    def test_non_string_error_type_is_malformed(self) -> None:
        for body in (
            {"error": {"message": "overloaded", "type": 529}, "type": "error"},
            {"error": {"message": "overloaded", "type": "overloaded_error"}, "type": ["error"]},
        ):
            with self.subTest(body=body):
                with self.assertRaises(MalformedResponse):
                    anthropic.normalize_error(body)

    def test_optional_types(self) -> None:
        error = anthropic.normalize_error({"error": {"message": "boom"}})
        self.assertIsNone(error.error_type)
        self.assertIsNone(error.type)


class OllamaErrorTests(unittest.TestCase):
    def test_flat_envelope(self) -> None:
        error = ollama.normalize_error({"error": "model 'x' not found"})
        self.assertEqual(error.message, "model 'x' not found")
        self.assertIsNone(error.error_type)
        self.assertIsNone(error.type)

    def test_missing_error_key_substitutes_unknown_error(self) -> None:
        for body in ({}, {"detail": "x"}, {"error": None}, None):
            with self.subTest(body=body):
                self.assertEqual(ollama.normalize_error(body).message, "Unknown error")

    def test_raw_body_is_kept(self) -> None:
        body = {"detail": "x"}
        self.assertEqual(ollama.normalize_error(body).raw, body)

    def test_non_string_error_is_stringified(self) -> None:
        self.assertEqual(ollama.normalize_error({"error": 42}).message, "42")


class AnthropicResponseTests(unittest.TestCase):
    def test_fields_copied(self) -> None:
        resp = anthropic.parse_response(ANTHROPIC_SUCCESS)
        self.assertEqual(resp.id, "msg_013Zva2CMHLNnXjNJJKqJ2EF")
        self.assertEqual(resp.role, "assistant")
        self.assertEqual(resp.stop_reason, "end_turn")
        self.assertIsNone(resp.stop_sequence)
        self.assertEqual(resp.usage, {"input_tokens": 10, "output_tokens": 12})
        self.assertEqual(resp.type, "message")
        self.assertEqual(resp.raw, ANTHROPIC_SUCCESS)
        self.assertIsNone(resp.message)

    def test_missing_mandatory_field(self) -> None:
        for field in ("id", "model", "stop_sequence"):
            with self.subTest(field=field):
                body = {k: v for k, v in ANTHROPIC_SUCCESS.items() if k != field}
                with self.assertRaises(MalformedResponse) as ctx:
                    anthropic.parse_response(body)
                self.assertIn(field, str(ctx.exception))

    def test_wrong_types_are_malformed(self) -> None:
        with self.assertRaises(MalformedResponse):
            anthropic.parse_response({**ANTHROPIC_SUCCESS, "usage": "lots"})


class OllamaResponseTests(unittest.TestCase):
    def test_metadata_copied(self) -> None:
        body = {
            "model": "llama3.2",
            "created_at": "2025-01-01T00:00:00Z",
            "message": {"role": "assistant", "content": "Hello"},
            "done": True,
            "done_reason": "stop",
            "total_duration": 5191566416,
            "eval_count": 7,
        }
        resp = ollama.parse_response(body)
        self.assertEqual(resp.text, "Hello")
        self.assertEqual(resp.role, "assistant")
        self.assertTrue(resp.done)
        self.assertEqual(resp.total_duration, 5191566416)
        self.assertEqual(resp.eval_count, 7)
        self.assertIsNone(resp.load_duration)
        self.assertIsNone(resp.id)

    def test_missing_message(self) -> None:
        with self.assertRaises(MalformedResponse):
            ollama.parse_response({"model": "llama3.2"})
        with self.assertRaises(MalformedResponse):
            ollama.parse_response({"model": "llama3.2", "message": "hi"})


if __name__ == "__main__":
    unittest.main()
