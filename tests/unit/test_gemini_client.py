"""GeminiClient unit tests.

httpx.MockTransport로 generateContent 호출을 대체하여 검증합니다:
- 요청 형식 (URL, 인증 헤더, systemInstruction, responseSchema)
- 실패 변환 (키 없음, HTTP 에러, 연결 실패, 후보 없음)
- JSON 응답 파싱
"""

import json

import httpx
import pytest

from proposal_studio.exceptions import GenerationUnavailable
from proposal_studio.services.gemini_client import GeminiClient


def _gemini_response(text: str) -> dict:
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


def _make_client(handler, api_key: str = "test-key") -> GeminiClient:
    return GeminiClient(
        api_key=api_key,
        model="test-model",
        base_url="https://gemini.test/v1beta",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def client():
    """GeminiClient instance (no network calls needed for _parse_json_response)."""
    return GeminiClient(api_key="test-key")


class TestComplete:
    async def test_sends_generate_content_request(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["key"] = request.headers.get("x-goog-api-key")
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json=_gemini_response("A lovely vision."))

        result = await _make_client(handler).complete("be calm", "write a vision")

        assert result == "A lovely vision."
        assert captured["url"] == "https://gemini.test/v1beta/models/test-model:generateContent"
        assert captured["key"] == "test-key"
        assert captured["body"]["contents"][0]["parts"][0]["text"] == "write a vision"
        assert captured["body"]["systemInstruction"]["parts"][0]["text"] == "be calm"
        assert captured["body"]["generationConfig"]["temperature"] == 0.7

    async def test_joins_multiple_parts(self):
        def handler(request):
            return httpx.Response(200, json={
                "candidates": [{"content": {"parts": [{"text": "Hello, "}, {"text": "world"}]}}]
            })

        assert await _make_client(handler).complete("", "hi") == "Hello, world"

    async def test_omits_system_instruction_when_empty(self):
        captured = {}

        def handler(request):
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json=_gemini_response("ok"))

        await _make_client(handler).complete("", "hi")
        assert "systemInstruction" not in captured["body"]

    async def test_missing_api_key_never_sends_request(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=_gemini_response("unreachable"))

        client = _make_client(handler, api_key="")

        assert client.is_configured is False
        with pytest.raises(GenerationUnavailable):
            await client.complete("sys", "user")
        assert calls == []

    async def test_http_error_becomes_generation_unavailable(self):
        def handler(request):
            return httpx.Response(500, json={"error": {"message": "internal"}})

        with pytest.raises(GenerationUnavailable) as exc_info:
            await _make_client(handler).complete("sys", "user")

        assert exc_info.value.error_code == "ERR_GEN_001"
        assert exc_info.value.details == {"status_code": 500}

    async def test_auth_error_becomes_generation_unavailable(self):
        def handler(request):
            return httpx.Response(403, json={"error": {"message": "bad key"}})

        with pytest.raises(GenerationUnavailable):
            await _make_client(handler).complete("sys", "user")

    async def test_connection_error_becomes_generation_unavailable(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(GenerationUnavailable):
            await _make_client(handler).complete("sys", "user")

    async def test_non_json_body_becomes_generation_unavailable(self):
        def handler(request):
            return httpx.Response(200, content=b"<html>oops</html>")

        with pytest.raises(GenerationUnavailable):
            await _make_client(handler).complete("sys", "user")

    async def test_missing_candidates_becomes_generation_unavailable(self):
        def handler(request):
            return httpx.Response(200, json={"promptFeedback": {"blockReason": "SAFETY"}})

        with pytest.raises(GenerationUnavailable) as exc_info:
            await _make_client(handler).complete("sys", "user")

        assert exc_info.value.details == {"prompt_feedback": {"blockReason": "SAFETY"}}

    async def test_empty_parts_returns_empty_text(self):
        def handler(request):
            return httpx.Response(200, json={"candidates": [{"content": {"parts": []}}]})

        assert await _make_client(handler).complete("sys", "user") == ""


class TestCompleteJson:
    async def test_sends_response_schema(self):
        captured = {}
        schema = {"type": "OBJECT", "properties": {"a": {"type": "STRING"}}}

        def handler(request):
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json=_gemini_response('{"a": "b"}'))

        result = await _make_client(handler).complete_json("sys", "user", schema)

        assert result == {"a": "b"}
        config = captured["body"]["generationConfig"]
        assert config["responseMimeType"] == "application/json"
        assert config["responseSchema"] == schema
        assert config["temperature"] == 0.4

    async def test_empty_response_raises(self):
        def handler(request):
            return httpx.Response(200, json=_gemini_response("   "))

        with pytest.raises(GenerationUnavailable):
            await _make_client(handler).complete_json("sys", "user", {})

    async def test_unparseable_response_raises(self):
        def handler(request):
            return httpx.Response(200, json=_gemini_response("not json at all"))

        with pytest.raises(GenerationUnavailable):
            await _make_client(handler).complete_json("sys", "user", {})


class TestParseJsonResponse:
    def test_valid_json_object(self, client):
        assert client._parse_json_response('{"key": "value", "num": 42}') == {"key": "value", "num": 42}

    def test_valid_json_array(self, client):
        result = client._parse_json_response('["#FFFFFF", "#000000"]')
        assert result == ["#FFFFFF", "#000000"]

    def test_json_in_markdown_code_block(self, client):
        response = '```json\n{"palette": ["#F5E6E8"]}\n```'
        assert client._parse_json_response(response) == {"palette": ["#F5E6E8"]}

    def test_json_in_plain_code_block(self, client):
        assert client._parse_json_response('```\n{"key": "value"}\n```') == {"key": "value"}

    def test_leading_and_trailing_text(self, client):
        response = 'Here is your profile:\n{"summary": "Calm."}\nEnjoy!'
        assert client._parse_json_response(response) == {"summary": "Calm."}

    def test_nested_braces(self, client):
        response = 'Result: {"outer": {"inner": [1, 2]}} done'
        assert client._parse_json_response(response) == {"outer": {"inner": [1, 2]}}

    def test_unparseable_raises(self, client):
        with pytest.raises(GenerationUnavailable) as exc_info:
            client._parse_json_response("no json here")
        assert "Failed to parse JSON response" in exc_info.value.message

    def test_unbalanced_braces_raise(self, client):
        with pytest.raises(GenerationUnavailable):
            client._parse_json_response('{"key": "value"')
