"""
RouteTour — Middleware Tests
==============================

What:  Tests for the global middleware chain.
How:   Most tests go through the real app; error-handler and pretty-JSON
       configuration tests use small throwaway FastAPI apps so that routes
       which raise never exist in the real route table.

What we test:
    ✅ Error handler: message → 500 {"error": msg}; empty message → generic text
    ✅ Pretty JSON: ?pretty re-indents JSON only, with correct Content-Length
    ✅ CORS: permissive headers and preflight
    ✅ Request ID: generated or propagated, echoed on the response
    ✅ Logging: arrival and completion lines, level follows status
"""

import json
import logging

import pytest
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from routetour.middleware.cors import WildcardOriginMiddleware
from routetour.middleware.error_handler import ErrorHandlingMiddleware, error_message
from routetour.middleware.logging import status_log_level
from routetour.middleware.pretty_json import PrettyJSONMiddleware


def build_failing_app() -> FastAPI:
    """App whose routes raise, wrapped only by ErrorHandlingMiddleware."""
    app = FastAPI()
    app.add_middleware(ErrorHandlingMiddleware)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("Something broke")

    @app.get("/silent")
    async def silent():
        raise RuntimeError()

    @app.get("/fine")
    async def fine():
        return {"ok": True}

    return app


class TestErrorHandlingMiddleware:

    def test_error_message_uses_exception_text(self):
        assert error_message(ValueError("bad value")) == "bad value"

    def test_error_message_falls_back_when_empty(self):
        assert error_message(RuntimeError()) == "Internal Server Error"

    @pytest.mark.asyncio
    async def test_exception_becomes_500_with_message(self, make_client):
        async with make_client(build_failing_app()) as client:
            response = await client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"error": "Something broke"}

    @pytest.mark.asyncio
    async def test_exception_without_message_uses_generic_text(self, make_client):
        async with make_client(build_failing_app()) as client:
            response = await client.get("/silent")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}

    @pytest.mark.asyncio
    async def test_successful_response_passes_through(self, make_client):
        async with make_client(build_failing_app()) as client:
            response = await client.get("/fine")

        assert response.status_code == 200
        assert response.json() == {"ok": True}

    @pytest.mark.asyncio
    async def test_error_is_logged_with_traceback(self, make_client, caplog):
        caplog.set_level(logging.ERROR, logger="routetour.middleware.error_handler")
        async with make_client(build_failing_app()) as client:
            await client.get("/boom")

        records = [r for r in caplog.records if r.name == "routetour.middleware.error_handler"]
        assert len(records) == 1
        assert records[0].exc_info is not None
        assert "Something broke" in records[0].getMessage()


class TestPrettyJSONMiddleware:

    @pytest.mark.asyncio
    async def test_flag_without_value_pretty_prints(self, test_client):
        response = await test_client.get("/json?pretty")

        expected = json.dumps({"message": "Hello", "data": {"key": "value"}}, indent=2)
        assert response.status_code == 200
        assert response.text == expected
        assert response.headers["content-length"] == str(len(expected.encode("utf-8")))

    @pytest.mark.asyncio
    async def test_flag_with_value_pretty_prints(self, test_client):
        response = await test_client.get("/api/search?q=foo&pretty=true")

        assert response.text == json.dumps(
            {"query": "foo", "page": "1", "results": []}, indent=2
        )

    @pytest.mark.asyncio
    async def test_status_code_is_preserved(self, test_client):
        response = await test_client.post("/api/users?pretty", json={"name": "Alice"})

        assert response.status_code == 201
        assert response.json() == {"message": "User created", "user": {"name": "Alice"}}
        assert "\n" in response.text

    @pytest.mark.asyncio
    async def test_error_bodies_are_pretty_printed_too(self, test_client):
        response = await test_client.get("/nope?pretty")

        assert response.status_code == 404
        assert response.text == '{\n  "error": "Not Found"\n}'

    @pytest.mark.asyncio
    async def test_non_json_responses_are_untouched(self, test_client):
        response = await test_client.get("/text?pretty")

        assert response.text == "This is a text response"
        assert response.headers["X-Custom-Header"] == "value"

    @pytest.mark.asyncio
    async def test_without_flag_nothing_changes(self, test_client):
        response = await test_client.get("/api/v1/admin/dashboard")

        assert response.text == '{"admin":true,"dashboard":"Welcome Admin"}'

    def test_explicit_zero_indent_is_kept(self):
        middleware = PrettyJSONMiddleware(FastAPI(), query_param="p", indent=0)

        assert middleware.indent == 0
        assert middleware.query_param == "p"

    def test_defaults_come_from_settings(self):
        middleware = PrettyJSONMiddleware(FastAPI())

        assert middleware.indent == 2
        assert middleware.query_param == "pretty"

    @pytest.mark.asyncio
    async def test_zero_indent_output(self, make_client):
        app = FastAPI()
        app.add_middleware(PrettyJSONMiddleware, indent=0)

        @app.get("/data")
        async def data():
            return {"a": [1, 2]}

        async with make_client(app) as client:
            response = await client.get("/data?pretty")

        assert response.text == json.dumps({"a": [1, 2]}, indent=0)

    @pytest.mark.asyncio
    async def test_head_request_keeps_content_length(self, test_client):
        response = await test_client.head("/json?pretty")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert int(response.headers["content-length"]) > 0

    @pytest.mark.asyncio
    async def test_custom_param_and_indent(self, make_client):
        app = FastAPI()
        app.add_middleware(PrettyJSONMiddleware, query_param="format", indent=4)

        @app.get("/data")
        async def data():
            return {"a": [1, 2]}

        @app.get("/plain")
        async def plain():
            return PlainTextResponse('{"a":1}')

        async with make_client(app) as client:
            pretty = await client.get("/data?format")
            default_flag = await client.get("/data?pretty")
            plain = await client.get("/plain?format")

        assert pretty.text == json.dumps({"a": [1, 2]}, indent=4)
        assert default_flag.text == '{"a":[1,2]}'
        assert plain.text == '{"a":1}'


class TestCORS:

    @pytest.mark.asyncio
    async def test_simple_request_gets_wildcard_origin(self, test_client):
        response = await test_client.get("/json", headers={"Origin": "http://example.com"})

        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_request_without_origin_gets_wildcard_origin(self, test_client):
        """Every response carries the permissive header, not only cross-origin ones."""
        response = await test_client.get("/json")

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_text_and_error_responses_without_origin(self, test_client):
        text = await test_client.get("/text")
        missing = await test_client.get("/nope")

        assert text.headers["access-control-allow-origin"] == "*"
        assert missing.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_restricted_origins_get_no_wildcard(self, make_client):
        app = FastAPI()
        app.add_middleware(WildcardOriginMiddleware, allow_origins=["http://a.test"])

        @app.get("/data")
        async def data():
            return {"ok": True}

        async with make_client(app) as client:
            response = await client.get("/data")

        assert "access-control-allow-origin" not in response.headers

    @pytest.mark.asyncio
    async def test_not_found_gets_cors_headers(self, test_client):
        response = await test_client.get("/nope", headers={"Origin": "http://example.com"})

        assert response.status_code == 404
        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_preflight(self, test_client):
        response = await test_client.options(
            "/api/users",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "POST" in response.headers["access-control-allow-methods"]


class TestRequestID:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, test_client):
        response = await test_client.get("/")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_propagated_when_present(self, test_client):
        response = await test_client.get("/", headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"

    @pytest.mark.asyncio
    async def test_present_on_error_responses(self, test_client):
        response = await test_client.get("/nope", headers={"X-Request-ID": "trace-404"})

        assert response.headers["X-Request-ID"] == "trace-404"


class TestRequestLogging:

    @pytest.mark.parametrize(
        "status, level",
        [
            (200, logging.INFO),
            (201, logging.INFO),
            (302, logging.INFO),
            (401, logging.WARNING),
            (404, logging.WARNING),
            (500, logging.ERROR),
        ],
    )
    def test_status_log_level(self, status, level):
        assert status_log_level(status) == level

    @pytest.mark.asyncio
    async def test_logs_arrival_and_completion(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="routetour.access")
        await test_client.get("/api/users/42", headers={"X-Request-ID": "log-1"})

        messages = [r.getMessage() for r in caplog.records if r.name == "routetour.access"]
        assert messages[0] == "<-- GET /api/users/42 [log-1]"
        assert messages[1].startswith("--> GET /api/users/42 200 ")
        assert messages[1].endswith("[log-1]")

    @pytest.mark.asyncio
    async def test_client_errors_log_as_warning(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="routetour.access")
        await test_client.get("/nope")

        completion = [
            r for r in caplog.records
            if r.name == "routetour.access" and r.getMessage().startswith("-->")
        ]
        assert completion[-1].levelno == logging.WARNING
        assert completion[-1].status == 404
