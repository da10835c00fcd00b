"""Unit tests for curl-format request logging."""

from __future__ import annotations

import io
import json

from tire.logging import CurlRenderer, LoggerFactory, RequestLogger, curl_command


class TestCurlCommand:
    def test_without_body(self) -> None:
        assert curl_command("post", "http://localhost:9200/articles") == (
            'curl -X POST "http://localhost:9200/articles"'
        )

    def test_with_document_body(self) -> None:
        cmd = curl_command(
            "POST",
            "http://localhost:9200/articles/_search?pretty=true",
            {"query": {"query_string": {"query": "title:T*"}}},
        )
        assert cmd == (
            'curl -X POST "http://localhost:9200/articles/_search?pretty=true" '
            "-d '{\"query\":{\"query_string\":{\"query\":\"title:T*\"}}}'"
        )

    def test_single_quotes_escaped(self) -> None:
        cmd = curl_command("POST", "http://h/i", {"q": "it's"})
        assert "'\\''" in cmd

    def test_string_body_passed_through(self) -> None:
        assert curl_command("POST", "http://h/_bulk", "line\n").endswith("-d 'line\n'")


class TestCurlRenderer:
    def test_request_event(self) -> None:
        out = CurlRenderer()(None, "info", {
            "event": "request",
            "timestamp": "2011-04-24 11:34:01",
            "label": "_search",
            "target": "articles",
            "curl": 'curl -X POST "http://localhost:9200/articles/_search"',
        })
        assert out.splitlines() == [
            '# 2011-04-24 11:34:01 [_search] ("articles")',
            "#",
            'curl -X POST "http://localhost:9200/articles/_search"',
        ]

    def test_response_event(self) -> None:
        out = CurlRenderer()(None, "info", {
            "event": "response", "timestamp": "t", "status": 200, "took": 3,
        })
        assert out.strip() == "# t [200] (3 msec)"

    def test_response_body_lines_commented(self) -> None:
        out = CurlRenderer()(None, "debug", {
            "event": "response.body", "timestamp": "t", "status": 200, "body": '{\n  "ok": true\n}',
        })
        assert out.splitlines()[-3:] == ["# {", '#   "ok": true', "# }"]

    def test_other_events(self) -> None:
        out = CurlRenderer()(None, "info", {
            "event": "import_finished", "timestamp": "t", "level": "info", "documents": 4,
        })
        assert out == "# t [INFO] import_finished documents=4"


class TestRequestLogger:
    def test_silent_until_configured(self, capsys) -> None:
        RequestLogger().log_request("_search", "articles", "curl -X POST x")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_info_logs_request_and_status(self) -> None:
        stream = io.StringIO()
        LoggerFactory.configure(stream, level="info")
        log = RequestLogger()
        log.log_request("_search", "articles", 'curl -X POST "http://localhost:9200/articles/_search"')
        log.log_response(200, took=5, body={"hits": {"hits": []}})
        output = stream.getvalue()
        assert '[_search] ("articles")' in output
        assert 'curl -X POST "http://localhost:9200/articles/_search"' in output
        assert "[200] (5 msec)" in output
        assert '"hits"' not in output

    def test_debug_logs_response_body(self) -> None:
        stream = io.StringIO()
        LoggerFactory.configure(stream, level="debug")
        RequestLogger().log_response(200, took=1, body={"hits": {"total": 0}})
        output = stream.getvalue()
        assert '#   "hits": {' in output

    def test_json_renderer(self) -> None:
        stream = io.StringIO()
        LoggerFactory.configure(stream, level="info", json=True)
        RequestLogger().log_response(201, took=2)
        record = json.loads(stream.getvalue().strip())
        assert record["event"] == "response"
        assert record["status"] == 201

    def test_reset_stops_output(self) -> None:
        stream = io.StringIO()
        LoggerFactory.configure(stream)
        LoggerFactory.reset()
        RequestLogger().log_response(200)
        assert stream.getvalue() == ""
