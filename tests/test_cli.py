"""
Tests for the vrops-resources command line entry point.
"""

import json
from unittest.mock import patch

import pytest

from vrops_client.cli import SECRETS_WARNING, build_parser, main
from vrops_client.config import ResponseFormat
from vrops_client.runtime.errors import TransportError


class TestParser:
    """Tests for argument parsing."""

    def test_repeatable_filters(self):
        args = build_parser().parse_args([
            "--resource-kind", "VirtualMachine", "--resource-kind", "HostSystem",
            "--include-related", "CHILD",
        ])
        assert args.resource_kind == ["VirtualMachine", "HostSystem"]
        assert args.include_related == "CHILD"

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.response_format == "json"
        assert args.page is None
        assert args.page_size is None

    def test_invalid_format(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--format", "yaml"])
        assert exc_info.value.code == 2


class TestMain:
    """Tests for main()."""

    @patch("vrops_client.cli.get_resources")
    def test_prints_json(self, get_resources, capsys):
        get_resources.return_value = [{"identifier": "abc"}]
        code = main(["--server", "h", "--token", "t", "--page", "0", "--name", "web01"])

        assert code == 0
        assert json.loads(capsys.readouterr().out) == [{"identifier": "abc"}]
        kwargs = get_resources.call_args[1]
        assert kwargs["config"].server == "h"
        assert kwargs["config"].token == "t"
        assert kwargs["page"] == 0
        assert kwargs["name"] == ["web01"]

    @patch("vrops_client.cli.get_resources")
    def test_env_fallback(self, get_resources, monkeypatch):
        monkeypatch.setenv("VROPS_SERVER", "env-host")
        monkeypatch.setenv("VROPS_TOKEN", "env-token")
        get_resources.return_value = []
        assert main([]) == 0
        config = get_resources.call_args[1]["config"]
        assert config.server == "env-host"
        assert config.token == "env-token"

    @patch("vrops_client.cli.get_resources")
    def test_xml_printed_raw(self, get_resources, capsys):
        get_resources.return_value = "<ops:resources/>"
        assert main(["--server", "h", "--token", "t", "--format", "xml"]) == 0
        assert capsys.readouterr().out.strip() == "<ops:resources/>"
        assert get_resources.call_args[1]["config"].response_format is ResponseFormat.XML

    @patch("vrops_client.cli.get_resources")
    def test_insecure(self, get_resources):
        get_resources.return_value = []
        main(["--server", "h", "--token", "t", "--insecure"])
        assert get_resources.call_args[1]["config"].verify_ssl is False

    def test_missing_token_exit_code(self, capsys):
        code = main(["--server", "h"])
        assert code == 1
        assert "missing authentication token" in capsys.readouterr().err

    @patch("vrops_client.cli.get_resources")
    def test_transport_error_exit_code(self, get_resources, capsys):
        get_resources.side_effect = TransportError("HTTP 503: Service Unavailable")
        assert main(["--server", "h", "--token", "t"]) == 1
        assert "503" in capsys.readouterr().err

    @patch("vrops_client.cli.get_resources")
    def test_verbose_warns_about_secrets(self, get_resources, caplog):
        get_resources.return_value = []
        main(["--server", "h", "--token", "t", "--verbose"])
        assert SECRETS_WARNING in caplog.text
