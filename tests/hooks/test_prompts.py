"""Tests for interactive hook input."""

import pytest

from cloudhooks.core.exceptions import HookValidationError
from cloudhooks.core.terminal import Terminal
from cloudhooks.hooks.prompts import (
    get_confirmation,
    read_function_name,
    read_function_params,
    validate_url,
)


class TestValidateURL:
    """Tests for validate_url."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "https://example.com/x",
            "https://example.com:8443/hooks/hello?x=1",
        ],
    )
    def test_accepts_https_urls(self, url):
        validate_url(url)

    def test_rejects_empty_host(self):
        with pytest.raises(HookValidationError, match="Invalid URL"):
            validate_url("https://")

    def test_rejects_path_without_host(self):
        with pytest.raises(HookValidationError):
            validate_url("https:///x")

    def test_rejects_other_schemes(self):
        with pytest.raises(HookValidationError, match="valid https url"):
            validate_url("http://example.com")

    def test_rejects_invalid_port(self):
        with pytest.raises(HookValidationError):
            validate_url("https://example.com:notaport/x")


class TestReadFunctionName:
    """Tests for read_function_name."""

    def test_reads_name(self):
        terminal = Terminal.scripted("hello\n")
        hook = read_function_name(terminal)
        assert hook.function_name == "hello"
        assert hook.url is None
        assert terminal.output() == "Please enter the function name: "

    def test_reads_first_token_only(self):
        terminal = Terminal.scripted("  hello world\n")
        assert read_function_name(terminal).function_name == "hello"

    def test_empty_name_rejected(self):
        terminal = Terminal.scripted("\n")
        with pytest.raises(HookValidationError, match="Function name cannot be empty"):
            read_function_name(terminal)

    def test_end_of_input_rejected(self):
        with pytest.raises(HookValidationError):
            read_function_name(Terminal.scripted(""))


class TestReadFunctionParams:
    """Tests for read_function_params."""

    def test_prefixes_https(self):
        terminal = Terminal.scripted("hello\nexample.com/x\n")
        hook = read_function_params(terminal)
        assert hook.function_name == "hello"
        assert hook.url == "https://example.com/x"
        assert terminal.output() == "Please enter the function name: URL: https://"

    def test_empty_url_rejected(self):
        terminal = Terminal.scripted("hello\n\n")
        with pytest.raises(HookValidationError):
            read_function_params(terminal)

    def test_empty_name_rejected_before_url_prompt(self):
        terminal = Terminal.scripted("\nexample.com\n")
        with pytest.raises(HookValidationError):
            read_function_params(terminal)
        assert "URL:" not in terminal.output()


class TestGetConfirmation:
    """Tests for get_confirmation."""

    @pytest.mark.parametrize("answer", ["y", "Y", "yes", "YES", "yep"])
    def test_yes_answers(self, answer):
        terminal = Terminal.scripted(f"{answer}\n")
        assert get_confirmation("Sure? ", terminal) is True
        assert terminal.output() == "Sure? "

    @pytest.mark.parametrize("answer", ["n", "no", "", "maybe"])
    def test_other_answers(self, answer):
        assert get_confirmation("Sure? ", Terminal.scripted(f"{answer}\n")) is False
