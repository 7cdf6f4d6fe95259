"""Unit tests for interactive prompt functions."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from create_plugin.cli._prompts import prompt_git, prompt_template
from create_plugin.cli._types import StarterTemplate


class TestPromptTemplate:
    @patch("create_plugin.cli._prompts.TerminalMenu")
    def test_returns_selected_template(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 0

        result = prompt_template()
        assert result is StarterTemplate.TYPESCRIPT

    @patch("create_plugin.cli._prompts.TerminalMenu")
    def test_returns_second_template(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 1

        result = prompt_template()
        assert result is StarterTemplate.JAVASCRIPT

    @patch("create_plugin.cli._prompts.TerminalMenu")
    def test_cursor_starts_on_default(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 0

        prompt_template()
        assert mock_menu_cls.call_args.kwargs["cursor_index"] == 0

    @patch("create_plugin.cli._prompts.TerminalMenu")
    def test_exit_on_none(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = None

        with pytest.raises(SystemExit):
            prompt_template()


class TestPromptGit:
    @patch("builtins.input", return_value="")
    def test_default_no(self, mock_input: MagicMock) -> None:
        result = prompt_git()
        assert result is False
        mock_input.assert_called_once()

    @patch("builtins.input", return_value="y")
    def test_explicit_yes(self, mock_input: MagicMock) -> None:
        result = prompt_git()
        assert result is True
        mock_input.assert_called_once()

    @patch("builtins.input", return_value="nope")
    def test_anything_else_is_no(self, mock_input: MagicMock) -> None:
        assert prompt_git() is False


class TestStarterTemplate:
    def test_packages_are_registry_names(self) -> None:
        for s in StarterTemplate:
            assert s.package == f"csp-template-{s.value}"
            assert not s.package.startswith(".")

    def test_labels_and_descriptions(self) -> None:
        for s in StarterTemplate:
            assert s.label
            assert s.description
