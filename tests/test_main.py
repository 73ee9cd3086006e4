"""Tests for the operator CLI."""

import sys
from unittest.mock import patch

import pytest

import src.main
from src.form.models import ProjectFolder


def run_cli(monkeypatch, *args) -> int:
    monkeypatch.setattr(sys, "argv", ["article-studio", *args])
    with pytest.raises(SystemExit) as exc_info:
        src.main.main()
    return exc_info.value.code


class TestFoldersCommand:
    """Test the folders subcommand."""

    def test_lists_folders_for_user(self, monkeypatch, capsys):
        """Folders are printed one per line and the exit code is 0."""
        with patch("src.folders.ProjectFolderLookup") as lookup_cls:
            lookup_cls.return_value.fetch.return_value = [
                ProjectFolder(id=3, name="Blogg"),
                ProjectFolder(id=1, name="Nyheter"),
            ]
            code = run_cli(monkeypatch, "folders", "--user", "kari@example.no")

        assert code == 0
        lookup_cls.return_value.fetch.assert_called_once_with("kari@example.no")
        assert capsys.readouterr().out == "3\tBlogg\n1\tNyheter\n"

    def test_falls_back_to_my_email(self, monkeypatch):
        """Without --user the MY_EMAIL setting is used."""
        monkeypatch.setattr(src.main.settings, "my_email", "ola@example.no")

        with patch("src.folders.ProjectFolderLookup") as lookup_cls:
            lookup_cls.return_value.fetch.return_value = []
            code = run_cli(monkeypatch, "folders")

        assert code == 0
        lookup_cls.return_value.fetch.assert_called_once_with("ola@example.no")

    def test_no_user_exits_with_error(self, monkeypatch):
        """Without --user or MY_EMAIL the command fails before any lookup."""
        monkeypatch.setattr(src.main.settings, "my_email", None)

        with patch("src.folders.ProjectFolderLookup") as lookup_cls:
            code = run_cli(monkeypatch, "folders")

        assert code == 1
        lookup_cls.assert_not_called()


class TestGenerateCommand:
    """Test the generate subcommand."""

    def test_prints_completion(self, monkeypatch, capsys):
        """The completion is printed and the exit code is 0."""
        with patch("src.chains.StructureGeneratorChain") as chain_cls:
            chain_cls.return_value.generate.return_value = "# Disposisjon"
            code = run_cli(monkeypatch, "generate", "--prompt", "hei")

        assert code == 0
        chain_cls.return_value.generate.assert_called_once_with("hei")
        assert capsys.readouterr().out == "# Disposisjon\n"

    def test_chain_failure_exits_with_error(self, monkeypatch, caplog):
        """A failing model call is logged and the exit code is 1."""
        with patch("src.chains.StructureGeneratorChain") as chain_cls:
            chain_cls.return_value.generate.side_effect = RuntimeError("upstream down")
            code = run_cli(monkeypatch, "generate", "--prompt", "hei")

        assert code == 1
        assert "Command failed: upstream down" in caplog.text

    def test_missing_prompt_is_a_usage_error(self, monkeypatch):
        """argparse rejects generate without --prompt."""
        assert run_cli(monkeypatch, "generate") == 2
