# AGPL-3.0 License

"""
Unit tests for the command-line interface.
"""

from pathlib import Path

import pytest

from pr_pair import cli
from pr_pair.checklist.checklist_config import Config, GitHubConfig
from pr_pair.config.sample_config import SAMPLE_CONFIG
from pr_pair.errors import PublishPreconditionError

CHECKLIST = "## PR Checklist\nPlease check these items before merging:\n\n- [ ] All tests pass"


class FakePRChecklist:
    """Stands in for PRChecklist and records how the CLI built it."""

    instances = []
    error = None

    def __init__(self, config_path=None, base_ref=None, head_ref=None, add_to_pr=False, pr_number=None):
        self.kwargs = dict(
            config_path=config_path, base_ref=base_ref, head_ref=head_ref, add_to_pr=add_to_pr, pr_number=pr_number
        )
        self.config = Config(github=GitHubConfig(pr_number=pr_number or 9))
        FakePRChecklist.instances.append(self)

    async def run(self):
        if FakePRChecklist.error:
            raise FakePRChecklist.error
        return CHECKLIST


@pytest.fixture(autouse=True)
def fake_tool(monkeypatch):
    FakePRChecklist.instances = []
    FakePRChecklist.error = None
    monkeypatch.setattr(cli, "PRChecklist", FakePRChecklist)
    return FakePRChecklist


class TestGenerate:
    """Tests for the generate command."""

    def test_prints_checklist(self, capsys):
        assert cli.run(["generate"]) == 0

        assert capsys.readouterr().out == CHECKLIST + "\n"
        assert FakePRChecklist.instances[0].kwargs == dict(
            config_path=None, base_ref=None, head_ref=None, add_to_pr=False, pr_number=None
        )

    def test_options(self):
        cli.run(["generate", "-c", "custom.json", "-b", "origin/main", "-h", "feature"])

        kwargs = FakePRChecklist.instances[0].kwargs
        assert kwargs["config_path"] == Path("custom.json")
        assert kwargs["base_ref"] == "origin/main"
        assert kwargs["head_ref"] == "feature"

    def test_long_options(self):
        cli.run(["generate", "--config", "c.toml", "--base", "v1.0", "--head", "v1.1"])

        kwargs = FakePRChecklist.instances[0].kwargs
        assert kwargs["config_path"] == Path("c.toml")
        assert kwargs["base_ref"] == "v1.0"
        assert kwargs["head_ref"] == "v1.1"

    def test_output_file(self, tmp_path, capsys):
        output = tmp_path / "checklist.md"

        assert cli.run(["generate", "-o", str(output)]) == 0

        assert output.read_text(encoding="utf-8") == CHECKLIST
        assert capsys.readouterr().out == f"Checklist written to {output}\n"

    def test_publish_flag(self, capsys):
        assert cli.run(["generate", "-p"]) == 0

        captured = capsys.readouterr()
        assert FakePRChecklist.instances[0].kwargs["add_to_pr"] is True
        assert captured.out == CHECKLIST + "\n"
        assert "Checklist added as comment to PR #9" in captured.err

    def test_error(self, capsys):
        FakePRChecklist.error = PublishPreconditionError("GitHub token is required", field="token")

        assert cli.run(["generate", "-p"]) == 1

        assert "Error generating checklist: GitHub token is required" in capsys.readouterr().err


class TestInit:
    """Tests for the init command."""

    def test_default_path(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        assert cli.run(["init"]) == 0

        assert (tmp_path / "pr-pair.config.py").read_text(encoding="utf-8") == SAMPLE_CONFIG
        assert capsys.readouterr().out == "Sample configuration written to pr-pair.config.py\n"

    def test_custom_path(self, tmp_path):
        output = tmp_path / "my-config.py"

        assert cli.run(["init", "--output", str(output)]) == 0

        assert output.exists()

    def test_unwritable_path(self, tmp_path, capsys):
        output = tmp_path / "missing-dir" / "config.py"

        assert cli.run(["init", "-o", str(output)]) == 1

        assert "Error creating sample configuration" in capsys.readouterr().err

    def test_sample_config_is_loadable(self, tmp_path):
        """Test that the written sample is a valid configuration module."""
        from pr_pair.config.config_discovery import ConfigFile
        from pr_pair.config.config_merger import ConfigMerger

        output = tmp_path / "pr-pair.config.py"
        cli.run(["init", "-o", str(output)])

        data = ConfigMerger().load_config_file(ConfigFile.from_path(output))
        config = Config.from_dict(data)

        assert config.checklist.standard_items[0] == "- [ ] Code follows the project's coding style"
        assert config.checklist.file_patterns[0].matches("schema.PRISMA")
        assert config.github.add_as_comment is True


class TestAddToPr:
    """Tests for the add-to-pr command."""

    def test_publishes(self, capsys):
        assert cli.run(["add-to-pr", "-n", "42", "-b", "origin/main"]) == 0

        kwargs = FakePRChecklist.instances[0].kwargs
        assert kwargs["pr_number"] == 42
        assert kwargs["add_to_pr"] is True
        assert kwargs["base_ref"] == "origin/main"
        assert capsys.readouterr().out == "Checklist added as comment to PR #42\n"

    def test_description_mode_message(self, monkeypatch, capsys):
        class DescriptionMode(FakePRChecklist):
            def __init__(self, **kwargs):
                super().__init__(**kwargs)
                self.config = Config(github=GitHubConfig(pr_number=42, add_as_comment=False))

        monkeypatch.setattr(cli, "PRChecklist", DescriptionMode)

        assert cli.run(["add-to-pr", "--number", "42"]) == 0

        assert capsys.readouterr().out == "PR #42 description updated with checklist\n"

    def test_number_required(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.run(["add-to-pr"])

        assert exc_info.value.code == 1
        assert "-n/--number" in capsys.readouterr().err

    def test_number_must_be_integer(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.run(["add-to-pr", "-n", "abc"])

        assert exc_info.value.code == 1

    def test_error(self, capsys):
        FakePRChecklist.error = RuntimeError("boom")

        assert cli.run(["add-to-pr", "-n", "1"]) == 1

        assert "Error adding checklist to PR: boom" in capsys.readouterr().err


class TestParser:
    """Tests for argument parsing."""

    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.run([])

        assert exc_info.value.code == 1

    def test_unknown_command(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.run(["publish"])

        assert exc_info.value.code == 1

    def test_help_is_long_option_only(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.run(["generate", "--help"])

        assert exc_info.value.code == 0
        assert "--head" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.run(["--version"])

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith("pr-pair ")
