from typer.testing import CliRunner

from dn_mail.cli import app

runner = CliRunner()


def test_complete(alias_file):
    result = runner.invoke(app, ["complete", "To: jo", "--alias-file", str(alias_file)])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["4", "John Citizen <john@isp.com>"]


def test_complete_not_address_line(alias_file):
    result = runner.invoke(app, ["complete", "Subject: jo", "--alias-file", str(alias_file)])
    assert result.exit_code == 1


def test_complete_missing_alias_file(tmp_path):
    missing = tmp_path / "missing"
    result = runner.invoke(app, ["complete", "To: jo", "--alias-file", str(missing)])
    assert result.exit_code == 1
    assert f"Cannot locate aliases file: {missing}" in result.output


def test_aliases(alias_file):
    result = runner.invoke(app, ["aliases", "--alias-file", str(alias_file)])
    assert result.exit_code == 0
    assert result.output.strip() == "johnno | John Citizen <john@isp.com> | personal email"


def test_config_set_and_show(tmp_path):
    target = tmp_path / "aliases"
    result = runner.invoke(app, ["config", "--alias-file", str(target)])
    assert result.exit_code == 0

    result = runner.invoke(app, ["config"])
    assert f"Alias file: {target} (missing)" in result.output


def test_settings():
    result = runner.invoke(app, ["settings"])
    assert result.exit_code == 0
    assert "setlocal textwidth=72" in result.output


def test_settings_markdown_notice_on_stdout():
    from dn_mail import markdown

    result = runner.invoke(app, ["settings", "--markdown"])
    assert result.exit_code == 0
    assert result.stdout.splitlines()[-1] == markdown.APPLIED_NOTICE
    assert markdown.MARKDOWN_SYNTAX_COMMANDS[1] in result.stdout
