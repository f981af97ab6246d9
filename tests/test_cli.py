import json

from click.testing import CliRunner
from workgraph._version import __version__
from workgraph.cli import cli
from workgraph.errors import WorkgraphError


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Go workspace" in result.output


def test_cli_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_packages(svc_lib_workspace):
    runner = CliRunner()
    result = runner.invoke(cli, ["packages", str(svc_lib_workspace)])
    assert result.exit_code == 0
    graph = json.loads(result.stdout)
    assert graph["example.com/svc/handler"] == ["example.com/lib/util"]


def test_cli_modules(svc_lib_workspace):
    runner = CliRunner()
    result = runner.invoke(cli, ["modules", str(svc_lib_workspace)])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"./lib": [], "./svc": ["./lib"]}


def test_cli_missing_root():
    runner = CliRunner()
    result = runner.invoke(cli, ["packages", "/does/not/exist"])
    assert result.exit_code == 2


def test_cli_missing_work_file(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ["packages", str(tmp_path)])
    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "go.work file not found" in result.output


def test_cli_strict_flag(svc_lib_workspace, mocker):
    mock_analyze = mocker.patch(
        "workgraph.cli.analyze_workspace", side_effect=WorkgraphError("[parse] x.go: boom")
    )
    runner = CliRunner()
    result = runner.invoke(cli, ["packages", str(svc_lib_workspace), "--strict"])
    assert result.exit_code == 1
    assert "Error: [parse] x.go: boom" in result.output
    assert mock_analyze.call_args.kwargs["config"].strict


def test_cli_reports_issues(write_tree):
    root = write_tree(
        {
            "go.work": "use ./m\n",
            "m/go.mod": "module example.com/m\n",
            "m/bad.go": "not go at all\n",
        }
    )
    runner = CliRunner()
    result = runner.invoke(cli, ["packages", str(root)])
    assert result.exit_code == 0
    assert "Warning: [parse]" in result.output
