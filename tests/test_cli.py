"""
CLI 测试
"""
import json
from pathlib import Path

import yaml
from click.testing import CliRunner

from process_inspector.cli import cli
from process_inspector.storage.sqlalchemy_models import RuntimeExecution, RuntimeVariable


EXAMPLE_SNAPSHOT = str(Path(__file__).parent.parent / "examples" / "signal_process.yaml")


def test_dump_snapshot_text():
    result = CliRunner().invoke(cli, ["dump", "pi-1", "--snapshot", EXAMPLE_SNAPSHOT])

    assert result.exit_code == 0, result.output
    lines = result.output.split("\n")
    assert lines[1] == "pi-1"
    assert "    ex-3 in UserTask_2" in lines
    assert "    - Variable 'var' = val" in lines


def test_dump_snapshot_base_indent():
    result = CliRunner().invoke(
        cli, ["dump", "pi-1", "--snapshot", EXAMPLE_SNAPSHOT, "--base-indent", "4"]
    )

    assert result.exit_code == 0, result.output
    assert result.output.split("\n")[1] == "    pi-1"


def test_dump_snapshot_json():
    result = CliRunner().invoke(
        cli, ["dump", "pi-1", "--snapshot", EXAMPLE_SNAPSHOT, "--format", "json"]
    )

    assert result.exit_code == 0, result.output
    tree = json.loads(result.output)
    assert tree["id"] == "pi-1"
    assert sorted(child["id"] for child in tree["children"]) == ["ex-2", "ex-3"]


def test_dump_strict_reports_structural_error(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text(yaml.safe_dump({
        "process_instance_id": "pi",
        "executions": [{"id": "pi"}, {"id": "lost", "parent_id": "gone"}]
    }), encoding="utf-8")

    result = CliRunner().invoke(cli, ["dump", "pi", "--snapshot", str(path), "--strict"])

    assert result.exit_code == 1
    assert "unreachable" in result.output

    lenient = CliRunner().invoke(cli, ["dump", "pi", "--snapshot", str(path)])
    assert lenient.exit_code == 0
    assert "\n    lost" not in lenient.output


def test_dump_invalid_snapshot(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    result = CliRunner().invoke(cli, ["dump", "pi", "--snapshot", str(path)])

    assert result.exit_code == 1
    assert "Failed to parse JSON" in result.output


def test_dump_database(test_database):
    with test_database.get_session() as session:
        session.add_all([
            RuntimeExecution(id="R", process_instance_id="R"),
            RuntimeExecution(id="A", process_instance_id="R", parent_id="R", activity_id="Task_A"),
            RuntimeVariable(id="v1", execution_id="A", name="var", value="val"),
        ])

    result = CliRunner().invoke(cli, ["dump", "R", "--database-url", test_database.database_url])

    assert result.exit_code == 0, result.output
    assert result.output == "\nR\n    A in Task_A\n    - Variable 'var' = val\n"
