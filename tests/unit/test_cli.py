from typer.testing import CliRunner

from erp_core.presentation.cli.main import app

runner = CliRunner()


def test_validate_ok():
    result = runner.invoke(app, ["validate", "20123456786"])
    assert result.exit_code == 0
    assert "20-12345678-6" in result.output
    assert "Masculino" in result.output


def test_validate_invalid_exits_non_zero():
    result = runner.invoke(app, ["validate", "20-12345678-0"])
    assert result.exit_code == 1


def test_format_leaves_invalid_input_untouched():
    assert runner.invoke(app, ["format", "20 12345678 6"]).output.strip() == "20-12345678-6"
    assert runner.invoke(app, ["format", "123"]).output.strip() == "123"


def test_as_typed():
    assert runner.invoke(app, ["as-typed", "2012345"]).output.strip() == "20-12345"


def test_generate():
    result = runner.invoke(app, ["generate", "12345678", "--gender", "F"])
    assert result.exit_code == 0
    assert result.output.strip() == "27-12345678-0"
    assert runner.invoke(app, ["generate", "12345678", "-g", "X"]).exit_code == 2
