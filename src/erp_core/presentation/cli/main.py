import typer

from erp_core.application.use_cases.validate_cuit import ValidateCUITUseCase
from erp_core.domain.services.cuit_validator import (
    format_cuit,
    format_cuit_as_typed,
    generate_cuit_from_dni,
)
from erp_core.logging_config import configure_logging

app = typer.Typer(help="ERP core CLI (CUIT/CUIL tools)")


@app.callback()
def main(log_level: str = typer.Option("WARNING", "--log-level", "-l")) -> None:
    configure_logging(level=log_level)


@app.command()
def validate(cuit: str) -> None:
    dto = ValidateCUITUseCase().execute(cuit)
    if not dto.valid:
        typer.echo(f"CUIT inválido: {dto.error}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{dto.formatted} ({dto.details.type if dto.details else ''})")


@app.command("format")
def format_command(cuit: str) -> None:
    typer.echo(format_cuit(cuit))


@app.command("as-typed")
def as_typed(value: str) -> None:
    typer.echo(format_cuit_as_typed(value))


@app.command()
def generate(dni: str, gender: str = typer.Option("M", "--gender", "-g")) -> None:
    try:
        typer.echo(generate_cuit_from_dni(dni, gender))
    except ValueError:
        typer.echo(f"Género inválido: {gender}", err=True)
        raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
