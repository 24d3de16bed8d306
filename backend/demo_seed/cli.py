from __future__ import annotations

import logging
import sys
from dataclasses import asdict
from typing import Optional

import typer
from sqlalchemy.engine import Engine
from sqlmodel import Session

from . import db
from .config import NARRATIVE_SEED_OFFSET, settings
from .random_source import RandomSource
from .seed import activity_stats, ensure_demo_data, verify_demo_data
from .templating import generate_narrative, normalize_category_key


APP = typer.Typer(add_completion=False, help="Genera los datos de demostración del tenant Acme Co.")

logger = logging.getLogger("demo_seed")


def _configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _resolve_engine(database_url: Optional[str]) -> Engine:
    if database_url:
        return db.build_engine(database_url)
    return db.engine


@APP.command()
def run(
    seed: Optional[int] = typer.Option(None, "--seed", help="Semilla maestra; por defecto SEED_MASTER_SEED."),
    reset: bool = typer.Option(False, "--reset", help="Elimina y recrea las tablas de demo antes de sembrar."),
    strict: bool = typer.Option(False, "--strict", help="Falla ante ids desconocidos en lugar de ignorarlos."),
    database_url: Optional[str] = typer.Option(None, "--database-url", help="Sobrescribe DATABASE_URL."),
) -> None:
    """Create the schema and load the deterministic demo dataset."""
    _configure_logging()
    updates = {"strict_mode": strict or settings.strict_mode}
    if seed is not None:
        updates["master_seed"] = seed
    cfg = settings.model_copy(update=updates)

    if reset and cfg.is_production:
        typer.secho("No se permite --reset en producción.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)

    try:
        engine = _resolve_engine(database_url)
        if reset:
            logger.warning("Dropping and recreating demo tables")
            db.reset_db(engine)
        else:
            db.init_db(engine)
        with Session(engine) as session:
            summary = ensure_demo_data(session, cfg)
    except Exception as exc:
        logger.exception("Seeding failed")
        typer.secho(f"Error al sembrar datos: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"{cfg.app_name}: datos de demo listos.", fg=typer.colors.GREEN)
    typer.echo(f"  - Categorías: {summary.categories}")
    typer.echo(f"  - Empleados: {summary.employees}")
    typer.echo(f"  - Casos: {summary.cases} ({summary.flagship_cases} insignia)")
    typer.echo(f"  - Casos con sujeto reincidente: {summary.repeat_subject_cases}")
    typer.echo(f"  - Casos en equipos hotspot: {summary.hotspot_cases}")
    typer.echo(
        f"  - Represalias: {summary.retaliation_cases} "
        f"(retraso medio {summary.avg_retaliation_delay_days} días)"
    )
    typer.echo(f"  - Actividades: {summary.activities}")


@APP.command()
def verify(
    database_url: Optional[str] = typer.Option(None, "--database-url", help="Sobrescribe DATABASE_URL."),
) -> None:
    """Print the stored record counts."""
    _configure_logging()
    try:
        engine = _resolve_engine(database_url)
        with Session(engine) as session:
            report = verify_demo_data(session)
            activities = activity_stats(session)
    except Exception as exc:
        logger.exception("Verification failed")
        typer.secho(f"No se pudo verificar la base de datos: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for key, value in asdict(report).items():
        typer.echo(f"{key}: {value}")
    for category, count in sorted(activities.by_action_category.items()):
        typer.echo(f"activities[{category}]: {count}")
    if report.cases == 0:
        typer.secho("La base de datos no contiene casos de demo.", fg=typer.colors.YELLOW)


@APP.command()
def narrative(
    category: str = typer.Argument(..., help="Categoría, p. ej. harassment o 'Conflict of Interest'."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Semilla maestra; por defecto SEED_MASTER_SEED."),
    long: bool = typer.Option(False, "--long", help="Incluye la sección extendida (timeline, testigos...)."),
) -> None:
    """Preview one generated narrative and the category's anonymity rate."""
    master_seed = settings.master_seed if seed is None else seed
    rng = RandomSource.for_offset(master_seed, NARRATIVE_SEED_OFFSET)
    result = generate_narrative(
        category,
        rng,
        reference_date=settings.current_date,
        include_long_narrative=long,
    )
    if result.category_key != normalize_category_key(category):
        typer.secho(
            f"Categoría '{category}' desconocida; se usa '{result.category_key}'.",
            fg=typer.colors.YELLOW,
            err=True,
        )
    typer.secho(f"[{result.category_key}] anonymity rate {result.suggested_anonymity_rate:.2f}", bold=True)
    typer.echo(result.narrative)


def main() -> None:
    APP()


if __name__ == "__main__":
    main()
