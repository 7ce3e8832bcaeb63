# seefit/cli/hiits.py
import click
from flask import current_app
from flask.cli import AppGroup
from seefit import db
from seefit.services import hiitboard
from seefit.utils.identifiers import generate_id
from seefit.utils.progress import format_count, load_progress, record_completion, save_progress, ProgressState
from seefit.utils.timer import build_timeline, format_duration, total_duration
from seefit.utils.validators import validate_exercise_input, validate_hiit_input

hiit_group = AppGroup("hiit", help="Consultar, crear y completar HIITs")
progress_group = AppGroup("progress", help="Progreso guardado (HIITs completadas)")


def _progress_path():
    return current_app.config["SEEFIT_PROGRESS_FILE"]


def _get_hiit_or_fail(hiit_id):
    hiit = hiitboard.find_hiit(db.session, hiit_id)
    if not hiit:
        raise click.ClickException(f"No existe la HIIT {hiit_id}")
    return hiit


def _parse_exercise(raw):
    """'Nombre|Descripción|trabajo|descanso' -> dict validado."""
    parts = raw.split("|")
    if len(parts) != 4:
        raise click.BadParameter(f"'{raw}' debe ser 'nombre|descripción|trabajo|descanso'")
    name, description, work, rest = parts
    try:
        work, rest = int(work), int(rest)
    except ValueError:
        raise click.BadParameter(f"Duraciones no numéricas en '{raw}'")
    data = validate_exercise_input(name, description, work, rest)
    if not data:
        raise click.BadParameter(f"Ejercicio incompleto (o duración 0): '{raw}'")
    return data


@hiit_group.command("list")
def list_hiits():
    """Lista las HIITs con su duración total."""
    exercises = hiitboard.list_exercises(db.session)
    for h in hiitboard.list_hiits(db.session):
        own = [e for e in exercises if e.hiit_id == h.hiits_id]
        click.echo(
            f"{h.hiits_id}  {h.type:<7}  {format_duration(total_duration(own))}  "
            f"{format_count(len(own))} ej.  {h.name}"
        )


@hiit_group.command("show")
@click.argument("hiit_id")
def show_hiit(hiit_id):
    """Muestra las fases del temporizador de una HIIT."""
    hiit = _get_hiit_or_fail(hiit_id)
    exercises = hiitboard.list_exercises(db.session, hiit_id=hiit_id)
    click.secho(f"{hiit.name} ({format_duration(total_duration(exercises))})", fg="cyan")
    click.echo(hiit.description)
    for step in build_timeline(exercises):
        click.echo(f"  {format_duration(step['seconds'])}  {step['phase']:<8}  {step['label']}")


@hiit_group.command("create")
@click.option("--name", required=True, help="Nombre de la HIIT")
@click.option("--description", required=True, help="Descripción")
@click.option("--exercise", "exercises", multiple=True, required=True,
              help="Ejercicio 'nombre|descripción|trabajo|descanso' (repetible)")
def create_hiit(name, description, exercises):
    """
    Crea una HIIT custom con sus ejercicios, igual que el formulario de la web.
    """
    data = validate_hiit_input(name, description)
    if not data:
        raise click.BadParameter("Nombre y descripción no pueden estar vacíos")
    parsed = [_parse_exercise(raw) for raw in exercises]

    hiit_id = generate_id()
    hiitboard.add_hiit(db.session, hiit_id, data["name"], data["description"], data["type"])
    for ex in parsed:
        hiitboard.add_exercise(
            db.session, ex["name"], ex["description"],
            ex["exercise_duration"], ex["rest_duration"], hiit_id,
        )
    click.secho(f"HIIT creada: {hiit_id} ({len(parsed)} ejercicios)", fg="green")


@hiit_group.command("complete")
@click.argument("hiit_id")
def complete_hiit(hiit_id):
    """Marca una HIIT como terminada y actualiza el progreso."""
    hiit = _get_hiit_or_fail(hiit_id)
    exercises = hiitboard.list_exercises(db.session, hiit_id=hiit_id)
    path = _progress_path()
    state = record_completion(load_progress(path), hiit.name, exercises)
    save_progress(path, state)
    click.secho(
        f"'{hiit.name}' completada. HIITs totales: {format_count(state.totalhiits)}",
        fg="green",
    )


@progress_group.command("show")
def show_progress():
    """Resumen del progreso guardado."""
    state = load_progress(_progress_path())
    click.echo(f"HIITs completadas:      {format_count(state.totalhiits)}")
    click.echo(f"Ejercicios completados: {format_count(state.completed_exercise_count)}")
    click.echo(f"Tiempo total:           {format_duration(state.completed_time)}")
    for entry in state.completed_hiits:
        click.echo(f"  {entry['duration']}  {entry['name']}")


@progress_group.command("reset")
@click.confirmation_option(prompt="¿Borrar todo el progreso?")
def reset_progress():
    save_progress(_progress_path(), ProgressState())
    click.secho("Progreso reiniciado.", fg="yellow")
