# seefit/utils/timer.py
"""
Cálculos del temporizador: formato MM:SS, duración total de una HIIT
y la secuencia de fases (trabajo / descanso) que recorre la cuenta atrás.
"""
from collections.abc import Mapping


def _field(exercise, key):
    # Vale tanto para dicts (JSON) como para modelos Exercise
    if isinstance(exercise, Mapping):
        return exercise[key]
    return getattr(exercise, key)


def format_duration(seconds: int) -> str:
    """
    Segundos -> "MM:SS" con ceros a la izquierda.

    Con tiempo negativo y menos de un minuto se muestra 59 - segundos
    (sin signo ni relleno), igual que la cuenta atrás cuando se pasa de cero.
    Con tiempo negativo y minutos > 0 el signo va delante de los minutos.
    """
    negative = seconds < 0
    minutes, secs = divmod(abs(seconds), 60)
    mm = f"{minutes:02d}"
    ss = f"{secs:02d}"

    if negative and minutes == 0:
        ss = f"{59 - secs}"
    elif negative:
        mm = f"-{mm}"

    return f"{mm}:{ss}"


def total_duration(exercises) -> int:
    """Suma exercise_duration + rest_duration de todos los ejercicios (0 si no hay)."""
    return sum(
        _field(ex, "exercise_duration") + _field(ex, "rest_duration")
        for ex in exercises
    )


def build_timeline(exercises):
    """
    Fases en el orden en que corre el temporizador:
    por cada ejercicio, primero el trabajo y luego el descanso.
    """
    phases = []
    for ex in exercises:
        name = _field(ex, "name")
        phases.append({"label": name, "phase": "exercise", "seconds": _field(ex, "exercise_duration")})
        phases.append({"label": f"Descanso tras {name}", "phase": "rest", "seconds": _field(ex, "rest_duration")})
    return phases
