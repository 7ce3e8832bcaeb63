# seefit/utils/validators.py
"""
Validación de lo que escribe el usuario al crear una HIIT.
Devuelven el registro listo para guardar o None si la entrada no vale.
"""


def validate_hiit_input(name, description):
    """
    Recorta espacios; si nombre o descripción quedan vacíos -> None.
    Lo que crea el usuario siempre es de tipo 'custom'.
    """
    name = (name or "").strip()
    description = (description or "").strip()
    if not name or not description:
        return None
    return {"name": name, "description": description, "type": "custom"}


def validate_exercise_input(name, description, exercise_duration, rest_duration):
    """
    Cualquier valor vacío -> None. Una duración 0 cuenta como vacía.
    No se recorta nada: los valores pasan tal cual.
    """
    if not name or not description or not exercise_duration or not rest_duration:
        return None
    return {
        "name": name,
        "description": description,
        "exercise_duration": exercise_duration,
        "rest_duration": rest_duration,
    }
