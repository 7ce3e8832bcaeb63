# seefit/utils/identifiers.py
import uuid


def generate_id() -> str:
    """
    Id para una HIIT nueva: UUID v4 en texto canónico (36 caracteres, 8-4-4-4-12).
    """
    return str(uuid.uuid4())
