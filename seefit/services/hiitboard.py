# seefit/services/hiitboard.py
"""
Acceso a datos de HIITs y ejercicios.

Todas las funciones reciben la sesión de SQLAlchemy como primer argumento
(en la app es db.session; en tests cualquier sesión sobre una BD desechable).
Cada operación es un único commit contra la BD; los errores de la BD se
traducen a ConstraintViolation / StorageUnavailable tras hacer rollback.
"""
import logging
from contextlib import contextmanager

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from seefit.models.hiit import Hiit, Exercise
from seefit.services.errors import ConstraintViolation, StorageUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(session, op: str):
    try:
        yield
    except IntegrityError as e:
        session.rollback()
        logger.warning(f"[hiitboard] {op}: restricción violada ({e.orig})")
        raise ConstraintViolation(f"{op}: {e.orig}") from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"[hiitboard] {op}: error de BD ({e})")
        raise StorageUnavailable(f"{op}: {e}") from e


# ---------- HIITS ----------

def list_hiits(session):
    """Todas las HIITs (default + custom) en orden de inserción."""
    with _storage_errors(session, "list_hiits"):
        stmt = select(Hiit).order_by(Hiit.created_at.asc(), Hiit.hiits_id.asc())
        return list(session.execute(stmt).scalars())


def add_hiit(session, hiit_id, name, description, hiit_type="custom"):
    """
    Inserta una HIIT con el id que da el llamante (no se autogenera).
    Un id repetido acaba en ConstraintViolation por la PK.
    """
    with _storage_errors(session, "add_hiit"):
        session.execute(
            insert(Hiit).values(
                hiits_id=hiit_id, name=name, description=description, type=hiit_type
            )
        )
        session.commit()
        logger.info(f"[hiitboard] HIIT añadida {hiit_id} ({hiit_type})")
        return session.get(Hiit, hiit_id)


def find_hiit(session, hiit_id):
    """HIIT por su hiits_id, o None si no existe."""
    with _storage_errors(session, "find_hiit"):
        stmt = select(Hiit).where(Hiit.hiits_id == hiit_id)
        return session.execute(stmt).scalar_one_or_none()


def delete_hiit(session, hiit_id) -> bool:
    """
    Borra la HIIT y sus ejercicios en el mismo commit.
    Borrar un id inexistente no es error: devuelve False.
    """
    with _storage_errors(session, "delete_hiit"):
        result = session.execute(delete(Hiit).where(Hiit.hiits_id == hiit_id))
        session.execute(delete(Exercise).where(Exercise.hiit_id == hiit_id))
        session.commit()
        deleted = (result.rowcount or 0) > 0
        logger.info(f"[hiitboard] delete {hiit_id}: {'borrada' if deleted else 'no existía'}")
        return deleted


# ---------- EJERCICIOS ----------

def list_exercises(session, hiit_id=None):
    """Ejercicios en orden de inserción; con hiit_id solo los de esa HIIT."""
    with _storage_errors(session, "list_exercises"):
        stmt = select(Exercise)
        if hiit_id is not None:
            stmt = stmt.where(Exercise.hiit_id == hiit_id)
        stmt = stmt.order_by(Exercise.exercise_id.asc())
        return list(session.execute(stmt).scalars())


def add_exercise(session, name, description, exercise_duration, rest_duration, hiit_id):
    # hiit_id no se comprueba contra hiits
    with _storage_errors(session, "add_exercise"):
        ex = Exercise(
            name=name,
            description=description,
            exercise_duration=exercise_duration,
            rest_duration=rest_duration,
            hiit_id=hiit_id,
        )
        session.add(ex)
        session.commit()
        logger.debug(f"[hiitboard] ejercicio {ex.exercise_id} -> HIIT {hiit_id}")
        return ex


def add_hiit_with_exercises(session, hiit_id, name, description, hiit_type, exercises):
    """
    Inserta la HIIT y sus ejercicios en un solo commit.
    `exercises` son tuplas (name, description, exercise_duration, rest_duration).
    Si algo falla no queda ni la HIIT ni ninguno de sus ejercicios.
    """
    with _storage_errors(session, "add_hiit_with_exercises"):
        session.execute(
            insert(Hiit).values(
                hiits_id=hiit_id, name=name, description=description, type=hiit_type
            )
        )
        session.add_all([
            Exercise(
                name=ex_name,
                description=ex_description,
                exercise_duration=work,
                rest_duration=rest,
                hiit_id=hiit_id,
            )
            for ex_name, ex_description, work, rest in exercises
        ])
        session.commit()
        logger.info(f"[hiitboard] HIIT añadida {hiit_id} ({hiit_type}) con {len(exercises)} ejercicios")
        return session.get(Hiit, hiit_id)
