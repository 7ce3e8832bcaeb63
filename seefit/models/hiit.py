# seefit/models/hiit.py
from datetime import datetime
from seefit import db

HIIT_TYPES = ("default", "custom")


class Hiit(db.Model):
    """
    Rutina HIIT con nombre. Las de tipo 'default' vienen del seed,
    las 'custom' las crea el usuario y se pueden borrar.
    """
    __tablename__ = "hiits"

    hiits_id = db.Column(db.String(36), primary_key=True)          # UUID generado por el cliente
    name = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(16), nullable=False, default="custom")  # default | custom
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        db.CheckConstraint("type IN ('default','custom')", name="ck_hiits_type"),
    )

    def to_dict(self):
        return {
            "hiits_id": self.hiits_id,
            "name": self.name,
            "description": self.description,
            "type": self.type,
        }

    def __repr__(self):
        return f"<Hiit {self.hiits_id} {self.name!r} ({self.type})>"


class Exercise(db.Model):
    """
    Paso cronometrado (trabajo + descanso) de una HIIT.
    hiit_id no es FK: se permiten ejercicios huérfanos si el llamante pasa un id desconocido.
    """
    __tablename__ = "exercises"

    exercise_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=False)
    exercise_duration = db.Column(db.Integer, nullable=False)  # segundos de trabajo
    rest_duration = db.Column(db.Integer, nullable=False)      # segundos de descanso
    hiit_id = db.Column(db.String(36), nullable=False, index=True)

    def to_dict(self):
        return {
            "exercise_id": self.exercise_id,
            "name": self.name,
            "description": self.description,
            "exercise_duration": self.exercise_duration,
            "rest_duration": self.rest_duration,
            "hiit_id": self.hiit_id,
        }

    def __repr__(self):
        return f"<Exercise {self.exercise_id} {self.name!r} {self.exercise_duration}+{self.rest_duration}s>"
