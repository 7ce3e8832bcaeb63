# seefit/forms/hiit_form.py

from flask_wtf import FlaskForm
from wtforms import StringField, IntegerField, SelectField
from wtforms.fields.core import UnboundField
from wtforms.validators import DataRequired, Length, NumberRange


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class _JsonForm(FlaskForm):
    # API JSON sin sesión: sin CSRF
    class Meta:
        csrf = False

    # campos que llegan como número en el JSON; el resto deben ser texto
    integer_fields = ()

    @classmethod
    def json_type_errors(cls, payload):
        """
        Comprueba el tipo JSON de cada campo conocido antes de construir el form.
        WTForms convierte lo que recibe (30.9 -> 30, true -> 1), así que aquí
        se rechaza lo que no sea str o int.
        """
        errors = {}
        for name, value in payload.items():
            if not isinstance(getattr(cls, name, None), UnboundField):
                continue
            if name in cls.integer_fields:
                if isinstance(value, bool) or not isinstance(value, int):
                    errors[name] = f"{name} debe ser un número entero"
            elif not isinstance(value, str):
                errors[name] = f"{name} debe ser texto"
        return errors


class HiitForm(_JsonForm):
    hiit_id = StringField(
        "Id",
        filters=[_strip],
        validators=[DataRequired("hiit_id es obligatorio"), Length(max=36)]
    )
    name = StringField(
        "Nombre",
        filters=[_strip],
        validators=[DataRequired("El nombre es obligatorio"), Length(max=120)]
    )
    description = StringField(
        "Descripción",
        filters=[_strip],
        validators=[DataRequired("La descripción es obligatoria")]
    )
    type = SelectField(
        "Tipo",
        choices=[("default", "Default"), ("custom", "Custom")],
        default="custom",
    )


class ExerciseForm(_JsonForm):
    integer_fields = ("exercise_duration", "rest_duration")

    name = StringField(
        "Nombre",
        filters=[_strip],
        validators=[DataRequired("El nombre es obligatorio"), Length(max=120)]
    )
    description = StringField(
        "Descripción",
        filters=[_strip],
        validators=[DataRequired("La descripción es obligatoria")]
    )
    # 0 cuenta como vacío (DataRequired), no como duración válida
    exercise_duration = IntegerField(
        "Duración (s)",
        validators=[
            DataRequired("exercise_duration es obligatorio"),
            NumberRange(min=1, message="exercise_duration debe ser positivo")
        ]
    )
    rest_duration = IntegerField(
        "Descanso (s)",
        validators=[
            DataRequired("rest_duration es obligatorio"),
            NumberRange(min=1, message="rest_duration debe ser positivo")
        ]
    )
    hiit_id = StringField(
        "HIIT",
        filters=[_strip],
        validators=[DataRequired("hiit_id es obligatorio"), Length(max=36)]
    )
