# seefit/routes/hiits.py
from flask import Blueprint, request, jsonify
from werkzeug.datastructures import ImmutableMultiDict

from seefit import db
from seefit.forms.hiit_form import HiitForm, ExerciseForm
from seefit.services import hiitboard
from seefit.services.errors import NotFound, ValidationError

hiits_api = Blueprint("hiits_api", __name__)


# -----------------------------------------------------------------------------#
# Helpers
# -----------------------------------------------------------------------------#
def _require_json():
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 415
    return None


def _validated(form_cls):
    """
    Construye el form desde el JSON del body y lo valida.
    Los null se tratan como campos ausentes.
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("El body debe ser un objeto JSON")
    payload = {k: v for k, v in body.items() if v is not None}
    type_errors = form_cls.json_type_errors(payload)
    if type_errors:
        raise ValidationError("Datos inválidos", fields=type_errors)
    form = form_cls(formdata=ImmutableMultiDict(payload))
    if not form.validate():
        fields = {name: errs[0] for name, errs in form.errors.items()}
        raise ValidationError("Datos inválidos", fields=fields)
    return form


# -----------------------------------------------------------------------------#
# HIITS
# -----------------------------------------------------------------------------#
@hiits_api.route("/hiits", methods=["GET"])
def list_hiits():
    hiits = hiitboard.list_hiits(db.session)
    return jsonify([h.to_dict() for h in hiits]), 200


@hiits_api.route("/hiits", methods=["POST"])
def create_hiit():
    """
    JSON: hiit_id (lo genera el cliente), name, description, type (default|custom)
    """
    err = _require_json()
    if err:
        return err
    form = _validated(HiitForm)
    hiit = hiitboard.add_hiit(
        db.session,
        form.hiit_id.data,
        form.name.data,
        form.description.data,
        form.type.data,
    )
    return jsonify(hiit.to_dict()), 200


@hiits_api.route("/hiits/<hiit_id>", methods=["GET"])
def get_hiit(hiit_id):
    hiit = hiitboard.find_hiit(db.session, hiit_id)
    if not hiit:
        raise NotFound(f"No existe la HIIT {hiit_id}")
    return jsonify(hiit.to_dict()), 200


@hiits_api.route("/hiits/<hiit_id>", methods=["DELETE"])
def delete_hiit(hiit_id):
    # Idempotente: 204 aunque no existiera
    hiitboard.delete_hiit(db.session, hiit_id)
    return "", 204


# -----------------------------------------------------------------------------#
# EJERCICIOS
# -----------------------------------------------------------------------------#
@hiits_api.route("/exercise", methods=["GET"])
def list_exercises():
    """Todos los ejercicios. ?hiit_id=... para los de una HIIT."""
    hiit_id = (request.args.get("hiit_id") or "").strip() or None
    exercises = hiitboard.list_exercises(db.session, hiit_id=hiit_id)
    return jsonify([e.to_dict() for e in exercises]), 200


@hiits_api.route("/exercise", methods=["POST"])
def create_exercise():
    """
    JSON: name, description, exercise_duration, rest_duration, hiit_id
    """
    err = _require_json()
    if err:
        return err
    form = _validated(ExerciseForm)
    ex = hiitboard.add_exercise(
        db.session,
        form.name.data,
        form.description.data,
        form.exercise_duration.data,
        form.rest_duration.data,
        form.hiit_id.data,
    )
    return jsonify(ex.to_dict()), 200
