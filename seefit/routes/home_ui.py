# seefit/routes/home_ui.py
from flask import Blueprint, render_template

home_ui = Blueprint("home_ui", __name__)


# La SPA resuelve sus rutas en cliente: /app/* sirve la misma página
@home_ui.route("/")
@home_ui.route("/app/", defaults={"subpath": ""})
@home_ui.route("/app/<path:subpath>")
@home_ui.route("/app/<path:subpath>/")
def index(subpath=""):
    return render_template("index.html")
