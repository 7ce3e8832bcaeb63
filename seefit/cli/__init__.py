# seefit/cli/__init__.py
from .seed import seed_group
from .hiits import hiit_group, progress_group


def register_cli(app):
    """Registra los grupos y comandos CLI de la app."""
    app.cli.add_command(seed_group)
    app.cli.add_command(hiit_group)
    app.cli.add_command(progress_group)
