# scripts/bootstrap.py
from sqlalchemy import inspect

from seefit import create_app, db

# Asegúrate de importar todos los modelos registrados
from seefit.models.hiit import Hiit, Exercise
from seefit.cli.seed import seed_default_hiits


def main():
    app = create_app()
    with app.app_context():
        print("DB =>", app.config.get("SQLALCHEMY_DATABASE_URI"))

        # crea tablas faltantes
        db.create_all()

        tables = set(inspect(db.engine).get_table_names())
        for t in (Hiit.__tablename__, Exercise.__tablename__):
            print(f"[table] {t:12s}", "OK" if t in tables else "FALTA")

        created, skipped = seed_default_hiits(db.session)
        print(f"[seed] HIITs nuevas: {created}, ya existían: {skipped}")


if __name__ == "__main__":
    main()
