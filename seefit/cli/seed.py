# seefit/cli/seed.py
import click
from flask.cli import AppGroup
from seefit import db
from seefit.services import hiitboard

seed_group = AppGroup("seed", help="Comandos de seed (datos iniciales)")

# ---- HIITs por defecto: 8 rutinas, 4 ejercicios cada una (segundos) ----
DEFAULT_HIITS = [
    {"hiits_id": "5d51f171-afbf-4885-91e3-83f0cc72499d", "name": "HIIT Quick Blast",
     "description": "A fast full-body session to get the heart rate up in under ten minutes.",
     "exercises": [
         ("Jumping Jacks", "Jump while spreading legs and raising arms overhead.", 60, 60),
         ("High Knees", "Run in place driving the knees up to hip height.", 45, 60),
         ("Burpees", "Squat, kick back to a plank, return and jump up.", 60, 60),
         ("Mountain Climbers", "From a plank, drive the knees to the chest alternately.", 60, 60),
     ]},
    {"hiits_id": "6bddceaa-8c75-4946-84df-38a4f2abbe79", "name": "Tabata Torch",
     "description": "Classic Tabata intervals: short all-out efforts with brief recovery.",
     "exercises": [
         ("Squat Jumps", "Squat down and explode upwards, landing softly.", 20, 10),
         ("Push-ups", "Lower the chest to the floor and press back up.", 20, 10),
         ("Skater Hops", "Leap side to side landing on one leg.", 20, 10),
         ("Plank Jacks", "Hold a plank and jump the feet in and out.", 20, 10),
     ]},
    {"hiits_id": "0f6b2d84-3c1e-4a57-9b8e-2d7c5a1e9f30", "name": "Power Plyo HIIT",
     "description": "Explosive plyometric moves for leg power and speed.",
     "exercises": [
         ("Box Jumps", "Jump onto a sturdy box and step back down.", 40, 20),
         ("Split Lunge Jumps", "Jump switching legs between lunges.", 40, 20),
         ("Tuck Jumps", "Jump and pull the knees towards the chest.", 30, 30),
         ("Lateral Bounds", "Bound sideways from one foot to the other.", 40, 20),
     ]},
    {"hiits_id": "a3c9e1f2-7b64-4d0a-8f15-6e2b9c4d7a81", "name": "Cardio Crusher",
     "description": "Sustained cardio intervals to build endurance.",
     "exercises": [
         ("Butt Kicks", "Jog in place kicking the heels to the glutes.", 45, 15),
         ("Fast Feet", "Quick small steps on the balls of the feet.", 45, 15),
         ("Star Jumps", "Jump spreading arms and legs into a star.", 45, 15),
         ("Shadow Boxing", "Throw quick punches while bouncing on the feet.", 45, 15),
     ]},
    {"hiits_id": "c7d41b09-2e8f-4f63-a1d5-93b0e6f27c14", "name": "Core Crusher",
     "description": "Intervals focused on the abdominal and lower back muscles.",
     "exercises": [
         ("Bicycle Crunches", "Alternate elbow to opposite knee while lying down.", 40, 20),
         ("Plank Hold", "Hold a straight plank on the forearms.", 45, 15),
         ("Russian Twists", "Seated, rotate the torso from side to side.", 40, 20),
         ("Leg Raises", "Lying flat, lift straight legs to vertical.", 40, 20),
     ]},
    {"hiits_id": "e2f80a6d-9c31-4b7e-b4a2-15d8c3e96f07", "name": "Lower Body Blitz",
     "description": "Leg-focused circuit for strength and stamina.",
     "exercises": [
         ("Bodyweight Squats", "Sit back and down, then stand tall.", 45, 15),
         ("Reverse Lunges", "Step back into a lunge and return.", 45, 15),
         ("Glute Bridges", "Lift the hips from the floor squeezing the glutes.", 45, 15),
         ("Wall Sit", "Hold a seated position against a wall.", 45, 15),
     ]},
    {"hiits_id": "4b9d3f60-8a27-4c1e-9e53-7f06a2b8d4c9", "name": "Upper Body Burn",
     "description": "Arms, chest and shoulders without any equipment.",
     "exercises": [
         ("Push-ups", "Lower the chest to the floor and press back up.", 40, 20),
         ("Tricep Dips", "Dip using a chair or bench behind you.", 40, 20),
         ("Plank Shoulder Taps", "In a plank, tap each shoulder with the opposite hand.", 40, 20),
         ("Pike Push-ups", "Hips high, lower the head towards the floor.", 40, 20),
     ]},
    {"hiits_id": "91e5c2a7-d4b8-4f06-a3c9-2b7e8d1f5a63", "name": "Beginner Burner",
     "description": "A gentle introduction to interval training with longer rests.",
     "exercises": [
         ("Marching in Place", "March lifting the knees at a steady pace.", 30, 30),
         ("Step Jacks", "Step out to the side while raising the arms.", 30, 30),
         ("Incline Push-ups", "Push-ups with the hands on a raised surface.", 30, 30),
         ("Standing Knee Raises", "Alternate lifting each knee towards the chest.", 30, 30),
     ]},
]


def seed_default_hiits(session, items=None):
    """
    Inserta las HIITs por defecto con sus ejercicios.
    Idempotente por hiits_id: las que ya existen no se tocan. Cada HIIT va
    con sus ejercicios en un mismo commit, así que nunca queda a medias.
    """
    created, skipped = 0, 0
    for h in items or DEFAULT_HIITS:
        if hiitboard.find_hiit(session, h["hiits_id"]):
            skipped += 1
            continue
        hiitboard.add_hiit_with_exercises(
            session, h["hiits_id"], h["name"], h["description"], "default", h["exercises"]
        )
        created += 1
    return created, skipped


@seed_group.command("hiits")
def seed_hiits():
    """
    Carga las 8 HIITs por defecto (4 ejercicios cada una).
    Se puede lanzar varias veces: no duplica.
    """
    db.create_all()
    created, skipped = seed_default_hiits(db.session)
    click.secho(f"Hecho. Nuevas: {created}, Ya existían: {skipped}", fg="green")
