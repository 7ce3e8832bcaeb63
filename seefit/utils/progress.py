# seefit/utils/progress.py
"""
Progreso del usuario (lo que la web guarda en localStorage):

    {
      "totalhiits": 3,
      "completedExerciseCount": 12,
      "completedTime": 900,
      "completedHiits": [{"name": "Tabata Torch", "duration": "08:30"}]
    }
"""
import json
import os
from dataclasses import dataclass, field
from typing import Dict, List

from seefit.utils.timer import format_duration, total_duration


def format_count(count: int) -> str:
    """Contadores del dashboard: 0-9 con un cero delante, el resto tal cual."""
    return f"{count}" if count > 9 else f"0{count}"


@dataclass
class ProgressState:
    totalhiits: int = 0
    completed_exercise_count: int = 0
    completed_time: int = 0
    completed_hiits: List[Dict[str, str]] = field(default_factory=list)

    def to_dict(self):
        return {
            "totalhiits": self.totalhiits,
            "completedExerciseCount": self.completed_exercise_count,
            "completedTime": self.completed_time,
            "completedHiits": [dict(h) for h in self.completed_hiits],
        }

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        return cls(
            totalhiits=int(data.get("totalhiits", 0)),
            completed_exercise_count=int(data.get("completedExerciseCount", 0)),
            completed_time=int(data.get("completedTime", 0)),
            completed_hiits=[
                {"name": str(h["name"]), "duration": str(h["duration"])}
                for h in data.get("completedHiits", [])
            ],
        )


def record_completion(state: ProgressState, name: str, exercises) -> ProgressState:
    """Suma una HIIT terminada: contadores + entrada {name, duration MM:SS}."""
    exercises = list(exercises)
    seconds = total_duration(exercises)
    state.totalhiits += 1
    state.completed_exercise_count += len(exercises)
    state.completed_time += seconds
    state.completed_hiits.append({"name": name, "duration": format_duration(seconds)})
    return state


def load_progress(path) -> ProgressState:
    """Lee el progreso desde JSON; si el fichero no existe, progreso vacío."""
    if not os.path.exists(path):
        return ProgressState()
    with open(path, "r", encoding="utf-8") as fh:
        return ProgressState.from_dict(json.load(fh))


def save_progress(path, state: ProgressState) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(state.to_dict(), fh, ensure_ascii=False, indent=2)
