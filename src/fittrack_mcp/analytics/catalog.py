"""Built-in exercise catalog: muscle groups, equipment and substitutes."""

import logging
from functools import lru_cache
from importlib import resources
from typing import Iterable, Sequence

from pydantic import TypeAdapter

from fittrack_mcp.analytics.matching import normalize_exercise_name
from fittrack_mcp.analytics.models import Exercise, ExerciseCategory, Workout

logger = logging.getLogger(__name__)

_EXERCISE_LIST = TypeAdapter(list[Exercise])


class ExerciseCatalog:
    """Lookup over a fixed list of exercises."""

    def __init__(self, exercises: Iterable[Exercise]):
        self._exercises = list(exercises)
        self._by_id = {e.id: e for e in self._exercises}
        self._by_name = {normalize_exercise_name(e.name): e for e in self._exercises}

    def __len__(self) -> int:
        return len(self._exercises)

    def get_by_id(self, exercise_id: str) -> Exercise | None:
        return self._by_id.get(exercise_id)

    def get_by_name(self, name: str) -> Exercise | None:
        return self._by_name.get(normalize_exercise_name(name))

    def by_muscle_group(self, muscle_group: str) -> list[Exercise]:
        return [e for e in self._exercises if muscle_group in e.muscle_groups]

    def search(self, query: str) -> list[Exercise]:
        """Exercises whose name or any muscle group contains ``query``."""
        q = query.casefold()
        return [
            e for e in self._exercises
            if q in e.name.casefold() or any(q in mg.casefold() for mg in e.muscle_groups)
        ]

    def substitutes(self, exercise_id: str) -> list[Exercise]:
        """Substitutes listed for an exercise; ids missing from the catalog are skipped."""
        exercise = self.get_by_id(exercise_id)
        if exercise is None:
            return []
        return [self._by_id[s] for s in exercise.substitutes if s in self._by_id]

    def substitutes_by_muscle_group(
        self,
        exercise_id: str,
        muscle_groups: Sequence[str] | None = None,
    ) -> list[Exercise]:
        """Substitutes sharing a muscle group with ``muscle_groups`` (default: the exercise's own)."""
        exercise = self.get_by_id(exercise_id)
        if exercise is None:
            return []
        targets = muscle_groups or exercise.muscle_groups
        return [s for s in self.substitutes(exercise_id) if set(s.muscle_groups) & set(targets)]

    def suggest_alternatives(
        self,
        exercise_id: str,
        equipment: Sequence[str] | None = None,
        muscle_groups: Sequence[str] | None = None,
        category: ExerciseCategory | None = None,
    ) -> list[Exercise]:
        alternatives = self.substitutes(exercise_id)
        if equipment:
            alternatives = [a for a in alternatives if set(a.equipment) & set(equipment)]
        if muscle_groups:
            alternatives = [a for a in alternatives if set(a.muscle_groups) & set(muscle_groups)]
        if category:
            alternatives = [a for a in alternatives if a.category == category]
        return alternatives


@lru_cache(maxsize=1)
def default_catalog() -> ExerciseCatalog:
    raw = resources.files("fittrack_mcp.analytics").joinpath("data/exercises.json").read_text(encoding="utf-8")
    catalog = ExerciseCatalog(_EXERCISE_LIST.validate_json(raw))
    logger.debug("Loaded %d catalog exercises", len(catalog))
    return catalog


def muscle_groups_for(workout: Workout, catalog: ExerciseCatalog | None = None) -> list[str]:
    """The workout's own muscle groups, or the catalog's for its exercise when none were logged."""
    if workout.muscle_groups:
        return workout.muscle_groups
    exercise = (catalog or default_catalog()).get_by_name(workout.exercise_name)
    return exercise.muscle_groups if exercise else []
