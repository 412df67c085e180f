"""Fitness plan data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlanStats:
    """Energy figures and cost estimate for a plan."""

    bmr: float
    tdee: float
    target_calories: float
    goal_description: str
    estimated_monthly_cost: str

    def to_dict(self) -> dict:
        return {
            "bmr": self.bmr,
            "tdee": self.tdee,
            "targetCalories": self.target_calories,
            "goalDescription": self.goal_description,
            "estimatedMonthlyCost": self.estimated_monthly_cost,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlanStats":
        return cls(
            bmr=data["bmr"],
            tdee=data["tdee"],
            target_calories=data["targetCalories"],
            goal_description=data["goalDescription"],
            estimated_monthly_cost=data["estimatedMonthlyCost"],
        )


@dataclass(frozen=True)
class Macros:
    """Daily macronutrient targets in grams."""

    protein: float
    carbs: float
    fats: float

    def to_dict(self) -> dict:
        return {"protein": self.protein, "carbs": self.carbs, "fats": self.fats}

    @classmethod
    def from_dict(cls, data: dict) -> "Macros":
        return cls(protein=data["protein"], carbs=data["carbs"], fats=data["fats"])


@dataclass(frozen=True)
class Supplement:
    name: str
    timing: str


@dataclass(frozen=True)
class MealItem:
    name: str
    quantity: str


@dataclass(frozen=True)
class Meal:
    """A meal slot with its items and two alternatives."""

    timing: str  # e.g. Breakfast, Pre-workout
    name: str
    items: tuple[MealItem, ...] = ()
    alternatives: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "timing": self.timing,
            "name": self.name,
            "items": [{"name": i.name, "quantity": i.quantity} for i in self.items],
            "alternatives": list(self.alternatives),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Meal":
        return cls(
            timing=data["timing"],
            name=data["name"],
            items=tuple(MealItem(name=i["name"], quantity=i["quantity"]) for i in data["items"]),
            alternatives=tuple(data["alternatives"]),
        )


@dataclass(frozen=True)
class Exercise:
    """An exercise prescription within a workout day."""

    name: str
    sets: str
    reps: str
    rest: str
    notes: str = ""  # Form cue or tempo

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "rest": self.rest,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class WorkoutDay:
    """A single training day."""

    day: str  # Day of the week, Sunday first
    focus: str
    warmup: str
    exercises: tuple[Exercise, ...] = ()
    cardio: str | None = None
    abs: str | None = None

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "focus": self.focus,
            "warmup": self.warmup,
            "exercises": [ex.to_dict() for ex in self.exercises],
            "cardio": self.cardio,
            "abs": self.abs,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutDay":
        return cls(
            day=data["day"],
            focus=data["focus"],
            warmup=data["warmup"],
            exercises=tuple(
                Exercise(
                    name=ex["name"],
                    sets=ex["sets"],
                    reps=ex["reps"],
                    rest=ex["rest"],
                    notes=ex.get("notes", ""),
                )
                for ex in data["exercises"]
            ),
            cardio=data.get("cardio"),
            abs=data.get("abs"),
        )


@dataclass(frozen=True)
class Recovery:
    sleep: str
    stress: str
    progress_tracking: str

    def to_dict(self) -> dict:
        return {
            "sleep": self.sleep,
            "stress": self.stress,
            "progressTracking": self.progress_tracking,
        }


@dataclass(frozen=True)
class FitnessPlan:
    """A complete one-week diet and workout plan.

    Plans are produced wholesale by the generator and never edited; every
    week of a progression chain is a new, independent value.
    """

    week_number: int
    stats: PlanStats
    macros: Macros
    hydration: str
    recovery: Recovery
    supplements: tuple[Supplement, ...] = ()
    diet_plan: tuple[Meal, ...] = ()
    workout_split: tuple[WorkoutDay, ...] = ()

    def to_dict(self) -> dict:
        """Convert to the wire/storage representation."""
        return {
            "weekNumber": self.week_number,
            "stats": self.stats.to_dict(),
            "macros": self.macros.to_dict(),
            "hydration": self.hydration,
            "supplements": [{"name": s.name, "timing": s.timing} for s in self.supplements],
            "dietPlan": [meal.to_dict() for meal in self.diet_plan],
            "workoutSplit": [day.to_dict() for day in self.workout_split],
            "recovery": self.recovery.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FitnessPlan":
        """Create from the wire/storage representation.

        Assumes the document already passed schema validation.
        """
        recovery = data["recovery"]
        return cls(
            week_number=int(data["weekNumber"]),
            stats=PlanStats.from_dict(data["stats"]),
            macros=Macros.from_dict(data["macros"]),
            hydration=data["hydration"],
            supplements=tuple(
                Supplement(name=s["name"], timing=s["timing"]) for s in data["supplements"]
            ),
            diet_plan=tuple(Meal.from_dict(m) for m in data["dietPlan"]),
            workout_split=tuple(WorkoutDay.from_dict(d) for d in data["workoutSplit"]),
            recovery=Recovery(
                sleep=recovery["sleep"],
                stress=recovery["stress"],
                progress_tracking=recovery["progressTracking"],
            ),
        )

    def get_summary(self) -> str:
        """Generate a text rendering of the plan."""
        summary = f"Week {self.week_number}: {self.stats.goal_description}\n"
        summary += (
            f"BMR: {self.stats.bmr:.0f} kcal | TDEE: {self.stats.tdee:.0f} kcal | "
            f"Target: {self.stats.target_calories:.0f} kcal\n"
        )
        summary += (
            f"Macros: {self.macros.protein:.0f}g protein, {self.macros.carbs:.0f}g carbs, "
            f"{self.macros.fats:.0f}g fats\n"
        )
        summary += f"Hydration: {self.hydration}\n"
        summary += f"Estimated monthly cost: {self.stats.estimated_monthly_cost}\n"

        if self.diet_plan:
            summary += "\nDiet:\n"
            for meal in self.diet_plan:
                summary += f"  {meal.timing} - {meal.name}\n"
                for item in meal.items:
                    summary += f"    - {item.name}: {item.quantity}\n"
                for i, alt in enumerate(meal.alternatives, start=1):
                    summary += f"    Alt {i}: {alt}\n"

        if self.workout_split:
            summary += "\nWorkouts:\n"
            for day in self.workout_split:
                summary += f"  {day.day} - {day.focus}\n"
                summary += f"    Warmup: {day.warmup}\n"
                for ex in day.exercises:
                    summary += f"    - {ex.name}: {ex.sets} x {ex.reps}, rest {ex.rest}"
                    if ex.notes:
                        summary += f" ({ex.notes})"
                    summary += "\n"
                if day.cardio:
                    summary += f"    Cardio: {day.cardio}\n"
                if day.abs:
                    summary += f"    Abs: {day.abs}\n"

        if self.supplements:
            summary += "\nSupplements:\n"
            for s in self.supplements:
                summary += f"  - {s.name} ({s.timing})\n"

        summary += "\nRecovery:\n"
        summary += f"  Sleep: {self.recovery.sleep}\n"
        summary += f"  Stress: {self.recovery.stress}\n"
        summary += f"  Progress tracking: {self.recovery.progress_tracking}\n"

        return summary
