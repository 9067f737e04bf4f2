"""Independent recommendation rules.

Each rule inspects a shared :class:`RuleContext` and returns at most one
:class:`Recommendation`. Rules never mutate the context, so they can be
evaluated in any order; the engine fixes the order so ties in priority keep
a predictable sequence.
"""

from dataclasses import dataclass
from typing import Protocol

from nutrition_analytics.domain.meals import MealRecord
from nutrition_analytics.domain.recommendations import (
    Category,
    Priority,
    Recommendation,
)
from nutrition_analytics.domain.stats import DailySummary
from nutrition_analytics.domain.users import DailyTargets
from nutrition_analytics.services.rounding import round_half_up

PROTEIN_FOODS = ("Chicken breast", "Greek yogurt", "Lentils", "Eggs", "Paneer", "Tofu")
FIBER_FOODS = ("Broccoli", "Oats", "Apples", "Beans", "Brown rice")
CALORIE_DENSE_FOODS = ("Nuts", "Peanut butter", "Avocado", "Cheese", "Banana shake")


@dataclass(frozen=True)
class RuleContext:
    """Inputs shared by every rule for one evaluation."""

    today: DailySummary
    weekly_meals: list[MealRecord]
    targets: DailyTargets
    goal: str
    hour: int

    @property
    def calorie_pct(self) -> float:
        """Consumed calories as a percentage of target."""
        return _percentage(self.today.total_calories, self.targets.calories)

    @property
    def protein_pct(self) -> float:
        """Consumed protein as a percentage of target."""
        return _percentage(self.today.total_protein_g, self.targets.protein_g)

    @property
    def macro_grams(self) -> float:
        """Protein, carbs and fat grams combined."""
        return (
            self.today.total_protein_g
            + self.today.total_carbs_g
            + self.today.total_fat_g
        )

    def count_meal_type(self, meal_type: str) -> int:
        """Number of meals of a slot in the weekly window."""
        return sum(1 for meal in self.weekly_meals if meal.meal_type == meal_type)


class Rule(Protocol):
    """A single recommendation rule."""

    def evaluate(self, context: RuleContext) -> Recommendation | None:
        """Return a recommendation when the rule fires."""


class CalorieRule:
    """Exactly one of five calorie outcomes, or none."""

    def evaluate(self, context: RuleContext) -> Recommendation | None:
        pct = context.calorie_pct
        consumed = context.today.total_calories
        if consumed == 0 and context.hour >= 10:
            return Recommendation(
                category=Category.CALORIE,
                priority=Priority.HIGH,
                title="Haven't logged any meals today",
                message=(
                    "Start your day right by logging your breakfast! Consistent "
                    "tracking helps you reach your goals faster."
                ),
                action="Log your first meal",
                icon="🍳",
                details={"percentage": 0},
            )
        if pct < 30 and context.hour >= 14:
            return Recommendation(
                category=Category.CALORIE,
                priority=Priority.HIGH,
                title="Low calorie intake for this time of day",
                message=(
                    f"You've only consumed {round_half_up(pct)}% of your daily target. "
                    "Remember to eat regular meals to maintain energy levels."
                ),
                action="Plan your remaining meals",
                icon="⚡",
                details={"percentage": round_half_up(pct)},
            )
        if pct > 100:
            over_by = consumed - context.targets.calories
            details = {"percentage": round_half_up(pct), "over_by": over_by}
            if context.goal == "lose-weight":
                return Recommendation(
                    category=Category.CALORIE,
                    priority=Priority.HIGH,
                    title="Daily calorie target exceeded",
                    message=(
                        f"You're {_format_amount(over_by)} calories over your "
                        "target. Consider a light dinner and some physical activity."
                    ),
                    action="Plan a lighter dinner",
                    icon="⚠️",
                    details=details,
                )
            return Recommendation(
                category=Category.CALORIE,
                priority=Priority.LOW,
                title="Above your calorie target",
                message=(
                    f"You're {_format_amount(over_by)} calories over today. This is "
                    "fine occasionally, but try to balance it out over the week."
                ),
                icon="📊",
                details=details,
            )
        if 80 <= pct <= 100:
            return Recommendation(
                category=Category.CALORIE,
                priority=Priority.LOW,
                title="Great calorie balance! 🎯",
                message=(
                    "You're on track with your daily calorie goal. "
                    "Keep up the excellent work!"
                ),
                icon="✅",
                details={"percentage": round_half_up(pct)},
            )
        return None


class ProteinRule:
    """Low protein late in the day, or below a muscle-building pace."""

    def evaluate(self, context: RuleContext) -> Recommendation | None:
        pct = context.protein_pct
        if pct < 50 and context.hour >= 18:
            return Recommendation(
                category=Category.PROTEIN,
                priority=Priority.HIGH,
                title="Protein intake is low",
                message=(
                    f"Only {round_half_up(pct)}% of your protein target. Try adding "
                    "lean meats, eggs, legumes, or dairy to your next meal."
                ),
                action="Add protein-rich foods",
                icon="💪",
                suggestions=PROTEIN_FOODS,
                details={"percentage": round_half_up(pct)},
            )
        if context.goal == "build-muscle" and pct < 80 and context.hour >= 15:
            return Recommendation(
                category=Category.PROTEIN,
                priority=Priority.MEDIUM,
                title="Boost your protein for muscle gain",
                message=(
                    "For muscle building, aim for higher protein. Consider a "
                    "protein-rich snack or supplement."
                ),
                action="Add a protein snack",
                icon="🏋️",
                details={"percentage": round_half_up(pct)},
            )
        return None


class CarbRatioRule:
    """Carbohydrates dominate today's macro grams."""

    threshold_pct: float = 70

    def evaluate(self, context: RuleContext) -> Recommendation | None:
        total = context.macro_grams
        if total <= 0:
            return None
        ratio = context.today.total_carbs_g / total * 100
        if ratio <= self.threshold_pct:
            return None
        return Recommendation(
            category=Category.BALANCE,
            priority=Priority.MEDIUM,
            title="High carbohydrate ratio",
            message=(
                "Your meals are carb-heavy today. Try adding more protein and "
                "healthy fats for better satiety."
            ),
            action="Balance with protein",
            icon="⚖️",
            details={"ratio": round_half_up(ratio)},
        )


class FatRatioRule:
    """Fat dominates today's macro grams."""

    threshold_pct: float = 50

    def evaluate(self, context: RuleContext) -> Recommendation | None:
        total = context.macro_grams
        if total <= 0:
            return None
        ratio = context.today.total_fat_g / total * 100
        if ratio <= self.threshold_pct:
            return None
        return Recommendation(
            category=Category.FAT,
            priority=Priority.MEDIUM,
            title="High fat intake",
            message=(
                "Today's meals are high in fat. Consider lighter options for your "
                "remaining meals."
            ),
            action="Choose lighter options",
            icon="🥗",
            details={"ratio": round_half_up(ratio)},
        )


class BreakfastSkippingRule:
    """Fewer than three breakfasts logged in the past week."""

    min_breakfasts: int = 3

    def evaluate(self, context: RuleContext) -> Recommendation | None:
        if not context.weekly_meals:
            return None
        breakfasts = context.count_meal_type("breakfast")
        if breakfasts >= self.min_breakfasts:
            return None
        return Recommendation(
            category=Category.MEAL_TIMING,
            priority=Priority.MEDIUM,
            title="Breakfast skipping detected",
            message=(
                "You've skipped breakfast on several days this week. A healthy "
                "breakfast can boost metabolism and energy."
            ),
            action="Plan breakfast ahead",
            icon="🌅",
            details={"breakfasts": breakfasts},
        )


class FrequentSnackingRule:
    """More than ten snacks logged in the past week."""

    max_snacks: int = 10

    def evaluate(self, context: RuleContext) -> Recommendation | None:
        if not context.weekly_meals:
            return None
        snacks = context.count_meal_type("snack")
        if snacks <= self.max_snacks:
            return None
        return Recommendation(
            category=Category.MEAL_TIMING,
            priority=Priority.LOW,
            title="Frequent snacking",
            message=(
                "You're snacking frequently. Consider if these are mindful choices "
                "or could be consolidated into main meals."
            ),
            action="Review snacking habits",
            icon="🍿",
            details={"snacks": snacks},
        )


class GoalRule:
    """One branch per goal."""

    def evaluate(self, context: RuleContext) -> Recommendation | None:
        if context.goal == "lose-weight":
            return self._lose_weight(context)
        if context.goal in {"gain-weight", "build-muscle"}:
            return self._gain(context)
        if context.goal == "maintain":
            return self._maintain(context)
        return None

    def _lose_weight(self, context: RuleContext) -> Recommendation | None:
        if context.today.total_fiber_g >= context.targets.fiber_g * 0.5:
            return None
        return Recommendation(
            category=Category.GOAL,
            priority=Priority.MEDIUM,
            title="Increase fiber intake",
            message=(
                "Fiber helps you feel full longer. Add vegetables, fruits, and whole "
                "grains to support your weight loss goal."
            ),
            action="Add fiber-rich foods",
            icon="🥬",
            suggestions=FIBER_FOODS,
        )

    def _gain(self, context: RuleContext) -> Recommendation | None:
        if context.calorie_pct >= 90 or context.hour < 20:
            return None
        return Recommendation(
            category=Category.GOAL,
            priority=Priority.HIGH,
            title="Need more calories for your goal",
            message=(
                "You're under your calorie target. Add a calorie-dense snack to "
                "support your weight/muscle gain goal."
            ),
            action="Add calorie-dense foods",
            icon="🥜",
            suggestions=CALORIE_DENSE_FOODS,
        )

    def _maintain(self, context: RuleContext) -> Recommendation | None:
        if abs(context.calorie_pct - 100) > 10:
            return None
        return Recommendation(
            category=Category.GOAL,
            priority=Priority.LOW,
            title="Perfect maintenance! 🎯",
            message=(
                "You're right on track with your maintenance calories. Great job "
                "staying consistent!"
            ),
            icon="🏆",
        )


class HydrationRule:
    """Afternoon water reminder."""

    def evaluate(self, context: RuleContext) -> Recommendation | None:
        if not 12 <= context.hour <= 18:
            return None
        return Recommendation(
            category=Category.HYDRATION,
            priority=Priority.LOW,
            title="Stay hydrated",
            message=(
                f"Aim for {_format_amount(context.targets.water_glasses)} glasses of "
                "water today. Proper hydration aids digestion and metabolism."
            ),
            action="Drink a glass of water",
            icon="💧",
        )


DEFAULT_RULES: tuple[Rule, ...] = (
    CalorieRule(),
    ProteinRule(),
    CarbRatioRule(),
    FatRatioRule(),
    BreakfastSkippingRule(),
    FrequentSnackingRule(),
    GoalRule(),
    HydrationRule(),
)


def _percentage(consumed: float, target: float) -> float:
    if target <= 0:
        return 0.0
    return consumed / target * 100


def _format_amount(value: float) -> str:
    return f"{value:.0f}" if float(value).is_integer() else f"{value:.1f}"
