"""Static meal template catalog used for suggestions."""

from types import MappingProxyType

from nutrition_analytics.domain.recommendations import MealTemplate

MEAL_CATALOG: MappingProxyType[str, tuple[MealTemplate, ...]] = MappingProxyType(
    {
        "breakfast": (
            MealTemplate(
                "Oatmeal with Fruits", 300, 10, 50, 8, ("vegetarian", "fiber-rich")
            ),
            MealTemplate("Eggs & Toast", 350, 18, 30, 16, ("high-protein",)),
            MealTemplate(
                "Greek Yogurt Parfait",
                280,
                15,
                35,
                8,
                ("vegetarian", "high-protein"),
            ),
            MealTemplate(
                "Avocado Toast", 320, 8, 28, 22, ("vegetarian", "healthy-fats")
            ),
            MealTemplate("Protein Smoothie", 350, 25, 40, 8, ("high-protein", "quick")),
            MealTemplate(
                "Poha with Vegetables", 280, 6, 45, 10, ("vegetarian", "indian")
            ),
            MealTemplate(
                "Idli with Sambar",
                250,
                8,
                42,
                5,
                ("vegetarian", "indian", "low-fat"),
            ),
        ),
        "lunch": (
            MealTemplate(
                "Grilled Chicken Salad", 450, 35, 20, 25, ("high-protein", "low-carb")
            ),
            MealTemplate("Dal Rice Bowl", 500, 15, 75, 12, ("vegetarian", "indian")),
            MealTemplate(
                "Paneer Tikka Wrap", 480, 22, 45, 22, ("vegetarian", "indian")
            ),
            MealTemplate(
                "Quinoa Buddha Bowl", 420, 18, 55, 15, ("vegetarian", "balanced")
            ),
            MealTemplate(
                "Chicken Biryani", 550, 28, 60, 20, ("indian", "high-protein")
            ),
            MealTemplate(
                "Vegetable Stir Fry", 380, 12, 45, 16, ("vegetarian", "quick")
            ),
        ),
        "dinner": (
            MealTemplate(
                "Grilled Fish with Vegetables",
                400,
                32,
                25,
                18,
                ("high-protein", "low-carb"),
            ),
            MealTemplate(
                "Chicken Curry with Roti", 480, 28, 45, 18, ("indian", "high-protein")
            ),
            MealTemplate(
                "Palak Paneer with Rice", 520, 18, 55, 24, ("vegetarian", "indian")
            ),
            MealTemplate(
                "Lentil Soup with Bread", 350, 16, 50, 8, ("vegetarian", "fiber-rich")
            ),
            MealTemplate(
                "Egg Curry with Chapati", 420, 20, 40, 18, ("indian", "high-protein")
            ),
            MealTemplate(
                "Mixed Vegetable Khichdi",
                380,
                12,
                60,
                10,
                ("vegetarian", "indian", "comfort"),
            ),
        ),
        "snack": (
            MealTemplate(
                "Mixed Nuts (handful)", 180, 5, 8, 16, ("healthy-fats", "quick")
            ),
            MealTemplate(
                "Apple with Peanut Butter", 200, 5, 25, 10, ("vegetarian", "quick")
            ),
            MealTemplate(
                "Protein Bar", 220, 15, 25, 8, ("high-protein", "convenient")
            ),
            MealTemplate(
                "Hummus with Carrots", 150, 5, 18, 7, ("vegetarian", "fiber-rich")
            ),
            MealTemplate(
                "Boiled Eggs (2)", 140, 12, 1, 10, ("high-protein", "low-carb")
            ),
            MealTemplate("Chana Chaat", 180, 8, 28, 5, ("vegetarian", "indian")),
        ),
    }
)


def templates_for(meal_type: str) -> tuple[MealTemplate, ...]:
    """Return catalog templates for a meal slot."""
    return MEAL_CATALOG.get(meal_type, ())
