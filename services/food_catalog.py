"""Static food catalog with macros per 100 g."""

from typing import Dict, List, Optional

from schemas.enums import Food


def _food(food: Food, name: str, protein: float, carbs: float, fat: float, kcal: float) -> Dict:
    return {
        "id": food.value,
        "name": name,
        "macrosPer100g": {"protein": protein, "carbs": carbs, "fat": fat, "kcal": kcal},
    }


_CATALOG = (
    (Food.CHICKEN_BREAST, "Cooked chicken breast", 31, 0, 3.6, 165),
    (Food.BOILED_EGG, "Boiled egg", 13, 1.1, 11, 155),
    (Food.BROWN_RICE_COOKED, "Cooked brown rice", 2.6, 23, 0.9, 111),
    (Food.BLACK_BEANS_COOKED, "Cooked black beans", 8.9, 23.7, 0.5, 132),
    (Food.OATS, "Oats", 16.9, 66.3, 6.9, 389),
    (Food.BANANA, "Banana", 1.1, 22.8, 0.3, 96),
    (Food.APPLE, "Apple", 0.3, 13.8, 0.2, 52),
    (Food.SWEET_POTATO_COOKED, "Cooked sweet potato", 1.6, 20.1, 0.1, 86),
    (Food.SALMON_GRILLED, "Grilled salmon", 22, 0, 12, 208),
    (Food.TUNA_CANNED_WATER, "Tuna canned in water", 23.6, 0, 0.8, 109),
    (Food.COTTAGE_CHEESE, "Cottage cheese", 11.1, 3.4, 4.3, 98),
    (Food.GREEK_YOGURT_PLAIN, "Plain greek yogurt", 10, 3.6, 4, 97),
    (Food.QUINOA_COOKED, "Cooked quinoa", 4.4, 21.3, 1.9, 120),
    (Food.BROCCOLI_COOKED, "Cooked broccoli", 2.8, 7, 0.4, 35),
    (Food.ALMONDS, "Almonds", 21.2, 21.7, 49.9, 579),
    (Food.AVOCADO, "Avocado", 2, 8.5, 14.7, 160),
    (Food.WHOLE_WHEAT_BREAD, "Whole wheat bread", 13, 41, 4.2, 247),
    (Food.SKIM_MILK, "Skim milk", 3.4, 5, 0.2, 35),
    (Food.LENTILS_COOKED, "Cooked lentils", 9, 20, 0.4, 116),
    (Food.OLIVE_OIL, "Olive oil", 0, 0, 100, 884),
)

FOOD_DATA: Dict[Food, Dict] = {food: _food(food, *values) for food, *values in _CATALOG}


def get_food(food_id: str) -> Optional[Dict]:
    """Catalog entry for food_id, or None for unknown ids."""
    try:
        return FOOD_DATA[Food(food_id)]
    except ValueError:
        return None


def list_foods() -> List[Dict]:
    """All catalog entries in declaration order."""
    return list(FOOD_DATA.values())
