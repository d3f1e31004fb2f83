"""Base definitions for the offline common-foods catalog.

Values are per 100 g. ``portion``/``unit`` describe the default serving the
catalog reports; foods flagged with ``variations`` also get one entry per
cooking method.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BaseFood:
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    category: str
    variations: bool = False
    portion: float = 100.0
    unit: str = "g"


@dataclass(frozen=True)
class CookingMethod:
    """Per-100g adjustment applied by a cooking method."""

    name: str
    calorie_factor: float
    protein_factor: float
    carbs_factor: float
    added_fat_g: float


COOKING_METHODS = (
    CookingMethod("Grilled", 1.0, 1.0, 1.0, 0),
    CookingMethod("Fried", 1.4, 1.0, 1.1, 12),
    CookingMethod("Breaded", 1.5, 1.0, 1.3, 10),
    CookingMethod("Roasted", 1.1, 1.0, 1.0, 3),
    CookingMethod("Boiled", 0.9, 0.95, 0.95, 0),
    CookingMethod("Steamed", 0.95, 1.0, 1.0, 0),
    CookingMethod("Sautéed", 1.15, 1.0, 1.0, 5),
    CookingMethod("Baked", 1.0, 1.0, 1.0, 0),
    CookingMethod("Raw", 1.0, 1.0, 1.0, 0),
)

# Meats that are never listed raw.
NO_RAW_VARIANT = ("Chicken", "Turkey", "Pork")

BASE_FOODS = (
    # Meat and poultry
    BaseFood("Chicken Breast", 165, 31, 0, 3.6, "Protein", variations=True),
    BaseFood("Chicken Thigh", 209, 26, 0, 10.9, "Protein", variations=True),
    BaseFood("Chicken Wing", 203, 20, 0, 13, "Protein", True, 40, "wing"),
    BaseFood("Chicken Drumstick", 160, 18, 0, 9, "Protein", True, 80, "drumstick"),
    BaseFood("Ground Chicken", 180, 25, 0, 9, "Protein", variations=True),
    BaseFood("Turkey Breast", 135, 30, 0, 1, "Protein", variations=True),
    BaseFood("Ground Turkey", 150, 22, 0, 8, "Protein", variations=True),
    BaseFood("Beef Steak (Sirloin)", 250, 26, 0, 15, "Protein", variations=True),
    BaseFood("Beef Steak (Ribeye)", 290, 24, 0, 22, "Protein", variations=True),
    BaseFood("Ground Beef (80/20)", 254, 17, 0, 20, "Protein", variations=True),
    BaseFood("Ground Beef (90/10)", 176, 20, 0, 10, "Protein", variations=True),
    BaseFood("Pork Chop", 231, 24, 0, 14, "Protein", variations=True),
    BaseFood("Pork Loin", 242, 27, 0, 14, "Protein", variations=True),
    BaseFood("Bacon", 541, 37, 1.4, 42, "Protein", portion=15, unit="slice"),
    BaseFood("Lamb Chop", 294, 25, 0, 21, "Protein", variations=True),
    # Seafood
    BaseFood("Salmon", 208, 20, 0, 13, "Protein", variations=True),
    BaseFood("Tuna Steak", 130, 28, 0, 1, "Protein", variations=True),
    BaseFood("Cod", 82, 18, 0, 0.7, "Protein", variations=True),
    BaseFood("Tilapia", 96, 20, 0, 1.7, "Protein", variations=True),
    BaseFood("Shrimp", 99, 24, 0.2, 0.3, "Protein", variations=True),
    BaseFood("Sardines", 208, 25, 0, 11, "Protein"),
    BaseFood("Canned Tuna (Water)", 116, 26, 0, 1, "Protein", portion=165, unit="can"),
    # Eggs and dairy
    BaseFood("Egg (Whole)", 143, 13, 0.7, 9.5, "Protein", True, 50, "egg"),
    BaseFood("Egg White", 52, 11, 0.7, 0.2, "Protein", portion=33, unit="white"),
    BaseFood("Milk (Whole)", 60, 3.2, 4.8, 3.3, "Dairy", portion=244, unit="cup"),
    BaseFood("Milk (2%)", 50, 3.3, 4.8, 2, "Dairy", portion=244, unit="cup"),
    BaseFood("Milk (Skim)", 34, 3.4, 5, 0.1, "Dairy", portion=244, unit="cup"),
    BaseFood("Almond Milk (Unsweetened)", 13, 0.4, 0.6, 1.1, "Dairy", portion=244, unit="cup"),
    BaseFood("Oat Milk", 50, 1, 8, 2, "Dairy", portion=244, unit="cup"),
    BaseFood("Greek Yogurt (Plain)", 59, 10, 3.6, 0.4, "Dairy", portion=170, unit="cup"),
    BaseFood("Cottage Cheese", 98, 11, 3.4, 4.3, "Dairy", portion=226, unit="cup"),
    BaseFood("Cheddar Cheese", 403, 25, 1.3, 33, "Fat", portion=28, unit="slice"),
    BaseFood("Mozzarella", 300, 22, 2.2, 22, "Fat", portion=28, unit="oz"),
    BaseFood("Butter", 717, 0.9, 0.1, 81, "Fat", portion=14, unit="tbsp"),
    # Plant protein
    BaseFood("Tofu (Firm)", 144, 17, 3, 9, "Protein", variations=True),
    BaseFood("Tempeh", 192, 20, 8, 11, "Protein", variations=True),
    BaseFood("Edamame", 121, 12, 9, 5, "Protein"),
    BaseFood("Black Beans", 132, 9, 24, 0.5, "Carb", portion=172, unit="cup"),
    BaseFood("Chickpeas", 164, 9, 27, 2.6, "Carb", portion=164, unit="cup"),
    BaseFood("Lentils", 116, 9, 20, 0.4, "Carb", portion=198, unit="cup"),
    BaseFood("Hummus", 166, 8, 14, 10, "Fat", portion=15, unit="tbsp"),
    # Vegetables
    BaseFood("Broccoli", 34, 2.8, 7, 0.4, "Veg", variations=True),
    BaseFood("Cauliflower", 25, 1.9, 5, 0.3, "Veg", variations=True),
    BaseFood("Spinach", 23, 2.9, 3.6, 0.4, "Veg", variations=True),
    BaseFood("Asparagus", 20, 2.2, 3.9, 0.1, "Veg", variations=True),
    BaseFood("Green Beans", 31, 1.8, 7, 0.2, "Veg", variations=True),
    BaseFood("Carrot", 41, 0.9, 10, 0.2, "Veg", variations=True),
    BaseFood("Bell Pepper", 26, 1, 6, 0.3, "Veg", variations=True),
    BaseFood("Cucumber", 15, 0.7, 3.6, 0.1, "Veg"),
    BaseFood("Tomato", 18, 0.9, 3.9, 0.2, "Veg"),
    BaseFood("Zucchini", 17, 1.2, 3.1, 0.3, "Veg", variations=True),
    BaseFood("Mushroom", 22, 3.1, 3.3, 0.3, "Veg", variations=True),
    BaseFood("Potato (White)", 77, 2, 17, 0.1, "Carb", variations=True),
    BaseFood("Sweet Potato", 86, 1.6, 20, 0.1, "Carb", variations=True),
    BaseFood("Avocado", 160, 2, 8.5, 15, "Fat", portion=200, unit="fruit"),
    # Fruit
    BaseFood("Apple", 52, 0.3, 14, 0.2, "Fruit", portion=182, unit="medium"),
    BaseFood("Banana", 89, 1.1, 23, 0.3, "Fruit", portion=118, unit="medium"),
    BaseFood("Orange", 47, 0.9, 12, 0.1, "Fruit", portion=131, unit="medium"),
    BaseFood("Strawberry", 32, 0.7, 7.7, 0.3, "Fruit", portion=152, unit="cup"),
    BaseFood("Blueberry", 57, 0.7, 14, 0.3, "Fruit", portion=148, unit="cup"),
    BaseFood("Grapes", 69, 0.7, 18, 0.2, "Fruit", portion=151, unit="cup"),
    BaseFood("Mango", 60, 0.8, 15, 0.4, "Fruit", portion=336, unit="fruit"),
    # Grains
    BaseFood("White Rice", 130, 2.7, 28, 0.3, "Carb", portion=158, unit="cup"),
    BaseFood("Brown Rice", 111, 2.6, 23, 0.9, "Carb", portion=195, unit="cup"),
    BaseFood("Quinoa", 120, 4.4, 21, 1.9, "Carb", portion=185, unit="cup"),
    BaseFood("Oats (Rolled)", 379, 13, 68, 6.5, "Carb", portion=81, unit="cup"),
    BaseFood("Pasta (Spaghetti)", 158, 6, 31, 0.9, "Carb", portion=140, unit="cup"),
    BaseFood("Bread (White)", 265, 9, 49, 3.2, "Carb", portion=30, unit="slice"),
    BaseFood("Bread (Whole Wheat)", 247, 13, 41, 3.4, "Carb", portion=30, unit="slice"),
    BaseFood("Bagel", 250, 10, 49, 1.5, "Carb", portion=100, unit="bagel"),
    BaseFood("Tortilla (Flour)", 300, 8, 50, 7, "Carb", portion=50, unit="piece"),
    # Nuts, seeds and snacks
    BaseFood("Almonds", 579, 21, 22, 50, "Snack", portion=28, unit="oz"),
    BaseFood("Walnuts", 654, 15, 14, 65, "Snack", portion=28, unit="oz"),
    BaseFood("Peanut Butter", 588, 25, 20, 50, "Fat", portion=16, unit="tbsp"),
    BaseFood("Chia Seeds", 486, 17, 42, 31, "Snack", portion=12, unit="tbsp"),
    BaseFood("Dark Chocolate (70%)", 598, 8, 46, 43, "Snack", portion=28, unit="oz"),
    # Oils and condiments
    BaseFood("Olive Oil", 884, 0, 0, 100, "Fat", portion=14, unit="tbsp"),
    BaseFood("Mayonnaise", 680, 1, 1, 75, "Fat", portion=14, unit="tbsp"),
    BaseFood("Ketchup", 100, 1, 26, 0, "Carb", portion=17, unit="tbsp"),
    BaseFood("Honey", 304, 0.3, 82, 0, "Carb", portion=21, unit="tbsp"),
    # Drinks
    BaseFood("Coffee (Black)", 1, 0.1, 0, 0, "Drink", portion=237, unit="cup"),
    BaseFood("Orange Juice", 45, 0.7, 10, 0.2, "Drink", portion=248, unit="cup"),
    BaseFood("Cola", 42, 0, 11, 0, "Drink", portion=330, unit="can"),
    BaseFood("Beer", 43, 0.5, 3.6, 0, "Drink", portion=355, unit="can"),
)
