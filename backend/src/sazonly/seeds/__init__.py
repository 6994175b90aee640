"""Static seed data for the nutrient and unit-conversion tables.

Nutrient values are per 100 g; vitamins and minerals are % daily value.
"""

NUTRIENT_FIELDS = (
    "calories",
    "protein_g",
    "carbs_g",
    "fat_g",
    "fiber_g",
    "sugar_g",
    "sodium_mg",
    "vitamin_a_dv",
    "vitamin_c_dv",
    "calcium_dv",
    "iron_dv",
)

# (ingredient_name, spanish_name, category, *NUTRIENT_FIELDS)
NUTRIENT_RECORDS = [
    # Proteins
    ("ground beef", "carne picada", "protein", 250, 26, 0, 15, 0, 0, 75, 0, 0, 2, 15),
    ("beef", "carne de res", "protein", 250, 26, 0, 15, 0, 0, 75, 0, 0, 2, 20),
    ("egg", "huevo", "protein", 155, 13, 1.1, 11, 0, 1.1, 124, 10, 0, 5, 6),
    ("chickpeas", "garbanzos", "protein", 364, 19, 61, 6, 17, 11, 24, 1, 7, 5, 30),
    ("chicken", "pollo", "protein", 239, 27, 0, 14, 0, 0, 82, 1, 0, 1, 5),
    # Grains
    ("pasta", "fideos", "grain", 371, 13, 75, 1.5, 3, 2.7, 6, 0, 0, 2, 10),
    ("quinoa", "quinoa", "grain", 368, 14, 64, 6, 7, 0, 5, 0, 0, 5, 25),
    ("rice", "arroz", "grain", 130, 2.7, 28, 0.3, 0.4, 0.1, 1, 0, 0, 1, 1),
    ("wheat flour", "harina", "grain", 364, 10, 76, 1, 2.7, 0.3, 2, 0, 0, 2, 20),
    ("bread crumbs", "pan rallado", "grain", 395, 13, 72, 5, 4, 6, 732, 0, 0, 14, 18),
    # Dairy
    ("parmesan cheese", "queso parmesano", "dairy", 431, 38, 4, 29, 0, 0.9, 1602, 10, 0, 110, 3),
    ("mozzarella", "mozzarella", "dairy", 280, 28, 3, 17, 0, 1, 627, 8, 0, 50, 2),
    ("cheese", "queso", "dairy", 350, 25, 2, 27, 0, 1, 700, 15, 0, 70, 2),
    ("milk", "leche", "dairy", 61, 3.2, 4.8, 3.3, 0, 5.1, 44, 5, 0, 12, 0),
    ("butter", "manteca", "dairy", 717, 0.9, 0.1, 81, 0, 0.1, 11, 50, 0, 2, 0),
    ("heavy cream", "crema de leche", "dairy", 345, 2.1, 2.8, 37, 0, 2.8, 38, 35, 1, 7, 0),
    # Vegetables
    ("tomato", "tomate", "vegetable", 18, 0.9, 3.9, 0.2, 1.2, 2.6, 5, 17, 23, 1, 1),
    ("onion", "cebolla", "vegetable", 40, 1.1, 9, 0.1, 1.7, 4.2, 4, 0, 12, 2, 1),
    ("spinach", "espinaca", "vegetable", 23, 2.9, 3.6, 0.4, 2.2, 0.4, 79, 188, 47, 10, 15),
    ("avocado", "aguacate", "vegetable", 160, 2, 8.5, 15, 6.7, 0.7, 7, 3, 17, 1, 3),
    ("lettuce", "lechuga", "vegetable", 15, 1.4, 2.9, 0.2, 1.3, 0.8, 28, 148, 15, 4, 5),
    ("cucumber", "pepino", "vegetable", 16, 0.7, 3.6, 0.1, 0.5, 1.7, 2, 2, 5, 2, 2),
    ("garlic", "ajo", "vegetable", 149, 6.4, 33, 0.5, 2.1, 1, 17, 0, 52, 18, 9),
    ("carrot", "zanahoria", "vegetable", 41, 0.9, 10, 0.2, 2.8, 4.7, 69, 334, 10, 3, 2),
    # Fats and oils
    ("olive oil", "aceite de oliva", "fat", 884, 0, 0, 100, 0, 0, 2, 0, 0, 0, 2),
    ("oil", "aceite", "fat", 884, 0, 0, 100, 0, 0, 0, 0, 0, 0, 0),
    # Sugars
    ("sugar", "azucar", "sugar", 387, 0, 100, 0, 0, 100, 1, 0, 0, 0, 0),
    ("honey", "miel", "sugar", 304, 0.3, 82, 0, 0.2, 82, 4, 0, 1, 1, 2),
    # Spices and condiments
    ("salt", "sal", "spice", 0, 0, 0, 0, 0, 0, 38758, 0, 0, 0, 0),
    ("black pepper", "pimienta", "spice", 251, 10, 64, 3, 26, 0.6, 20, 3, 0, 44, 52),
    ("oregano", "oregano", "spice", 265, 9, 69, 4, 43, 4, 25, 34, 4, 160, 205),
    ("parsley", "perejil", "spice", 36, 3, 6, 0.8, 3.3, 0.9, 56, 168, 220, 14, 34),
    ("basil", "albahaca", "spice", 23, 3.2, 2.7, 0.6, 1.6, 0.3, 4, 56, 30, 18, 18),
    # Other
    ("lemon", "limon", "fruit", 29, 1.1, 9, 0.3, 2.8, 2.5, 2, 0, 88, 3, 3),
    ("white wine", "vino blanco", "liquid", 82, 0.1, 2.6, 0, 0, 1.4, 5, 0, 0, 1, 2),
    ("yeast", "levadura", "other", 325, 41, 42, 7, 27, 0, 51, 0, 0, 3, 28),
]

# (unit_name, ingredient_category, grams_per_unit, notes)
BASE_UNIT_CONVERSIONS = [
    ("g", "any", 1, None),
    ("kg", "any", 1000, None),
    ("ml", "liquid", 1, None),
    ("l", "liquid", 1000, None),
    ("taza", "liquid", 240, None),
    ("cucharada", "liquid", 15, None),
    ("cucharadita", "liquid", 5, None),
    ("taza", "flour", 120, "harina, pan rallado"),
    ("cucharada", "flour", 8, None),
    ("taza", "sugar", 200, "azucar, miel"),
    ("cucharada", "sugar", 12, None),
    ("taza", "grain", 185, "arroz, quinoa"),
    ("cucharada", "fat", 14, "aceite, manteca"),
    ("unidad", "egg", 50, None),
    ("diente", "garlic", 3, None),
]

# Rows added after the first release; applied with insert-or-ignore.
PER_UNIT_CONVERSIONS = [
    ("cucharadita", "fat", 5, None),
    ("unidad", "avocado", 150, None),
    ("unidad", "lemon", 58, None),
    ("unidad", "lime", 67, None),
    ("unidad", "onion", 150, None),
    ("unidad", "tomato", 123, None),
    ("unidad", "potato", 173, None),
    ("unidad", "apple", 182, None),
    ("unidad", "banana", 118, None),
    ("unidad", "orange", 131, None),
    ("unidad", "carrot", 61, None),
    ("unidad", "bell_pepper", 119, None),
]

UNIT_CONVERSIONS = BASE_UNIT_CONVERSIONS + PER_UNIT_CONVERSIONS
