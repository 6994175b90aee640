"""Spanish -> English ingredient names for searching the bulk food dataset."""

from __future__ import annotations

import logging
import re
import unicodedata
from typing import Dict, List

logger = logging.getLogger(__name__)

# Keys are normalised (lowercase, no diacritics).
TRANSLATIONS: Dict[str, str] = {
    # Proteins
    "carne": "beef",
    "carne picada": "ground beef",
    "carne molida": "ground beef",
    "carne de res": "beef",
    "pollo": "chicken",
    "pechuga": "chicken breast",
    "pechuga de pollo": "chicken breast",
    "muslo de pollo": "chicken thigh",
    "huevo": "egg",
    "huevos": "egg",
    "clara de huevo": "egg white",
    "yema de huevo": "egg yolk",
    "garbanzos": "chickpeas",
    "lentejas": "lentils",
    "porotos": "beans",
    "porotos negros": "black beans",
    "frijoles": "beans",
    "atun": "tuna",
    "salmon": "salmon",
    "cerdo": "pork",
    "tocino": "bacon",
    "panceta": "bacon",
    "chorizo": "sausage",
    "salchicha": "sausage",
    # Grains and cereals
    "pasta": "pasta",
    "fideos": "pasta",
    "tallarines": "pasta",
    "spaguetti": "spaghetti",
    "arroz": "rice",
    "arroz blanco": "white rice",
    "arroz integral": "brown rice",
    "quinoa": "quinoa",
    "quinua": "quinoa",
    "harina": "wheat flour",
    "harina de trigo": "wheat flour",
    "harina integral": "whole wheat flour",
    "pan": "bread",
    "pan blanco": "white bread",
    "pan integral": "whole wheat bread",
    "pan rallado": "bread crumbs",
    "avena": "oats",
    "cebada": "barley",
    "maiz": "corn",
    # Dairy
    "leche": "milk",
    "leche entera": "whole milk",
    "leche descremada": "skim milk",
    "queso": "cheese",
    "queso parmesano": "parmesan cheese",
    "parmesano": "parmesan",
    "queso rallado": "parmesan",
    "mozzarella": "mozzarella",
    "queso crema": "cream cheese",
    "manteca": "butter",
    "mantequilla": "butter",
    "crema": "cream",
    "crema de leche": "heavy cream",
    "nata": "cream",
    "yogur": "yogurt",
    "yogurt": "yogurt",
    # Vegetables
    "tomate": "tomato",
    "tomates": "tomato",
    "tomate cherry": "cherry tomato",
    "cebolla": "onion",
    "cebollas": "onion",
    "cebolla morada": "red onion",
    "cebolla de verdeo": "green onion",
    "ajo": "garlic",
    "diente de ajo": "garlic",
    "espinaca": "spinach",
    "espinacas": "spinach",
    "lechuga": "lettuce",
    "zanahoria": "carrot",
    "zanahorias": "carrot",
    "pepino": "cucumber",
    "papa": "potato",
    "papas": "potato",
    "patata": "potato",
    "batata": "sweet potato",
    "boniato": "sweet potato",
    "brocoli": "broccoli",
    "coliflor": "cauliflower",
    "repollo": "cabbage",
    "col": "cabbage",
    # Regional (Rio de la Plata) names
    "palta": "avocado",
    "choclo": "corn",
    "zapallo": "pumpkin",
    "morron": "bell pepper",
    "pimiento": "bell pepper",
    "aji": "chili pepper",
    "ajies": "chili pepper",
    "arveja": "peas",
    "arvejas": "peas",
    "guisantes": "peas",
    "poroto": "beans",
    "chaucha": "green beans",
    "judias verdes": "green beans",
    "berenjena": "eggplant",
    "acelga": "chard",
    "remolacha": "beet",
    "betabel": "beet",
    "apio": "celery",
    "rabanito": "radish",
    # Fruits
    "manzana": "apple",
    "manzanas": "apple",
    "banana": "banana",
    "bananas": "banana",
    "platano": "banana",
    "limon": "lemon",
    "naranja": "orange",
    "naranjas": "orange",
    "frutilla": "strawberry",
    "frutillas": "strawberry",
    "fresa": "strawberry",
    "durazno": "peach",
    "melocoton": "peach",
    "pera": "pear",
    "uva": "grape",
    "uvas": "grape",
    "sandia": "watermelon",
    "melon": "melon",
    "kiwi": "kiwi",
    "mango": "mango",
    "pina": "pineapple",
    "anana": "pineapple",
    # Oils and fats
    "aceite": "oil",
    "aceite de oliva": "olive oil",
    "aceite de girasol": "sunflower oil",
    "aceite vegetal": "vegetable oil",
    "oliva": "olive",
    "aceitunas": "olive",
    # Spices and condiments
    "sal": "salt",
    "pimienta": "black pepper",
    "pimienta negra": "black pepper",
    "oregano": "oregano",
    "perejil": "parsley",
    "albahaca": "basil",
    "cilantro": "cilantro",
    "comino": "cumin",
    "pimenton": "paprika",
    "curry": "curry",
    "jengibre": "ginger",
    "canela": "cinnamon",
    "nuez moscada": "nutmeg",
    # Nuts and seeds
    "nuez": "walnut",
    "nueces": "walnut",
    "almendra": "almond",
    "almendras": "almond",
    "mani": "peanut",
    "cacahuate": "peanut",
    "semillas de chia": "chia seeds",
    "chia": "chia seeds",
    "semillas de sesamo": "sesame seeds",
    "ajonjoli": "sesame seeds",
    # Other
    "azucar": "sugar",
    "azucar blanca": "white sugar",
    "azucar morena": "brown sugar",
    "miel": "honey",
    "chocolate": "chocolate",
    "cacao": "cocoa",
    "vino": "wine",
    "vino blanco": "white wine",
    "vino tinto": "red wine",
    "levadura": "yeast",
    "vinagre": "vinegar",
    "mostaza": "mustard",
    "mayonesa": "mayonnaise",
    "ketchup": "ketchup",
    "salsa de tomate": "tomato sauce",
}

# Longest keys first so "aceite de oliva" wins over "aceite" in partial matches.
_KEYS_BY_LENGTH: List[str] = sorted(TRANSLATIONS, key=lambda k: (-len(k), k))

# Shorter queries are not tried as a substring of dictionary keys.
_MIN_REVERSE_QUERY = 3


def strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def normalize_name(text: str) -> str:
    """Lowercase, strip diacritics and collapse whitespace."""
    if not text:
        return ""
    return re.sub(r"\s+", " ", strip_accents(text.lower())).strip()


def translate_to_english(name: str) -> str:
    """Best-effort English search term for a Spanish ingredient name.

    Exact dictionary hit first, then a substring match in either direction,
    otherwise the normalised input itself. Never returns an empty string.
    """
    normalized = normalize_name(name)
    if not normalized:
        return "unknown"

    english = TRANSLATIONS.get(normalized)
    if english:
        logger.debug("translated %r -> %r", name, english)
        return english

    for spanish in _KEYS_BY_LENGTH:
        if spanish in normalized or (
            len(normalized) >= _MIN_REVERSE_QUERY and normalized in spanish
        ):
            english = TRANSLATIONS[spanish]
            logger.debug("translated (partial via %r) %r -> %r", spanish, name, english)
            return english

    logger.info("no translation for %r, searching with the original name", name)
    return normalized


def reverse_translations() -> Dict[str, str]:
    """English -> Spanish map; the first Spanish key listed for a term wins."""
    reverse: Dict[str, str] = {}
    for spanish, english in TRANSLATIONS.items():
        reverse.setdefault(english, spanish)
    return reverse
