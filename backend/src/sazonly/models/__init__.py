from .nutrition import NutrientRecord, UnitConversion  # noqa: F401
