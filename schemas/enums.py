"""Enums for collection fields."""

from enum import Enum


class Role(str, Enum):
    """User role enum."""
    USER = "user"
    ADMIN = "admin"


class Gender(str, Enum):
    """Patient gender enum."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Food(str, Enum):
    """Food catalog identifiers accepted in meal items."""
    CHICKEN_BREAST = "chicken_breast"
    BOILED_EGG = "boiled_egg"
    BROWN_RICE_COOKED = "brown_rice_cooked"
    BLACK_BEANS_COOKED = "black_beans_cooked"
    OATS = "oats"
    BANANA = "banana"
    APPLE = "apple"
    SWEET_POTATO_COOKED = "sweet_potato_cooked"
    SALMON_GRILLED = "salmon_grilled"
    TUNA_CANNED_WATER = "tuna_canned_water"
    COTTAGE_CHEESE = "cottage_cheese"
    GREEK_YOGURT_PLAIN = "greek_yogurt_plain"
    QUINOA_COOKED = "quinoa_cooked"
    BROCCOLI_COOKED = "broccoli_cooked"
    ALMONDS = "almonds"
    AVOCADO = "avocado"
    WHOLE_WHEAT_BREAD = "whole_wheat_bread"
    SKIM_MILK = "skim_milk"
    LENTILS_COOKED = "lentils_cooked"
    OLIVE_OIL = "olive_oil"


class EnergyCalculationFormula(str, Enum):
    """Theoretical energy expenditure formula labels (never evaluated server-side)."""
    # Adults and elderly
    HARRIS_BENEDICT_1984 = "harris-benedict-1984"
    HARRIS_BENEDICT_1919 = "harris-benedict-1919"
    FAO_WHO_2004 = "fao-who-2004"
    EER_IOM_2005 = "eer-iom-2005"
    EER_2023 = "eer-2023"
    KATCH_MCARDLE_1996 = "katch-mcardle-1996"
    CUNNINGHAM_1980 = "cunningham-1980"
    MIFFLIN_OBESITY_1990 = "mifflin-obesidade-1990"
    MIFFLIN_OVERWEIGHT_1990 = "mifflin-sobrepeso-1990"
    HENRY_REES_1991 = "henry-rees-1991"
    TINSLEY_BY_WEIGHT_2018 = "tinsley-por-peso-2018"
    TINSLEY_BY_LEAN_MASS_2018 = "tinsley-por-mlg-2018"
    POCKET_FORMULA_TEE = "get-por-formula-bolso"
    MANUAL_BMR = "colocar-tmb-manualmente"
    MANUAL_TEE = "colocar-get-manualmente"

    # Children
    EER_IOM_2005_CHILD = "eer-iom-2005-infantil"
    EER_2023_CHILD = "eer-2023-infantil"
    FAO_WHO_2004_CHILD = "fao-who-2004-infantil"
    SCHOFIELD_1985_CHILD = "schofield-1985-infantil"

    # Pregnancy
    HEALTH_MINISTRY_PREGNANCY_2005 = "min-saude-gestante-2005"
    EER_2023_PREGNANCY = "eer-2023-gestante"

    # Lactation
    EER_2023_LACTATION = "eer-2023-lactante"

    # Integrations
    HANDYMET = "handymet"


class PhysicalActivityFactor(float, Enum):
    """Physical activity multiplier."""
    NOT_APPLICABLE = 1.0
    SEDENTARY = 1.2
    LIGHT = 1.375
    MODERATE = 1.55
    INTENSE = 1.725
    VERY_INTENSE = 1.9


class InjuryFactor(float, Enum):
    """Injury (stress) multiplier."""
    NOT_APPLICABLE = 1.0
    MINOR_SURGERY = 1.2
    MILD_INFECTION = 1.3
    SKELETAL_TRAUMA = 1.35
    MULTIPLE_TRAUMA = 1.5
    SEPSIS = 1.6
    SEVERE_BURN = 2.1
