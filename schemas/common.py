from enum import Enum


class Tone(str, Enum):
    authoritative = "Authoritative"
    educational = "Educational"
    inspirational = "Inspirational"
    entertaining = "Entertaining"
    analytical = "Analytical"


class ProductionPhase(str, Enum):
    pre_production = "pre-production"
    production = "production"
    post_production = "post-production"
