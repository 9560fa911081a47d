"""Map a percentage onto its performance category.

Thresholds come from :mod:`config.config`. Each lower bound is inclusive and
each upper bound exclusive, so a score on a boundary belongs to the higher
tier (90 is Excellent, 89 is Good). Both functions are total over the
integers; values outside [0, 100] land in the nearest end tier.
"""

from config.config import AVERAGE_MIN, EXCELLENT_MIN, GOOD_MIN

from .models import Category, CategoryInfo


def category_of(percentage: int) -> Category:
    """Return the category a percentage falls into."""
    if percentage >= EXCELLENT_MIN:
        return Category.EXCELLENT
    if percentage >= GOOD_MIN:
        return Category.GOOD
    if percentage >= AVERAGE_MIN:
        return Category.AVERAGE
    return Category.NEEDS_IMPROVEMENT


def classify(percentage: int) -> CategoryInfo:
    """Return label, badge variant and colour for a percentage."""
    return category_of(percentage).value
