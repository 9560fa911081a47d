"""Agent record and performance category definitions."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Agent:
    """A tracked agent and its current performance percentage."""

    id: str
    name: str
    percentage: int


@dataclass(frozen=True)
class CategoryInfo:
    """Display attributes of a performance category.

    Attributes:
        label: Human readable tier name shown on badges and tiles.
        variant: Badge emphasis: "default", "secondary", "outline" or
            "destructive".
        color: Colour name used for swatches, tiles and bars.
        range_text: Legend text describing the covered percentages.
    """

    label: str
    variant: str
    color: str
    range_text: str


class Category(Enum):
    """Performance tiers, best first."""

    EXCELLENT = CategoryInfo("Excellent", "default", "green", "90-100%")
    GOOD = CategoryInfo("Good", "secondary", "blue", "75-89%")
    AVERAGE = CategoryInfo("Average", "outline", "yellow", "60-74%")
    NEEDS_IMPROVEMENT = CategoryInfo("Needs Improvement", "destructive", "red", "0-59%")

    @property
    def label(self) -> str:
        return self.value.label

    @property
    def variant(self) -> str:
        return self.value.variant

    @property
    def color(self) -> str:
        return self.value.color

    @property
    def range_text(self) -> str:
        return self.value.range_text
