"""Domain model for user-submitted facts."""

from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Union

from pydantic import BaseModel, Field

MAX_FACT_LENGTH = 200
MAX_FACTS = 1000
ALL_CATEGORIES = "all"

FactId = Union[int, str]


class Category(str, Enum):
    """Fixed set of fact categories."""

    TECHNOLOGY = "technology"
    SCIENCE = "science"
    FINANCE = "finance"
    SOCIETY = "society"
    ENTERTAINMENT = "entertainment"
    HEALTH = "health"
    HISTORY = "history"
    NEWS = "news"
    FUNNY = "funny"


# Display colors, never persisted with a fact
CATEGORY_COLORS: Dict[Category, str] = {
    Category.TECHNOLOGY: "#3b82f6",
    Category.SCIENCE: "#16a34a",
    Category.FINANCE: "#ef4444",
    Category.SOCIETY: "#eab308",
    Category.ENTERTAINMENT: "#db2777",
    Category.HEALTH: "#14b8a6",
    Category.HISTORY: "#f97316",
    Category.NEWS: "#8b5cf6",
    Category.FUNNY: "#88bb55",
}


class VoteKind(str, Enum):
    """Counter a vote action targets. Values are the store column names."""

    INTERESTING = "votesInteresting"
    MINDBLOWING = "votesMindblowing"
    FALSE = "votesFalse"


def category_names() -> list[str]:
    """Get the category names in display order."""
    return [category.value for category in Category]


def is_known_category(name: str) -> bool:
    """Check whether a name belongs to the fixed category set."""
    return name in category_names()


def category_color(category: Union[Category, str]) -> str:
    """Get the display color for a category."""
    return CATEGORY_COLORS[Category(category)]


class Fact(BaseModel):
    """A short factual statement with its vote counters."""

    id: FactId = Field(..., description="Identifier assigned by the store")
    text: str = Field(..., description="The statement itself")
    source: str = Field(..., description="URL backing the statement")
    category: Category = Field(..., description="Fact category")
    votes_interesting: int = Field(0, ge=0, alias="votesInteresting")
    votes_mindblowing: int = Field(0, ge=0, alias="votesMindblowing")
    votes_false: int = Field(0, ge=0, alias="votesFalse")
    created_at: Optional[datetime] = Field(None, description="When the store created the row")

    class Config:
        """Pydantic model configuration."""
        frozen = True  # Immutable model
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": 7,
                "text": "Water boils at 100C at sea level.",
                "source": "https://example.com",
                "category": "science",
                "votesInteresting": 3,
                "votesMindblowing": 1,
                "votesFalse": 5,
            }
        }

    @property
    def is_disputed(self) -> bool:
        """Positive votes are outnumbered by false votes."""
        return self.votes_interesting + self.votes_mindblowing < self.votes_false

    @property
    def color(self) -> str:
        """Get the display color of the fact's category."""
        return CATEGORY_COLORS[self.category]

    def votes_for(self, kind: VoteKind) -> int:
        """Get the current value of the counter a vote kind targets."""
        return {
            VoteKind.INTERESTING: self.votes_interesting,
            VoteKind.MINDBLOWING: self.votes_mindblowing,
            VoteKind.FALSE: self.votes_false,
        }[VoteKind(kind)]
