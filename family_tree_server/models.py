"""Data models for family tree records."""

from dataclasses import dataclass, field

from .constants import DEFAULT_GENDER, GENDERS
from .helpers import format_person_name

# Positional address of a node: (0, child, grandchild, ...)
Index = tuple[int, ...]


@dataclass
class LifeEvent:
    date: str | None = None
    location: str | None = None

    def to_dict(self) -> dict:
        return {"date": self.date, "location": self.location}

    @classmethod
    def from_dict(cls, data) -> "LifeEvent | None":
        if not isinstance(data, dict):
            return None
        return cls(date=data.get("date"), location=data.get("location"))

    def describe(self) -> str | None:
        """Short "date in location" text, or None when no date is known."""
        if not self.date:
            return None
        if self.location:
            return f"{self.date} in {self.location}"
        return self.date


@dataclass
class Person:
    first_name: str
    nickname: str | None = None
    last_name: str | None = None
    spouse: str | None = None  # display label only, never a tree node
    gender: str = DEFAULT_GENDER
    birth: LifeEvent | None = None
    death: LifeEvent | None = None
    background_color: str | None = None
    text_color: str | None = None
    children: list["Person"] = field(default_factory=list)
    index: Index | None = None  # assigned by core.assign_index

    @classmethod
    def from_dict(cls, data) -> "Person":
        """Build an unindexed Person tree from a JSON-like dict.

        Raises:
            ValueError: If the node (or any descendant) is not a mapping.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a person object, got {type(data).__name__}")

        gender = str(data.get("gender") or DEFAULT_GENDER).lower()
        if gender not in GENDERS:
            gender = DEFAULT_GENDER

        children = data.get("children") or []
        if not isinstance(children, list):
            raise ValueError("'children' must be a list")

        return cls(
            first_name=str(data.get("first_name") or ""),
            nickname=data.get("nickname") or None,
            last_name=data.get("last_name") or None,
            spouse=data.get("spouse") or None,
            gender=gender,
            birth=LifeEvent.from_dict(data.get("birth")),
            death=LifeEvent.from_dict(data.get("death")),
            background_color=data.get("background_color"),
            text_color=data.get("text_color"),
            children=[cls.from_dict(child) for child in children],
        )

    def to_dict(self) -> dict:
        return {
            "index": list(self.index) if self.index is not None else None,
            "first_name": self.first_name,
            "nickname": self.nickname,
            "last_name": self.last_name,
            "spouse": self.spouse,
            "gender": self.gender,
            "birth": self.birth.to_dict() if self.birth else None,
            "death": self.death.to_dict() if self.death else None,
            "background_color": self.background_color,
            "text_color": self.text_color,
            "children": [child.to_dict() for child in self.children],
        }

    def to_summary(self) -> dict:
        """Short summary for list views."""
        return {
            "index": list(self.index) if self.index is not None else None,
            "name": format_person_name(self),
            "gender": self.gender,
            "birth_date": self.birth.date if self.birth else None,
            "death_date": self.death.date if self.death else None,
        }
