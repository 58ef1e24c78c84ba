"""
Intent catalog: the fixed table of canonical phrases and their polished
rewrites.

Entries are created once at import time and never mutated. Insertion order is
significant: it is the stable tie-break used by the matcher and the scorer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Tuple


class Category(str, Enum):
    EMERGENCY = "emergency"
    DAILY = "daily"
    SOCIAL = "social"
    MEDICAL = "medical"
    NAVIGATION = "navigation"
    FOOD = "food"
    COMMUNICATION = "communication"


@dataclass(frozen=True)
class CatalogEntry:
    """A canonical user need mapped to a polished phrasing."""
    id: str
    phrase: str
    enhanced_phrase: str
    category: Category
    base_confidence: float = 1.0
    icon: str = ""


def _entry(id: str, phrase: str, enhanced: str, category: Category, icon: str) -> CatalogEntry:
    return CatalogEntry(
        id=id,
        phrase=phrase,
        enhanced_phrase=enhanced,
        category=category,
        base_confidence=1.0,
        icon=icon,
    )


INTENT_TABLE: Tuple[CatalogEntry, ...] = (
    # Emergency and urgent needs
    _entry("help-1", "I need help", "Excuse me, could you please assist me with something urgent?", Category.EMERGENCY, "AlertCircle"),
    _entry("help-2", "Help me", "Could someone please help me? I need assistance.", Category.EMERGENCY, "AlertCircle"),
    _entry("emergency-1", "Call 911", "This is an emergency. Please call 911 immediately.", Category.EMERGENCY, "Phone"),
    _entry("emergency-2", "Emergency", "I have an emergency situation and need immediate help.", Category.EMERGENCY, "AlertTriangle"),
    _entry("caregiver-1", "Call my caregiver", "Could you please help me contact my caregiver? It's important.", Category.EMERGENCY, "Users"),
    _entry("pain-1", "I'm in pain", "I'm experiencing significant discomfort and may need medical attention.", Category.MEDICAL, "Heart"),
    # Daily needs
    _entry("restroom-1", "Where's the bathroom", "Excuse me, could you please direct me to the nearest restroom?", Category.NAVIGATION, "MapPin"),
    _entry("restroom-2", "Bathroom", "Could you please show me where the bathroom is located?", Category.NAVIGATION, "MapPin"),
    _entry("restroom-3", "Toilet", "I need to use the restroom. Could you point me in the right direction?", Category.NAVIGATION, "MapPin"),
    _entry("water-1", "I need water", "Could I please have some water? I'm feeling quite thirsty.", Category.DAILY, "Droplets"),
    _entry("tired-1", "I'm tired", "I'm feeling quite tired and would like to rest for a moment.", Category.DAILY, "Moon"),
    _entry("hungry-1", "I'm hungry", "I'm feeling quite hungry. Could you help me find something to eat?", Category.FOOD, "Utensils"),
    # Social
    _entry("thanks-1", "Thank you", "Thank you so much for your help. I really appreciate your kindness.", Category.SOCIAL, "Heart"),
    _entry("thanks-2", "Thanks", "Thank you very much for your assistance.", Category.SOCIAL, "Heart"),
    _entry("hello-1", "Hello", "Hello there! It's wonderful to meet you.", Category.SOCIAL, "Hand"),
    _entry("goodbye-1", "Goodbye", "Thank you for your time. Have a wonderful day!", Category.SOCIAL, "Hand"),
    _entry("sorry-1", "Sorry", "I apologize for any inconvenience. Thank you for your understanding.", Category.SOCIAL, "Heart"),
    # Communication
    _entry("repeat-1", "Can you repeat", "Could you please repeat that? I didn't quite catch what you said.", Category.COMMUNICATION, "RotateCcw"),
    _entry("slower-1", "Speak slower", "Could you please speak a bit more slowly? I'd like to understand better.", Category.COMMUNICATION, "Clock"),
    _entry("understand-1", "I don't understand", "I'm having trouble understanding. Could you please explain differently?", Category.COMMUNICATION, "HelpCircle"),
    # Medical
    _entry("doctor-1", "I need a doctor", "I need medical attention. Could you help me contact a doctor?", Category.MEDICAL, "Stethoscope"),
    _entry("medicine-1", "I need my medicine", "I need to take my medication. Could you help me with that?", Category.MEDICAL, "Pill"),
    _entry("sick-1", "I feel sick", "I'm not feeling well and may need some assistance.", Category.MEDICAL, "Thermometer"),
    # Navigation
    _entry("exit-1", "Where's the exit", "Could you please show me the way to the nearest exit?", Category.NAVIGATION, "DoorOpen"),
    _entry("lost-1", "I'm lost", "I seem to have lost my way. Could you help me find where I need to go?", Category.NAVIGATION, "MapPin"),
    _entry("directions-1", "I need directions", "Could you please give me directions to where I need to go?", Category.NAVIGATION, "Navigation"),
)

# Shown when the user has typed nothing yet, or nothing matched.
POPULAR_IDS: Tuple[str, ...] = (
    "help-1",
    "thanks-1",
    "restroom-1",
    "hello-1",
    "water-1",
    "caregiver-1",
    "hungry-1",
    "tired-1",
)


class IntentCatalog:
    """Ordered, read-only view over a table of catalog entries."""

    def __init__(self, entries: Iterable[CatalogEntry] = INTENT_TABLE):
        self._entries: Tuple[CatalogEntry, ...] = tuple(entries)
        self._index: Dict[str, int] = {}
        for pos, entry in enumerate(self._entries):
            if entry.id in self._index:
                raise ValueError(f"duplicate catalog id: {entry.id}")
            if not 0.0 <= entry.base_confidence <= 1.0:
                raise ValueError(f"base_confidence out of range for {entry.id}")
            self._index[entry.id] = pos

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._index

    @property
    def entries(self) -> Tuple[CatalogEntry, ...]:
        return self._entries

    def get(self, entry_id: str) -> Optional[CatalogEntry]:
        pos = self._index.get(entry_id)
        if pos is None:
            return None
        return self._entries[pos]

    def index_of(self, entry_id: str) -> int:
        """Insertion position of an entry; unknown ids sort last."""
        return self._index.get(entry_id, len(self._entries))

    def by_category(self, category: Category | str) -> List[CatalogEntry]:
        try:
            wanted = Category(category)
        except ValueError:
            return []
        return [entry for entry in self._entries if entry.category == wanted]


__all__ = [
    "Category",
    "CatalogEntry",
    "INTENT_TABLE",
    "POPULAR_IDS",
    "IntentCatalog",
]
