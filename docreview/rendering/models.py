from dataclasses import dataclass, field

NOT_AVAILABLE = "Not available"


@dataclass(frozen=True)
class Badge:
    text: str
    emphasis: str  # success | warning | error | info | secondary


Cell = str | Badge


@dataclass(frozen=True)
class InfoItem:
    label: str
    value: str
    highlight: bool = False
    full_width: bool = False


@dataclass(frozen=True)
class Table:
    headers: list[str]
    rows: list[list[Cell]]


@dataclass(frozen=True)
class BulletList:
    title: str
    entries: list[str]


@dataclass(frozen=True)
class IssueCard:
    heading: str
    badge: Badge
    description: str
    recommendation: str | None = None


@dataclass(frozen=True)
class EmptyState:
    message: str
    icon: str = "ℹ️"
    positive: bool = False


@dataclass(frozen=True)
class Panel:
    """One read-only section of a rendered result."""

    title: str
    icon: str = ""
    count: int | None = None
    items: list[InfoItem] = field(default_factory=list)
    lists: list[BulletList] = field(default_factory=list)
    table: Table | None = None
    cards: list[IssueCard] = field(default_factory=list)
    empty_state: EmptyState | None = None
    text: str | None = None
