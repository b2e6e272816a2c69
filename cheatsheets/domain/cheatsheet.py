"""Cheatsheet entities for the content catalog."""

from dataclasses import dataclass, asdict, field


@dataclass(frozen=True, slots=True)
class CheatsheetSummary:
    """Immutable listing entry.

    Carries only the metadata needed by listing pages and the search filter.

    Attributes:
        slug: Identifier derived from the filename (e.g., "python" for python.md)
        title: Display title (falls back to the slug)
        description: Short description (falls back to "Cheatsheet")
        category: Category name (falls back to "Programming Language")
    """

    slug: str
    title: str
    description: str
    category: str

    def to_dict(self) -> dict:
        """Convert summary to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "CheatsheetSummary":
        """Create summary from dictionary."""
        return cls(
            slug=data["slug"],
            title=data["title"],
            description=data["description"],
            category=data["category"],
        )


@dataclass(frozen=True, slots=True)
class Cheatsheet:
    """Immutable cheatsheet document.

    Materialized fresh on every read: the markdown body is rendered per load
    and never written back.

    Attributes:
        slug: Identifier derived from the filename
        title: Display title
        description: Short description
        category: Category name
        content: Raw markdown body following the metadata header
        content_html: Rendered HTML fragment for the body
        frontmatter: Parsed metadata header (empty when missing or malformed)
    """

    slug: str
    title: str
    description: str
    category: str
    content: str
    content_html: str
    frontmatter: dict = field(default_factory=dict)

    @property
    def summary(self) -> CheatsheetSummary:
        """Listing entry for this document."""
        return CheatsheetSummary(
            slug=self.slug,
            title=self.title,
            description=self.description,
            category=self.category,
        )

    def to_dict(self) -> dict:
        """Convert cheatsheet to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Cheatsheet":
        """Create cheatsheet from dictionary.

        Args:
            data: Dictionary with cheatsheet fields

        Returns:
            Cheatsheet instance
        """
        return cls(
            slug=data["slug"],
            title=data["title"],
            description=data["description"],
            category=data["category"],
            content=data.get("content", ""),
            content_html=data.get("content_html", ""),
            frontmatter=data.get("frontmatter") or {},
        )
