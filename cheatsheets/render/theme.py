"""CSS class hooks attached to rendered elements."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Theme:
    """Class strings for each rendered element.

    Defaults match the site's Tailwind stylesheet.
    """

    headings: dict[int, str] = field(
        default_factory=lambda: {
            1: "text-3xl font-bold mt-10 mb-5",
            2: "text-2xl font-bold mt-8 mb-4",
            3: "text-xl font-bold mt-6 mb-3",
        }
    )
    link: str = "text-accent hover:underline"
    blockquote: str = "border-l-4 border-accent pl-4 italic text-gray-400 my-3"
    bullet_list: str = "list-disc space-y-1 my-3 pl-4"
    ordered_list: str = "list-decimal space-y-1 my-3 pl-4"
    table_wrapper: str = "overflow-x-auto my-6"
    table: str = "w-full border-collapse border border-gray-700"
    header_cell: str = "bg-secondary border border-gray-700 px-4 py-2 font-bold text-left"
    data_cell: str = "border border-gray-700 px-4 py-2"
    code_container: str = "bg-secondary rounded-lg p-4 my-4 overflow-x-auto relative group"
    highlighted_marker: str = "shiki-wrapper"
    rule: str = "my-8 border-gray-700"

    def heading(self, level: int) -> str:
        return self.headings.get(level, "font-bold")


DEFAULT_THEME = Theme()
