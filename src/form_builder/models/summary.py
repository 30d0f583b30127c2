"""Read-only summary models for carts and order details."""

from pydantic import BaseModel, Field

EMPTY_VALUE = "-"


class SummaryItem(BaseModel):
    """One label/value row."""

    label: str
    value: str = ""
    section: str | None = None


class SummaryGroup(BaseModel):
    """Rows of one section; ``title`` is None when it is the only section."""

    title: str | None = None
    items: list[SummaryItem] = Field(default_factory=list)


class FormSummary(BaseModel):
    """Human-readable projection of submitted form data."""

    compact: bool = False
    items: list[SummaryItem] = Field(default_factory=list)
    groups: list[SummaryGroup] = Field(default_factory=list)
    placeholder: str | None = Field(
        default=None, description="Shown instead of rows when there is no data"
    )

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_lines(self) -> list[str]:
        """Render as plain text lines, ``Label: value`` per row."""
        if self.placeholder is not None and not self.items:
            return [self.placeholder]
        if self.compact:
            return [f"{item.label}: {item.value or EMPTY_VALUE}" for item in self.items]

        lines: list[str] = []
        for index, group in enumerate(self.groups):
            if group.title is not None:
                if index > 0:
                    lines.append("")
                lines.append(group.title)
            lines.extend(f"{item.label}: {item.value or EMPTY_VALUE}" for item in group.items)
        return lines
