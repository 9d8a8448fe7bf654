"""Read model handed to renderers."""

from pydantic import BaseModel, ConfigDict, Field

from listkeeper.models.entry import Entry


class PageView(BaseModel):
    """What a renderer needs to draw one page of the list."""

    model_config = ConfigDict(frozen=True)

    visible_entries: tuple[Entry, ...] = Field(default=())
    current_page: int = Field(default=1, ge=1)
    page_count: int = Field(default=0, ge=0)

    @property
    def show_pagination(self) -> bool:
        """Whether the page selector should be drawn at all."""
        return self.page_count > 1
