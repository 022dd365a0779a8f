"""Section model for outlines returned by the language model."""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, field_validator

# str | list of content | mapping of str to content, nested to any depth
SectionContent = Union[str, List[Any], Dict[str, Any]]

class Section(BaseModel):
    """Represents one titled unit of an outline."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = ""
    content: Any = ""

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serializable form of the section."""
        return {"title": self.title, "content": self.content}
