"""Template layout schemas.

A layout is the canvas definition stored on a template:

    {
        "canvasWidth": 1080,
        "canvasHeight": 1920,
        "backgroundColor": "#FFFFFF",
        "elements": [ {...ElementSchema...}, ... ]
    }

Elements are always held in ascending ``zIndex`` order. Python's sort is
stable, so elements sharing a ``zIndex`` keep their insertion order; that
order is what content mapping correlates against.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .element import ElementSchema

DEFAULT_CANVAS_WIDTH = 1080
DEFAULT_CANVAS_HEIGHT = 1920
DEFAULT_BACKGROUND_COLOR = "#FFFFFF"


def sort_by_z_index(elements) -> tuple[ElementSchema, ...]:
    """Stable sort of elements by ascending z-index."""
    return tuple(sorted(elements, key=lambda element: element.z_index))


class CanvasProperties(BaseModel):
    """Canvas-level properties of a layout.

    Attributes:
        width: Canvas width in pixels
        height: Canvas height in pixels
        background_color: Background color as a hex string
    """

    width: int = Field(default=DEFAULT_CANVAS_WIDTH, gt=0)
    height: int = Field(default=DEFAULT_CANVAS_HEIGHT, gt=0)
    background_color: str = DEFAULT_BACKGROUND_COLOR

    model_config = {"frozen": True}


class TemplateLayout(BaseModel):
    """Canvas definition of a template.

    Attributes:
        canvas_width: Canvas width, serialized as ``canvasWidth``
        canvas_height: Canvas height, serialized as ``canvasHeight``
        background_color: Canvas background, serialized as ``backgroundColor``
        elements: Elements sorted by ascending z-index
    """

    canvas_width: int = Field(default=DEFAULT_CANVAS_WIDTH, gt=0, alias="canvasWidth")
    canvas_height: int = Field(
        default=DEFAULT_CANVAS_HEIGHT, gt=0, alias="canvasHeight"
    )
    background_color: str = Field(
        default=DEFAULT_BACKGROUND_COLOR, alias="backgroundColor"
    )
    elements: tuple[ElementSchema, ...] = ()

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("elements", mode="after")
    @classmethod
    def _sort_elements(cls, value: tuple[ElementSchema, ...]) -> tuple[ElementSchema, ...]:
        return sort_by_z_index(value)

    @property
    def canvas(self) -> CanvasProperties:
        return CanvasProperties(
            width=self.canvas_width,
            height=self.canvas_height,
            background_color=self.background_color,
        )

    def element_ids(self) -> list[str]:
        return [element.id for element in self.elements]

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize to the stored layout JSON shape."""
        return self.model_dump(mode="json", by_alias=True)
