"""Role model."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, StringConstraints, model_validator

HexColor = Annotated[str, StringConstraints(pattern=r"^#[0-9a-fA-F]{6}$")]


class Role(BaseModel):
    model_config = {"frozen": True, "coerce_numbers_to_str": True}

    id: str
    name: str
    color: HexColor | None = None  # "#rrggbb" or None

    @property
    def color_rgb(self) -> tuple[int, int, int] | None:
        if not self.color:
            return None
        hex_color = self.color.lstrip("#")
        return (
            int(hex_color[0:2], 16),
            int(hex_color[2:4], 16),
            int(hex_color[4:6], 16),
        )

    @model_validator(mode="before")
    @classmethod
    def _from_api(cls, data: dict) -> dict:  # type: ignore[override]
        color = data.get("color") if isinstance(data, dict) else None
        if not isinstance(color, int):
            return data

        # The API reports colours as integers, with 0 meaning "no colour"
        return {**data, "color": f"#{color:06x}" if color > 0 else None}
