"""User model."""

from __future__ import annotations

from pydantic import BaseModel, model_validator


class User(BaseModel):
    model_config = {"frozen": True, "coerce_numbers_to_str": True}

    id: str
    discriminator: int | None = None
    name: str
    global_name: str | None = None

    @property
    def display_name(self) -> str:
        return self.global_name or self.name

    @property
    def discriminator_formatted(self) -> str:
        return f"{self.discriminator:04d}" if self.discriminator is not None else "0000"

    @property
    def full_name(self) -> str:
        if self.discriminator is not None:
            return f"{self.name}#{self.discriminator_formatted}"
        return self.name

    @model_validator(mode="before")
    @classmethod
    def _from_api(cls, data: dict) -> dict:  # type: ignore[override]
        if not isinstance(data, dict) or "username" not in data:
            return data

        disc_raw = data.get("discriminator")
        discriminator = int(disc_raw) if disc_raw and str(disc_raw).strip() else None
        # Accounts migrated to unique usernames report "0"
        if discriminator == 0:
            discriminator = None

        return {
            "id": data.get("id"),
            "discriminator": discriminator,
            "name": data["username"],
            "global_name": data.get("global_name"),
        }
