from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from system_cnf.models.enums import VideoMode


class SystemCnfModel(BaseModel):
    """Parsed form of a ``SYSTEM.CNF`` file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    elf_path: str = Field(..., description="Boot program path, without the ;1 suffix")
    version: str
    video_mode: VideoMode
    hdd_unit_power: str | None = None

    @model_validator(mode="after")
    def _validate(self) -> "SystemCnfModel":
        values = [self.elf_path, self.version]
        if self.hdd_unit_power is not None:
            values.append(self.hdd_unit_power)
        for value in values:
            if "\n" in value:
                raise ValueError("SYSTEM.CNF values must not contain a line feed")
        return self

    @classmethod
    def parse(cls, raw_cnf: str) -> "SystemCnfModel":
        from system_cnf.codec import decode

        return decode(raw_cnf)

    def __str__(self) -> str:
        from system_cnf.codec import encode

        return encode(self)
