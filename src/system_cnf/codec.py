"""SYSTEM.CNF codec.

Decodes the ``KEY = VALUE`` text found at the root of a PlayStation 2 disc
image into a ``SystemCnfModel`` and encodes a model back into the canonical
CRLF layout. Both directions are pure; reading and writing the file is left
to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from system_cnf.models.enums import VideoMode
from system_cnf.models.system_cnf import SystemCnfModel
from system_cnf.util.assertx import MalformedFile, MissingField
from system_cnf.util.logging import log_indent

LOGGER = logging.getLogger(__name__)

CARRIAGE_RETURN = "\r"
LINE_FEED = "\n"
LINE_ENDING = CARRIAGE_RETURN + LINE_FEED
KEY_VALUE_SEPARATOR = "="
FIELD_SEPARATOR = " = "
SESSION_SUFFIX = ";1"

BOOT2_KEY = "BOOT2"
VER_KEY = "VER"
VMODE_KEY = "VMODE"
HDD_UNIT_POWER_KEY = "HDDUNITPOWER"


@dataclass
class _SystemCnfBuilder:
    elf_path: str | None = None
    version: str | None = None
    video_mode: VideoMode | None = None
    hdd_unit_power: str | None = None

    def build(self) -> SystemCnfModel:
        if self.elf_path is None:
            raise MissingField(BOOT2_KEY)
        if self.version is None:
            raise MissingField(VER_KEY)
        if self.video_mode is None:
            raise MissingField(VMODE_KEY)
        return SystemCnfModel(
            elf_path=self.elf_path,
            version=self.version,
            video_mode=self.video_mode,
            hdd_unit_power=self.hdd_unit_power,
        )


def _split_line(line: str, line_no: int) -> tuple[str, str]:
    parts = line.split(KEY_VALUE_SEPARATOR)
    if len(parts) < 2:
        raise MalformedFile(
            f"Line {line_no} has no '{KEY_VALUE_SEPARATOR}' separator", line_no=line_no, line=line
        )
    # Only the first two segments count; anything after a second "=" is dropped.
    return parts[0].strip(), parts[1].strip()


def _strip_session_suffix(path: str) -> str:
    if not path.endswith(SESSION_SUFFIX):
        return path
    with log_indent():
        LOGGER.debug("Stripping session suffix %r from %r", SESSION_SUFFIX, path)
    return path[: -len(SESSION_SUFFIX)]


def decode(raw_cnf: str) -> SystemCnfModel:
    """Parse the text of a ``SYSTEM.CNF`` file.

    Raises ``MalformedFile`` for a line without a separator,
    ``UnknownVideoMode`` for an unrecognized ``VMODE`` and ``MissingField``
    when ``BOOT2``, ``VER`` or ``VMODE`` never appear. Unknown keys are
    ignored.
    """
    builder = _SystemCnfBuilder()
    LOGGER.debug("Decoding SYSTEM.CNF (%d chars)", len(raw_cnf))
    with log_indent():
        for line_no, line in enumerate(raw_cnf.split(LINE_FEED), start=1):
            line = line.removesuffix(CARRIAGE_RETURN)
            if not line:
                continue
            key, value = _split_line(line, line_no)
            match key:
                case "BOOT2":
                    builder.elf_path = _strip_session_suffix(value)
                case "VER":
                    builder.version = value
                case "VMODE":
                    builder.video_mode = VideoMode.parse(value)
                case "HDDUNITPOWER":
                    builder.hdd_unit_power = value
                case _:
                    LOGGER.debug("Ignoring unknown key %r on line %d", key, line_no)
                    continue
            LOGGER.debug("%s = %s", key, value)

    model = builder.build()
    LOGGER.debug(
        "Decoded SYSTEM.CNF: boot=%s version=%s video_mode=%s",
        model.elf_path,
        model.version,
        model.video_mode,
    )
    return model


def decode_bytes(raw: bytes, encoding: str = "ascii") -> SystemCnfModel:
    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise MalformedFile(f"SYSTEM.CNF is not valid {encoding}: {exc}") from exc
    return decode(text)


def _field(key: str, value: str) -> str:
    return f"{key}{FIELD_SEPARATOR}{value}{LINE_ENDING}"


def encode(model: SystemCnfModel) -> str:
    """Render ``model`` in canonical field order with CRLF line endings."""
    lines = [
        _field(BOOT2_KEY, f"{model.elf_path}{SESSION_SUFFIX}"),
        _field(VER_KEY, model.version),
        _field(VMODE_KEY, model.video_mode.as_str()),
    ]
    if model.hdd_unit_power is not None:
        lines.append(_field(HDD_UNIT_POWER_KEY, model.hdd_unit_power))
    text = "".join(lines)
    LOGGER.debug("Encoded SYSTEM.CNF (%d lines)", len(lines))
    return text


def encode_bytes(model: SystemCnfModel, encoding: str = "ascii") -> bytes:
    return encode(model).encode(encoding)
