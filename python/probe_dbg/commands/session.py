"""Session setup commands (attach, chip, probe, binary, work directory)."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .base import CommandDescriptor
from ..parser import parse_u32, require_arg
from ..requests import Attach, SetBinary, SetChip, SetProbeNumber, SetWorkDirectory


class AttachCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("attach", "Attach to the target")

    def parse(self, argv: Sequence[str]) -> Attach:
        # TODO: accept reset/reset_and_halt flags once the executor defines their syntax.
        return Attach(reset=False, reset_and_halt=False)


class SetWorkDirectoryCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("set-work-directory", "Set the current work directory")

    def parse(self, argv: Sequence[str]) -> SetWorkDirectory:
        return SetWorkDirectory(cwd=require_arg(argv, 0, self.name, "path"))


class SetChipCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("set-chip", "Set chip model being used")

    def parse(self, argv: Sequence[str]) -> SetChip:
        return SetChip(chip=require_arg(argv, 0, self.name, "chip"))


class SetProbeNumberCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("set-probe-number", "Set the probe number to use")

    def parse(self, argv: Sequence[str]) -> SetProbeNumber:
        number = parse_u32(require_arg(argv, 0, self.name, "number"))
        return SetProbeNumber(number=number)


class SetBinaryCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("set-binary", "Set the binary file to debug")

    def parse(self, argv: Sequence[str]) -> SetBinary:
        return SetBinary(path=Path(require_arg(argv, 0, self.name, "path")))
