"""Unit tests for the probe-dbg command registry and per-command parsers."""

from __future__ import annotations

from pathlib import Path

import pytest

from probe_dbg.commands import CommandRegistry
from probe_dbg.commands.base import CommandDescriptor
from probe_dbg.commands.control import HaltCommand
from probe_dbg.errors import (
    EmptyCommandError,
    MalformedBooleanError,
    MalformedNumericError,
    MissingArgumentError,
    UnknownCommandError,
)
from probe_dbg.requests import (
    Attach,
    ClearAllBreakpoints,
    ClearBreakpoint,
    Code,
    Command,
    Continue,
    Exit,
    Flash,
    Halt,
    Read,
    Registers,
    Reset,
    SetBinary,
    SetBreakpoint,
    SetChip,
    SetProbeNumber,
    SetWorkDirectory,
    Stack,
    StackTrace,
    Status,
    Step,
    Variable,
    Variables,
)

EXPECTED_ORDER = [
    "attach",
    "set-work-directory",
    "stack",
    "code",
    "clear-all-breakpoints",
    "clear-breakpoint",
    "set-breakpoint",
    "registers",
    "variable",
    "variables",
    "set-chip",
    "set-probe-number",
    "stack-trace",
    "read",
    "reset",
    "flash",
    "step",
    "status",
    "exit",
    "continue",
    "halt",
    "set-binary",
]

REQUIRED_ARGUMENTS = {
    "set-work-directory": 1,
    "clear-breakpoint": 1,
    "set-breakpoint": 1,
    "variable": 1,
    "set-chip": 1,
    "set-probe-number": 1,
    "read": 1,
    "set-binary": 1,
}


def test_registry_keeps_registration_order(registry):
    assert registry.names() == EXPECTED_ORDER


def test_registry_rejects_duplicate_names():
    with pytest.raises(ValueError, match="halt"):
        CommandRegistry([HaltCommand(), HaltCommand()])


def test_empty_line_is_empty_command(registry):
    with pytest.raises(EmptyCommandError):
        registry.parse_command("")
    with pytest.raises(EmptyCommandError):
        registry.parse_command(" \t ")


def test_unknown_command_echoes_name_and_suggests_help(registry):
    with pytest.raises(UnknownCommandError) as excinfo:
        registry.parse_command("frobnicate 1 2")
    message = str(excinfo.value)
    assert "frobnicate" in message
    assert "help" in message
    assert excinfo.value.name == "frobnicate"


def test_lookup_is_case_sensitive(registry):
    with pytest.raises(UnknownCommandError):
        registry.parse_command("Halt")


@pytest.mark.parametrize("name", sorted(REQUIRED_ARGUMENTS))
def test_missing_required_argument(registry, name):
    with pytest.raises(MissingArgumentError) as excinfo:
        registry.parse_command(name)
    assert excinfo.value.command == name


@pytest.mark.parametrize(
    "line, expected",
    [
        ("stack", Stack()),
        ("code", Code()),
        ("clear-all-breakpoints", ClearAllBreakpoints()),
        ("registers", Registers()),
        ("variables", Variables()),
        ("stack-trace", StackTrace()),
        ("step", Step()),
        ("status", Status()),
        ("exit", Exit()),
        ("continue", Continue()),
        ("halt", Halt()),
        ("halt now please", Halt()),
    ],
)
def test_marker_commands(registry, line, expected):
    assert registry.parse_command(line) == Command(expected)


def test_attach_ignores_arguments(registry):
    expected = Attach(reset=False, reset_and_halt=False)
    assert registry.parse_command("attach").request == expected
    assert registry.parse_command("attach true true").request == expected


def test_string_argument_commands(registry):
    assert registry.parse_command("set-work-directory /tmp/fw").request == SetWorkDirectory(cwd="/tmp/fw")
    assert registry.parse_command("variable counter").request == Variable(name="counter")
    assert registry.parse_command("set-chip nRF52840_xxAA").request == SetChip(chip="nRF52840_xxAA")
    assert registry.parse_command("set-binary build/app.elf").request == SetBinary(path=Path("build/app.elf"))


def test_set_breakpoint_with_and_without_source(registry):
    request = registry.parse_command("set-breakpoint 0x1000 main.c").request
    assert request == SetBreakpoint(address=4096, source_file="main.c")
    request = registry.parse_command("set-breakpoint 0x1000").request
    assert request == SetBreakpoint(address=4096, source_file=None)


def test_set_breakpoint_ignores_extra_tokens(registry):
    request = registry.parse_command("set-breakpoint 16 main.c extra").request
    assert request == SetBreakpoint(address=16, source_file="main.c")


def test_clear_breakpoint_parses_address(registry):
    assert registry.parse_command("clear-breakpoint 0x20").request == ClearBreakpoint(address=32)
    with pytest.raises(MalformedNumericError):
        registry.parse_command("clear-breakpoint main")


def test_set_probe_number(registry):
    assert registry.parse_command("set-probe-number 2").request == SetProbeNumber(number=2)
    with pytest.raises(MalformedNumericError):
        registry.parse_command("set-probe-number two")


def test_read_address_and_size(registry):
    assert registry.parse_command("read 0x2000 2").request == Read(address=8192, byte_size=2)
    assert registry.parse_command("read 0x2000").request == Read(address=8192, byte_size=4)
    with pytest.raises(MalformedNumericError):
        registry.parse_command("read 0x2000 big")
    with pytest.raises(MalformedNumericError):
        registry.parse_command("read 0xG")


@pytest.mark.parametrize("name, variant", [("reset", Reset), ("flash", Flash)])
def test_reset_and_flash_flags(registry, name, variant):
    assert registry.parse_command(name).request == variant(reset_and_halt=False)
    assert registry.parse_command(f"{name} true").request == variant(reset_and_halt=True)
    assert registry.parse_command(f"{name} false").request == variant(reset_and_halt=False)
    with pytest.raises(MalformedBooleanError):
        registry.parse_command(f"{name} maybe")


def test_registry_survives_failed_parse(registry):
    with pytest.raises(MalformedBooleanError):
        registry.parse_command("reset maybe")
    assert registry.parse_command("reset true").request == Reset(reset_and_halt=True)


def test_request_kind_matches_command_name(registry):
    samples = {
        "set-work-directory": "x",
        "clear-breakpoint": "1",
        "set-breakpoint": "1",
        "variable": "x",
        "set-chip": "x",
        "set-probe-number": "1",
        "read": "1",
        "set-binary": "x",
    }
    for name in registry.names():
        line = f"{name} {samples.get(name, '')}"
        assert registry.parse_command(line).request.kind == name


def test_help_lists_every_command_in_order(registry):
    text = registry.check_if_help("help")
    lines = text.split("\n")
    assert lines[0] == "Available commands:"
    assert len(lines) == len(EXPECTED_ORDER) + 1
    names = [line.split(":", 1)[0].removeprefix("\t- ") for line in lines[1:]]
    assert names == EXPECTED_ORDER
    assert "\t- read: Read address in memory" in lines


def test_help_ignores_trailing_tokens(registry):
    assert registry.check_if_help("  help read ") == registry.check_if_help("help")


@pytest.mark.parametrize("line", ["", "   ", "halt", "helpme", "Help", "read help"])
def test_check_if_help_returns_none_for_other_input(registry, line):
    assert registry.check_if_help(line) is None


def test_help_is_not_a_registered_command(registry):
    with pytest.raises(UnknownCommandError):
        registry.parse_command("help")


def test_descriptor_base_requires_parse():
    descriptor = CommandDescriptor("noop", "Does nothing")
    assert descriptor.format_help() == "- noop: Does nothing"
    with pytest.raises(NotImplementedError):
        descriptor.parse([])


def test_list_commands_matches_names(registry):
    commands = registry.list_commands()
    assert [command.name for command in commands] == registry.names()
    assert all(isinstance(command, CommandDescriptor) for command in commands)
