"""A small three-bit computer with three registers."""

import re

_NUMBER = re.compile(r"\d+")
_REGISTER_NAMES = ("A", "B", "C")


def parse_registers(text):
    """Read registers A, B and C from the first three lines."""
    lines = text.splitlines()
    if len(lines) < len(_REGISTER_NAMES):
        raise ValueError("expected three register lines")
    registers = {}
    for name, line in zip(_REGISTER_NAMES, lines):
        match = _NUMBER.search(line)
        if match is None:
            raise ValueError(f"no value for register {name} in line {line!r}")
        registers[name] = int(match.group())
    return registers


def parse_program(text):
    """Read the program numbers from the section after the blank line."""
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("expected registers and program separated by a blank line")
    return [int(token) for token in _NUMBER.findall(sections[1])]


def _register(registers, name):
    try:
        return registers[name]
    except KeyError:
        raise ValueError(f"register {name} is not set") from None


def _combo(registers, operand):
    if 4 <= operand <= 6:
        return _register(registers, _REGISTER_NAMES[operand - 4])
    return operand


def run(registers, program):
    """Execute the program; return the joined output and the final registers."""
    registers = dict(registers)
    program = list(program)
    output = []
    pointer = 0
    while True:
        if pointer + 1 >= len(program):
            raise ValueError(f"no complete instruction at position {pointer}")
        opcode, operand = program[pointer], program[pointer + 1]
        jump = None
        if opcode == 0:
            registers["A"] = _register(registers, "A") >> _combo(registers, operand)
        elif opcode == 1:
            registers["B"] = _register(registers, "B") ^ operand
        elif opcode == 2:
            registers["B"] = _combo(registers, operand) & 7
        elif opcode == 3:
            if _register(registers, "A") != 0:
                jump = operand
        elif opcode == 4:
            registers["B"] = _register(registers, "B") ^ _register(registers, "C")
        elif opcode == 5:
            output.append(_combo(registers, operand) & 7)
        elif opcode == 6:
            registers["B"] = _register(registers, "A") >> _combo(registers, operand)
        elif opcode == 7:
            registers["C"] = _register(registers, "A") >> _combo(registers, operand)
        else:
            raise ValueError(f"unknown opcode {opcode}")
        pointer = pointer + 2 if jump is None else jump
        if pointer >= len(program):
            break
    return ",".join(str(value) for value in output), registers


def part1(text):
    output, _ = run(parse_registers(text), parse_program(text))
    return output