"""Parsing of ELF64 executable headers and program headers."""

import struct
from dataclasses import dataclass

ELF_MAGIC = 0x464C457F  # "\x7FELF" read as a little-endian word

ELF_PROG_LOAD = 1

ELF_PROG_FLAG_EXEC = 1
ELF_PROG_FLAG_WRITE = 2
ELF_PROG_FLAG_READ = 4

_ELF_HEADER = struct.Struct("<I12sHHIQQQIHHHHHH")
_PROG_HEADER = struct.Struct("<IIQQQQQQ")

ELF_HEADER_SIZE = _ELF_HEADER.size
PROG_HEADER_SIZE = _PROG_HEADER.size


class ElfError(ValueError):
    """Raised when data is not a well-formed ELF image."""


@dataclass(frozen=True)
class ElfHeader:
    """The ELF file header."""

    magic: int
    ident: bytes
    type: int
    machine: int
    version: int
    entry: int
    phoff: int
    shoff: int
    flags: int
    ehsize: int
    phentsize: int
    phnum: int
    shentsize: int
    shnum: int
    shstrndx: int


@dataclass(frozen=True)
class ProgramHeader:
    """One entry of the program header table."""

    type: int
    flags: int
    off: int
    vaddr: int
    paddr: int
    filesz: int
    memsz: int
    align: int

    def is_load(self):
        """Whether this segment is to be loaded into memory."""
        return self.type == ELF_PROG_LOAD


def parse_elf_header(data):
    """Parse the file header at the start of ``data``; raise ElfError if invalid."""
    if len(data) < ELF_HEADER_SIZE:
        raise ElfError("file too short for an ELF header")
    header = ElfHeader(*_ELF_HEADER.unpack_from(data, 0))
    if header.magic != ELF_MAGIC:
        raise ElfError("bad ELF magic")
    return header


def parse_program_headers(data, header):
    """Return the program headers described by ``header`` as a list."""
    result = []
    for index in range(header.phnum):
        offset = header.phoff + index * PROG_HEADER_SIZE
        if offset + PROG_HEADER_SIZE > len(data):
            raise ElfError(f"program header {index} lies beyond end of file")
        result.append(ProgramHeader(*_PROG_HEADER.unpack_from(data, offset)))
    return result