"""User tools, RISC-V paging arithmetic, ELF headers, an allocator and a shell parser of a small teaching OS."""

__version__ = "0.1.0"