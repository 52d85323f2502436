# xv6tools

Pieces of a small RISC-V teaching operating system as a plain Python
library, together with a set of command-line tools that work on the
host's files.

## Modules

- `xv6tools.riscv` – Sv39 paging arithmetic and system parameters:
  `pg_round_up`, `pg_round_down`, `pa2pte`, `pte2pa`, `pte_flags`, `px`,
  `make_satp`, plus constants such as `PGSIZE`, `PTE_V`, `PTE_R`, `PTE_W`,
  `PTE_X`, `PTE_U`, `MAXVA`, `NPROC` and `MAXPATH`.
- `xv6tools.elf` – reading ELF64 headers: `parse_elf_header(data)` returns
  an `ElfHeader`, `parse_program_headers(data, header)` a list of
  `ProgramHeader` (with `is_load()`); malformed data raises `ElfError`
  (a `ValueError`).
- `xv6tools.fmt` – the small `printf` dialect (`%d %l %x %p %s %c %%`):
  `format_string(fmt, *args)` returns the text, `print_to(stream, fmt, *args)`
  writes it. Integers are treated as 32-bit words, `%p` as a 64-bit word;
  unknown conversions are echoed with their percent sign.
- `xv6tools.cstring` – C-style `atoi`, `strcmp` and `gets(stream, max)`.
- `xv6tools.heap` – `Heap(start=4096, limit=None)`, a first-fit,
  address-ordered free-list allocator handing out addresses with
  `malloc(nbytes)` and taking them back with `free(ap)`; neighbouring free
  blocks are merged. Growing past `limit` raises `MemoryError`; freeing an
  address that was not allocated raises `ValueError`.
- `xv6tools.shell` – `parse_command(line)` turns a command line into a tree
  of `ExecCommand`, `RedirCommand`, `PipeCommand`, `ListCommand` and
  `BackCommand`, or raises `ShellSyntaxError` (a `ValueError`). At most
  nine arguments per command are accepted.
- `xv6tools.grep` – the `^ . * $` matcher `match(re, text)` and
  `grep_lines(pattern, stream)`, which yields matching newline-terminated
  lines.
- `xv6tools.fileutils` – `cat(streams, out)`, `echo(args, out)` and
  `wc(stream)` (returning `(lines, words, chars)`), plus the command entry
  points.
- `xv6tools.walk` – `fmtname(path)`, `ls(path, out)` and
  `find(path, filename, out)`; directories are visited in name order.
- `xv6tools.sieve` – `primes(limit=35)`, a generator of primes built as a
  chain of filtering stages.
- `xv6tools.prng` – `ParkMiller(seed=1)`, an iterator over the
  Park–Miller minimal standard generator.

## Installation

```
pip install .
```

There are no third-party dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from xv6tools.riscv import pg_round_up, px
from xv6tools.fmt import format_string
from xv6tools.grep import match
from xv6tools.shell import parse_command
from xv6tools.sieve import primes

pg_round_up(4097)                 # 8192
px(2, 0x40000000)                 # 1
format_string("%d %s\n", -7, "x") # "-7 x\n"
match("^ab*c$", "abbbc")          # True
tree = parse_command("ls > out; cat < out | wc &")
list(primes(35))                  # [2, 3, 5, ..., 31]
```

## Command-line tools

```
xv6-cat [file ...]
xv6-echo [word ...]
xv6-wc [file ...]
xv6-grep pattern [file ...]
xv6-ls [path ...]
xv6-find directory filename
xv6-mkdir dir ...
xv6-rm file ...
xv6-ln old new
xv6-sleep ticks
xv6-primes
```

`xv6-sleep` counts in ticks of a tenth of a second. Usage mistakes print a
usage line on standard error and exit with status 1.

## What this package does not do

- It has no simulated virtual memory: `xv6tools.riscv` only does the bit
  arithmetic of page-table entries and addresses; there are no page tables
  to build, walk or copy through.
- `xv6tools.shell` only parses command lines; there is no interactive shell
  that runs the resulting commands.
- There is no kernel, file-system image or process model; the tools act on
  the host's own files and streams.