# dsp56k-tables

Building blocks for a Motorola DSP56300-family emulator or disassembler.

## Modules

- `dsp56k_tables.opcodes` holds the instruction table.
  - `OPCODES` is a tuple of `OpcodeInfo` entries in table order. Each entry has
    `instruction` (an `Instruction` member), `opcode` (the 24-character bit
    pattern), `assembly` (the syntax text) and `extension_word_type` (an
    `ExtensionWordType`). It also has `mask0` and `mask1`, the masks of its
    fixed zero bits and fixed one bits.
  - `OpcodeInfo.matches(word)` tells whether every fixed bit of the pattern
    agrees with a 24-bit word.
  - `OpcodeInfo.field(field)` locates a `Field` in the entry's pattern.
  - `OpcodeInfo.is_parallel_opcode(word)` tells whether a word encodes an
    instruction with a parallel move.
  - `find_opcodes(word)` returns every matching entry in table order. The two
    placeholder entries `ResolveCache` and `Parallel` are never returned.
  - `opcode_for(instruction)` returns the entry for an `Instruction`.
  - `create_mask(opcode, c, c2=None)` builds a mask with a bit set wherever
    the pattern holds `c` or `c2`. The leftmost character is bit 23.
- `dsp56k_tables.fields` locates operand fields such as `MMM` or `RRR` in an
  opcode pattern.
  - The `Field` enum names every field by its character and width.
  - `init_field(opcode, ch, count)` finds the first run of exactly `count`
    characters `ch` and returns a `FieldInfo` with `bit`, `length` and
    `mask`. If there is no such run, it returns an empty `FieldInfo()`.
  - `field_info(opcode, field)` does the same for a `Field` member.
  - `FieldInfo.extract(word)` returns the field's value in a word.
- `dsp56k_tables.ringbuffer` provides `RingBuffer(capacity, lock=False)`. The
  capacity must be a power of two.
  - It offers `push_back`, `pop_front`, `front`, `remove_at`, indexing,
    `len()`, `capacity()`, `empty()`, `full()`, `remaining()`, `clear()`,
    `wait_not_empty()` and `wait_not_full()`.
  - With `lock=True`, pushing blocks while the buffer is full and popping
    blocks while it is empty. Without it, both raise `IndexError`.
  - `remove_at` moves the front element into the freed slot, so the order of
    the remaining elements is not kept.
- `dsp56k_tables.semaphore` provides a counting `Semaphore` with `notify()`,
  `wait()` and a `value` property. `NopSemaphore` has the same methods and
  never blocks.
- `dsp56k_tables.staticarray` provides `StaticArray(size, fill=None)`, a
  fixed-length array.
  - Indexes are checked on every access and raise `IndexError` when out of
    bounds.
  - It supports `len()`, iteration, `is_valid_index(index)` and
    `fill(value)`.

## Installation

```
pip install .
```

## Example

```python
from dsp56k_tables.opcodes import find_opcodes, opcode_for, Instruction
from dsp56k_tables.fields import Field
from dsp56k_tables.ringbuffer import RingBuffer

nop = opcode_for(Instruction.Nop)
print(nop.assembly)                       # NOP
print([op.instruction for op in find_opcodes(0x000000)])

bra_rn = opcode_for(Instruction.Bra_Rn)
print(bra_rn.field(Field.RRR).extract(0x0D1BC0))

rb = RingBuffer(16)
rb.push_back(3)
rb.push_back(4)
print(rb.front(), len(rb), rb.remaining())   # 3 2 14
```

## What this package does not do

It holds tables and helpers only. It does not execute instructions, model
registers or memory, or turn words into formatted disassembly text. It has no
command-line tool.

## Running the tests

```
pip install .[test]
pytest
```