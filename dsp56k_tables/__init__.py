"""DSP56300 opcode table and field decoding, with a ring buffer, semaphores and a fixed-size array."""

__version__ = "0.1.0"
__all__ = ["fields", "opcodes", "ringbuffer", "semaphore", "staticarray"]