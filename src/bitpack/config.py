"""Configuration for bit buffers.

This module provides the validated configuration model consumed by BitBuffer.
There is no process-wide configuration: each buffer takes its own config (or
the defaults) at construction time.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CAPACITY_BYTES = 32


class BitPackConfig(BaseModel):
    """Configuration for BitBuffer construction.

    Attributes:
        default_capacity_bytes: Bytes preallocated by BitBuffer() when no explicit
            capacity is given (default 32). Preallocation only avoids growth
            later; it never changes the logical size of a new buffer.

    Examples:
        ```python
        from bitpack import BitBuffer, BitPackConfig

        # Small headers: start with a single byte
        config = BitPackConfig(default_capacity_bytes=1)
        buf = BitBuffer(config=config)
        ```
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        frozen=False,
    )

    default_capacity_bytes: int = Field(default=DEFAULT_CAPACITY_BYTES, ge=0)
