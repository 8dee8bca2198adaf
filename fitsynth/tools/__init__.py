"""Pure text-processing tools (no AI required)."""
