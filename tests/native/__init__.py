"""Native library loading, signatures and Result handling."""
