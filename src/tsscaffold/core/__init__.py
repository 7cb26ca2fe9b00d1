"""Core scaffolding pipeline: contracts, derivation, planning and I/O."""
