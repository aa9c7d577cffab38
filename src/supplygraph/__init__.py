"""Supply-chain topology engine: cycle pre-checks, orphan detection and path tracing."""
