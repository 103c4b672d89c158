"""Application layer: ports the logger depends on."""
