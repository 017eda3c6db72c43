"""Application layer: ports the façade depends on."""
