"""Application layer: schema extraction, builder generation and assembly."""
