"""Application layer: ports and the formatter/pipeline use cases."""
