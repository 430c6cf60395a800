"""Application layer – reconciliation, ingestion and failure handling."""
