"""Application layer – search engine, pagination, export and employee use-cases."""
