"""Document (party program) model."""

DOCUMENT_DDL = """
CREATE TABLE IF NOT EXISTS document (
    id VARCHAR PRIMARY KEY,
    party VARCHAR NOT NULL,
    title VARCHAR,
    url VARCHAR,
    year INTEGER,
    version VARCHAR,
    inserted_at TIMESTAMP NOT NULL
)
"""
