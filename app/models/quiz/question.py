"""Question (quiz statement) model."""

QUESTION_DDL = """
CREATE TABLE IF NOT EXISTS question (
    id INTEGER PRIMARY KEY,
    statement VARCHAR NOT NULL,
    category VARCHAR NOT NULL,
    description VARCHAR,
    order_index INTEGER DEFAULT 0,
    active BOOLEAN DEFAULT TRUE
)
"""
