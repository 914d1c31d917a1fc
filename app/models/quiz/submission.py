"""Submission log model - write-only analytics side channel."""

SUBMISSION_DDL = """
CREATE TABLE IF NOT EXISTS submission (
    question VARCHAR,
    themes VARCHAR,
    weights VARCHAR,
    ip_hash VARCHAR,
    user_id VARCHAR,
    created_at TIMESTAMP NOT NULL
)
"""
