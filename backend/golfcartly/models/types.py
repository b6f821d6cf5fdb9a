"""Column types that degrade to JSON on SQLite."""
from sqlalchemy import JSON, Text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB

TextArray = ARRAY(Text).with_variant(JSON(), "sqlite")
JSONBag = JSONB().with_variant(JSON(), "sqlite")
