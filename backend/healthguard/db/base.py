"""
SQLAlchemy Declarative Base
Every HealthGuard table (users, profiles, health records, daily logs,
assessments, analyses, reports, chat messages, error logs) is registered
on this base so that Base.metadata.create_all() can build the schema.
"""

from sqlalchemy.orm import declarative_base

# Usage:
#     from healthguard.db.base import Base
#
#     class ChatMessage(Base):
#         __tablename__ = "chat_messages"
#         ...
Base = declarative_base()
