"""
Database module - Async MongoDB connection manager.

Usage:
    from common.database import MongoDB

    db = MongoDB()
    await db.connect(uri, database_name)
    collection = db.get_collection("checkins")
"""

from common.database.mongodb import MongoDB

__all__ = ["MongoDB"]
