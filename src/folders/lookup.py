"""Project folder lookup against the external folder store.

Reads the ``project_folders`` table of a PostgreSQL-compatible managed
database. The table is owned by the hosting application; this module only
reads from it.
"""

import logging

import psycopg2

from src.config import settings
from src.form.models import ProjectFolder

logger = logging.getLogger(__name__)

FOLDER_QUERY = """
    SELECT id, name FROM project_folders
    WHERE user_email = %s
    ORDER BY name ASC
"""


class ProjectFolderLookup:
    """Fetches the project folders that belong to a user."""

    def __init__(self, connection_string: str | None = None):
        """Initialize the lookup.

        Args:
            connection_string: Optional database connection string. Defaults
                to settings.db_connection_string.
        """
        self.conn_string = connection_string or settings.db_connection_string

    def fetch(self, user_identity: str) -> list[ProjectFolder]:
        """Fetch the user's folders, ordered by name.

        Failures are logged and reported as an empty list; nothing is
        retried or cached.

        Args:
            user_identity: Email address owning the folders.

        Returns:
            List of ProjectFolder, possibly empty.
        """
        conn = None
        try:
            conn = psycopg2.connect(self.conn_string)
            cur = conn.cursor()
            cur.execute(FOLDER_QUERY, (user_identity,))
            rows = cur.fetchall()
            cur.close()

            folders = [ProjectFolder(id=row[0], name=row[1]) for row in rows]
            logger.debug(f"Fetched {len(folders)} project folders for {user_identity}")
            return folders

        except Exception as e:
            logger.error(f"Error fetching project folders: {e}")
            return []
        finally:
            if conn:
                conn.close()
