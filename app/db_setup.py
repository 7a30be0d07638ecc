# Schema setup for the calendar database
import logging
import database

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ["events"]


def check_db_is_setup():
    """Check if the calendar database exists and contains all required tables."""
    db_cursor = database.get_cursor()
    db_cursor.execute("SHOW DATABASES")
    databases = [db[0] for db in db_cursor.fetchall()]

    if database.MYSQL_DATABASE not in databases:
        return False

    db_cursor.execute(f"USE {database.MYSQL_DATABASE}")
    db_cursor.execute("SHOW TABLES")
    tables = [table[0] for table in db_cursor.fetchall()]

    database.get_connection().commit()

    return all(table in tables for table in REQUIRED_TABLES)


def create_db_and_scheme():
    """Create the calendar database and the events table."""
    db_cursor = database.get_cursor()

    db_cursor.execute(f"CREATE DATABASE IF NOT EXISTS {database.MYSQL_DATABASE};")
    db_cursor.execute(f"USE {database.MYSQL_DATABASE};")
    # One row per occurrence, occurrences of a recurring event share repeat_id
    db_cursor.execute(
        """
        CREATE TABLE IF NOT EXISTS events (
            id                   CHAR(36)     PRIMARY KEY,
            title                VARCHAR(255) NOT NULL,
            date                 DATE         NOT NULL,
            start_time           CHAR(5)      NOT NULL,
            end_time             CHAR(5)      NOT NULL,
            description          TEXT         NULL,
            location             VARCHAR(255) NULL,
            category             VARCHAR(64)  NULL,
            repeat_type          ENUM('none','daily','weekly','monthly','yearly') NOT NULL DEFAULT 'none',
            repeat_interval      SMALLINT     NOT NULL DEFAULT 1,
            repeat_end_date      DATE         NULL,
            repeat_id            CHAR(36)     NULL,
            notification_time    INT          NOT NULL DEFAULT 10,
            created_at           DATETIME     NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at           DATETIME     NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            INDEX idx_events_repeat_id (repeat_id),
            INDEX idx_events_date (date)
        );
        """
    )

    database.get_connection().commit()


def setup_database():
    """Ensure the database is configured, create the schema if needed."""
    logger.info("Checking if the database is set up...")
    if not check_db_is_setup():
        logger.info("Database not found or incomplete. Setting up...")
        create_db_and_scheme()
        logger.info("Database and tables created successfully.")
        return True

    logger.info("Database is already set up.")
    return False
